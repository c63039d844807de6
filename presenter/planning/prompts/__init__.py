"""Prompt templates for model-based slide planning."""

from presenter.planning.prompts.loader import PromptLoader
from presenter.planning.prompts.renderer import PromptRenderer

__all__ = ["PromptLoader", "PromptRenderer"]
