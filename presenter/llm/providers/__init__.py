"""
LLM Providers

This module contains all LLM provider implementations following consistent
naming conventions: {deployment}_{service}.py pattern.

Available Providers:
    - CloudGeminiProvider: Google Gemini API (cloud_gemini.py)
    - CloudOpenAIProvider: OpenAI API (cloud_openai.py)
    - CloudAnthropicProvider: Anthropic API (cloud_anthropic.py)

All providers implement the BaseLLMProvider interface defined in base.py.
"""

from presenter.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse

__all__ = [
    "BaseLLMProvider",
    "LLMRequest",
    "LLMResponse",
]
