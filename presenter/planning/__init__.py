"""
Slide Planning

Turns extracted content (or a model-produced plan) into an ordered list of
slide descriptors, and validates each descriptor against its layout.
"""

from presenter.planning.schemas import (
    SlideLayout,
    SlideDescriptor,
    Slide,
    TitleAndBodySlide,
    ImageOnlySlide,
    TextSectionsSlide,
    TimelineSlide,
    TableSlide,
    resolve_slide,
)
from presenter.planning.planner import ContentSlidePlanner, presentation_title
from presenter.planning.llm_planner import LLMSlidePlanner, parse_slide_plan, content_to_markdown

__all__ = [
    "SlideLayout",
    "SlideDescriptor",
    "Slide",
    "TitleAndBodySlide",
    "ImageOnlySlide",
    "TextSectionsSlide",
    "TimelineSlide",
    "TableSlide",
    "resolve_slide",
    "ContentSlidePlanner",
    "presentation_title",
    "LLMSlidePlanner",
    "parse_slide_plan",
    "content_to_markdown",
]
