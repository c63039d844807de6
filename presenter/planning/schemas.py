"""
Slide Schemas

SlideDescriptor is the untrusted record a planner emits (layout tag, title,
free-form content dict). resolve_slide() validates it against the content
shape of its declared layout and returns one of the typed slide variants,
falling back to a title-and-body slide when required fields are missing.
"""

import logging
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)


logger = logging.getLogger(__name__)


class SlideLayout(str, Enum):
    """The five slide layouts the presentation service understands."""
    TITLE_AND_BODY = "TITLE_AND_BODY_LAYOUT"
    IMAGE_ONLY = "IMAGE_ONLY_LAYOUT"
    TEXT_SECTIONS_AND_CONCLUSION = "TEXT_SECTIONS_AND_CONCLUSION_LAYOUT"
    TITLE_AND_TIMELINE = "TITLE_AND_TIMELINE_LAYOUT"
    TITLE_AND_TABLE = "TITLE_AND_TABLE_LAYOUT"

    @classmethod
    def from_value(cls, value: Any) -> Optional['SlideLayout']:
        """Look up a layout by wire value or short name, case-insensitively.

        Returns None for unknown layouts.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        normalized = str(value).strip().upper().replace('-', '_').replace(' ', '_')
        if not normalized.endswith('_LAYOUT'):
            normalized = f"{normalized}_LAYOUT"
        try:
            return cls(normalized)
        except ValueError:
            return None


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class SlideDescriptor(BaseModel):
    """A planned slide before validation.

    Attributes:
        layout: Layout tag as emitted by the planner
        title: Slide title
        content: Layout-specific payload, unvalidated
    """
    layout: str = SlideLayout.TITLE_AND_BODY.value
    title: str = ""
    content: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('layout', 'title', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if isinstance(v, Enum):
            return v.value
        return _to_text(v)

    @field_validator('content', mode='before')
    @classmethod
    def coerce_content(cls, v: Any) -> Dict[str, Any]:
        """Accept a bare string as a body and anything else non-dict as empty."""
        if isinstance(v, dict):
            return v
        if isinstance(v, str):
            return {"body": v}
        return {}


# ============================================================================
# Layout content shapes
# ============================================================================

class TitleAndBodyContent(BaseModel):
    body: str = ""

    @field_validator('body', mode='before')
    @classmethod
    def join_list_body(cls, v: Any) -> str:
        """Lists of bullet strings become a markdown bullet list."""
        if isinstance(v, list):
            return "\n".join(f"- {_to_text(item)}" for item in v)
        return _to_text(v)


class ImageOnlyContent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    image_caption: Optional[str] = Field(default=None, alias="imageCaption")

    @field_validator('image_url', 'image_caption', mode='before')
    @classmethod
    def blank_to_none(cls, v: Any) -> Optional[str]:
        text = _to_text(v).strip()
        return text or None


class Section(BaseModel):
    heading: str = ""
    content: str = ""

    @field_validator('heading', 'content', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _to_text(v)


class TextSectionsContent(BaseModel):
    sections: List[Section] = Field(min_length=1)
    conclusion: str = ""

    @field_validator('conclusion', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _to_text(v)


class TimelineEvent(BaseModel):
    time: str = ""
    title: str = ""
    description: str = ""

    @field_validator('time', 'title', 'description', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _to_text(v)


class TimelineContent(BaseModel):
    events: List[TimelineEvent] = Field(min_length=1)


class TableContent(BaseModel):
    headers: List[str] = Field(min_length=1)
    rows: List[List[str]] = Field(min_length=1)

    @field_validator('headers', mode='before')
    @classmethod
    def coerce_headers(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [_to_text(cell) for cell in v]
        return v

    @field_validator('rows', mode='before')
    @classmethod
    def coerce_rows(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [
                [_to_text(cell) for cell in row] if isinstance(row, list) else row
                for row in v
            ]
        return v


# ============================================================================
# Typed slide variants (discriminated on layout)
# ============================================================================

class _TypedSlide(BaseModel):
    title: str = ""

    @field_validator('title', mode='before')
    @classmethod
    def coerce_title(cls, v: Any) -> str:
        return _to_text(v)


class TitleAndBodySlide(_TypedSlide):
    layout: Literal[SlideLayout.TITLE_AND_BODY] = SlideLayout.TITLE_AND_BODY
    content: TitleAndBodyContent = Field(default_factory=TitleAndBodyContent)


class ImageOnlySlide(_TypedSlide):
    layout: Literal[SlideLayout.IMAGE_ONLY] = SlideLayout.IMAGE_ONLY
    content: ImageOnlyContent = Field(default_factory=ImageOnlyContent)


class TextSectionsSlide(_TypedSlide):
    layout: Literal[SlideLayout.TEXT_SECTIONS_AND_CONCLUSION] = SlideLayout.TEXT_SECTIONS_AND_CONCLUSION
    content: TextSectionsContent


class TimelineSlide(_TypedSlide):
    layout: Literal[SlideLayout.TITLE_AND_TIMELINE] = SlideLayout.TITLE_AND_TIMELINE
    content: TimelineContent


class TableSlide(_TypedSlide):
    layout: Literal[SlideLayout.TITLE_AND_TABLE] = SlideLayout.TITLE_AND_TABLE
    content: TableContent


Slide = Annotated[
    Union[TitleAndBodySlide, ImageOnlySlide, TextSectionsSlide, TimelineSlide, TableSlide],
    Field(discriminator='layout'),
]

_SLIDE_ADAPTER = TypeAdapter(Slide)

# Content keys tried, in order, for the body of a fallback slide
FALLBACK_BODY_KEYS = ("body", "text", "description", "conclusion", "imageCaption", "caption")


def fallback_body(content: Dict[str, Any]) -> str:
    """Pick the first non-empty body-like string from a content payload."""
    for key in FALLBACK_BODY_KEYS:
        value = content.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return ""


def fallback_slide(descriptor: SlideDescriptor) -> TitleAndBodySlide:
    """Title-and-body rendering of any descriptor."""
    return TitleAndBodySlide(
        title=descriptor.title,
        content=TitleAndBodyContent(body=fallback_body(descriptor.content)),
    )


def resolve_slide(descriptor: SlideDescriptor) -> Slide:
    """Validate a descriptor against its declared layout.

    Unknown layouts and payloads missing required fields (sections, events,
    table headers/rows) fall back to TITLE_AND_BODY with a warning. A
    missing image URL is not a failure: IMAGE_ONLY renders a placeholder.

    Args:
        descriptor: Untrusted planned slide

    Returns:
        One of the typed slide variants
    """
    layout = SlideLayout.from_value(descriptor.layout)
    if layout is None:
        logger.warning(
            f"Unknown layout '{descriptor.layout}' for slide '{descriptor.title}', "
            "using TITLE_AND_BODY_LAYOUT"
        )
        return fallback_slide(descriptor)

    try:
        return _SLIDE_ADAPTER.validate_python({
            "layout": layout,
            "title": descriptor.title,
            "content": descriptor.content,
        })
    except ValidationError as e:
        missing = sorted({str(err['loc'][-1]) for err in e.errors() if err.get('loc')})
        logger.warning(
            f"Slide '{descriptor.title}' is missing required {layout.value} fields "
            f"({', '.join(missing) or 'content'}), using TITLE_AND_BODY_LAYOUT"
        )
        return fallback_slide(descriptor)
