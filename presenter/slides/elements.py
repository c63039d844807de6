"""
Slide Element Factories

Small builders for the presentation service's element schema. Elements are
plain dicts in the exact wire shape; these factories hold the dimension
defaults and anchoring rules so the layout builders only state structure.
"""

import uuid
from pathlib import PurePosixPath
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

Element = Dict[str, Any]

HEADING_HEIGHT = 56
BODY_HEIGHT = 503
GRID_COLUMN_COUNT = 24
MIN_GRID_COLUMN_COUNT = 2

PRESET_TEXTBOX = "textbox_basic"

IMAGE_USER_PROVIDED = "user-provided"
IMAGE_PLACEHOLDER = "placeholder"

DEFAULT_MIME_TYPE = "image/jpeg"

MIME_TYPES = {
    "svg": "image/svg+xml",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "ico": "image/x-icon",
    "tiff": "image/tiff",
    "tif": "image/tiff",
    "avif": "image/avif",
}


def new_id() -> str:
    """Fresh client-side element identifier."""
    return str(uuid.uuid4())


def dimensions(
    manual_height: Optional[int] = None,
    width_fraction: Optional[float] = None,
    grid_column_count: int = GRID_COLUMN_COUNT
) -> Dict[str, Any]:
    return {
        "widthFraction": width_fraction,
        "minHeight": "auto",
        "manualHeight": manual_height,
        "height": None,
        "width": None,
        "paddingHorizontal": "auto",
        "paddingVertical": "auto",
        "shouldRecalculate": False,
        "minGridColumnCount": MIN_GRID_COLUMN_COUNT,
        "gridColumnCount": grid_column_count,
        "horizontalAlignment": None,
        "verticalAlignment": None,
    }


def anchored_below(element_id: Optional[str]) -> Dict[str, Any]:
    """Relative position directly below another element, automatic gap.

    With no anchor the element is positioned by its row.
    """
    top = {"element_id": element_id, "delta": "auto"} if element_id else None
    return {"top": top, "left": None}


def element(
    type_: str,
    subtype: str,
    content: Any = None,
    anchor_id: Optional[str] = None,
    manual_height: Optional[int] = None,
    preset_type: Optional[str] = None,
    array_index: Optional[int] = None,
    row_index: Optional[int] = None,
    **extra: Any
) -> Element:
    node = {
        "id": new_id(),
        "type": type_,
        "subtype": subtype,
        "array_index": array_index,
        "row_index": row_index,
        "relative_position": anchored_below(anchor_id),
        "dimensions": dimensions(manual_height=manual_height),
        "preset_type": preset_type,
        "content": content,
        "prose_mirror_content": None,
        "background": {"fill": None, "outline": None},
    }
    node.update(extra)
    return node


def textbox(
    content: str,
    subtype: str = "mixed",
    anchor_id: Optional[str] = None,
    manual_height: Optional[int] = None,
    **extra: Any
) -> Element:
    return element(
        "textbox",
        subtype,
        content=content,
        anchor_id=anchor_id,
        manual_height=manual_height,
        preset_type=PRESET_TEXTBOX,
        **extra
    )


def heading_textbox(title: str) -> Element:
    """First-row heading of every layout. Expects already-sanitized text."""
    return textbox(title, subtype="heading", manual_height=HEADING_HEIGHT)


def body_textbox(content: str, anchor_id: Optional[str]) -> Element:
    return textbox(content, subtype="mixed", anchor_id=anchor_id, manual_height=BODY_HEIGHT)


def container(
    subtype: str,
    children: List[Element],
    anchor_id: Optional[str] = None,
    **extra: Any
) -> Element:
    """Container element owning its children.

    Each child gets a parent_id back-reference to the container.
    """
    node = element(
        "container",
        subtype,
        anchor_id=anchor_id,
        preset_type=f"{subtype}_basic",
        children=children,
        **extra
    )
    for child in children:
        child["parent_id"] = node["id"]
    return node


def ui_element(subtype: str, **extra: Any) -> Element:
    """Decorative element with no content."""
    return element("ui_only", subtype, **extra)


def image_element(url: Optional[str], caption: Optional[str] = None) -> Element:
    """Image element; a missing URL yields a placeholder image."""
    tag = IMAGE_USER_PROVIDED if url else IMAGE_PLACEHOLDER
    return element(
        "image",
        tag,
        content=caption,
        image={
            "url": url,
            "mime_type": infer_mime_type(url) if url else DEFAULT_MIME_TYPE,
        },
    )


def infer_mime_type(url: str) -> str:
    """Guess an image MIME type from the URL's file extension.

    Unrecognized extensions that mention "gif" are treated as GIFs;
    anything else defaults to JPEG.
    """
    path = urlparse(url).path or url
    extension = PurePosixPath(path).suffix.lower().lstrip(".")

    if extension in MIME_TYPES:
        return MIME_TYPES[extension]
    if "gif" in extension:
        return MIME_TYPES["gif"]
    return DEFAULT_MIME_TYPE
