"""
Layout Element Builders

One builder per slide layout. Each turns a validated slide into a
row-major element grid: the first row is always the heading textbox and
every later row is anchored below it.

Rows per layout:
    TITLE_AND_BODY                  heading | body textbox
    IMAGE_ONLY                      heading | image container
    TEXT_SECTIONS_AND_CONCLUSION    heading | sections container | conclusion
    TITLE_AND_TIMELINE              heading | timeline container
    TITLE_AND_TABLE                 heading | table container
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Union

from presenter.planning.schemas import (
    ImageOnlySlide,
    Slide,
    SlideDescriptor,
    SlideLayout,
    TableSlide,
    TextSectionsSlide,
    TimelineSlide,
    TitleAndBodySlide,
    resolve_slide,
)
from presenter.slides import elements
from presenter.slides.elements import Element
from presenter.slides.sanitize import process_content


logger = logging.getLogger(__name__)

MAX_SECTIONS_IN_FIRST_ROW = 3

# Timeline zigzag tracks
TIMELINE_BOTTOM_ROW = 2
TIMELINE_TOP_ROW = 0


@dataclass
class SlideVariant:
    """Element grid for one slide, ready to submit as a variant.

    Attributes:
        layout: Layout the grid was built for
        rows: Row-major element grid
        title_element_id: Id of the heading element later rows anchor to
    """
    layout: SlideLayout
    rows: List[List[Element]]
    title_element_id: str

    def to_payload(self) -> Dict[str, Any]:
        """Body of the element_slide_variant field."""
        return {"type": self.layout.value, "elements": self.rows}


def _heading(title: str) -> Element:
    return elements.heading_textbox(process_content(title))


def build_title_and_body(slide: TitleAndBodySlide) -> SlideVariant:
    heading = _heading(slide.title)
    body = elements.body_textbox(
        process_content(slide.content.body, is_markdown=True),
        anchor_id=heading["id"],
    )
    return SlideVariant(SlideLayout.TITLE_AND_BODY, [[heading], [body]], heading["id"])


def build_image_only(slide: ImageOnlySlide) -> SlideVariant:
    heading = _heading(slide.title)
    caption = slide.content.image_caption
    image = elements.image_element(
        slide.content.image_url,
        caption=process_content(caption) if caption else None,
    )
    if not slide.content.image_url:
        logger.debug(f"Slide '{slide.title}' has no image URL, using a placeholder image")

    image_container = elements.container("image", [image], anchor_id=heading["id"])
    return SlideVariant(SlideLayout.IMAGE_ONLY, [[heading], [image_container]], heading["id"])


def build_text_sections(slide: TextSectionsSlide) -> SlideVariant:
    heading = _heading(slide.title)

    section_boxes = []
    for number, section in enumerate(slide.content.sections, start=1):
        text = (
            f"{number}. {process_content(section.heading)}\n"
            f"{process_content(section.content, is_markdown=True)}"
        )
        section_boxes.append(elements.textbox(text, array_index=number - 1))

    sections = elements.container(
        "sections",
        section_boxes,
        anchor_id=heading["id"],
        elements_shown_in_first_row=min(len(section_boxes), MAX_SECTIONS_IN_FIRST_ROW),
    )

    rows = [[heading], [sections]]
    if slide.content.conclusion.strip():
        rows.append([elements.textbox(
            process_content(slide.content.conclusion, is_markdown=True),
            anchor_id=heading["id"],
        )])

    return SlideVariant(SlideLayout.TEXT_SECTIONS_AND_CONCLUSION, rows, heading["id"])


def timeline_line_index(event_count: int) -> int:
    """Position of the decorative timeline line among the event containers."""
    return max(event_count // 2 - 1, 0)


def build_timeline(slide: TimelineSlide) -> SlideVariant:
    heading = _heading(slide.title)

    events = []
    for index, event in enumerate(slide.content.events):
        row = TIMELINE_BOTTOM_ROW if index % 2 == 0 else TIMELINE_TOP_ROW

        # "##" is added after escaping so it still renders as a heading
        event_heading = elements.textbox(
            f"## {process_content(event.title)}",
            subtype="heading",
        )
        body = process_content(event.description, is_markdown=True)
        if event.time.strip():
            body = f"**{process_content(event.time)}**\n{body}"
        event_body = elements.textbox(body)

        events.append(elements.container(
            "timeline_event",
            [event_heading, event_body],
            array_index=index,
            row_index=row,
        ))

    line_index = timeline_line_index(len(events))
    children = list(events)
    children.insert(line_index, elements.ui_element(
        "timeline_line",
        array_index=line_index,
        row_index=1,
    ))

    timeline = elements.container("timeline", children, anchor_id=heading["id"])
    return SlideVariant(SlideLayout.TITLE_AND_TIMELINE, [[heading], [timeline]], heading["id"])


def build_table(slide: TableSlide) -> SlideVariant:
    heading = _heading(slide.title)
    headers = slide.content.headers
    column_count = len(headers)

    cells = [
        elements.textbox(process_content(text), subtype="table_header", row=0, column=column)
        for column, text in enumerate(headers)
    ]

    for row_number, row in enumerate(slide.content.rows, start=1):
        if len(row) > column_count:
            logger.debug(
                f"Table row {row_number} of '{slide.title}' has {len(row)} cells, "
                f"truncating to {column_count}"
            )
        padded = (list(row) + [""] * column_count)[:column_count]
        for column, text in enumerate(padded):
            cells.append(elements.textbox(
                process_content(text),
                subtype="table_cell",
                row=row_number,
                column=column,
            ))

    table = elements.container(
        "table",
        cells,
        anchor_id=heading["id"],
        row_count=len(slide.content.rows) + 1,
        column_count=column_count,
    )
    return SlideVariant(SlideLayout.TITLE_AND_TABLE, [[heading], [table]], heading["id"])


_BUILDERS: Dict[type, Callable[[Any], SlideVariant]] = {
    TitleAndBodySlide: build_title_and_body,
    ImageOnlySlide: build_image_only,
    TextSectionsSlide: build_text_sections,
    TimelineSlide: build_timeline,
    TableSlide: build_table,
}


def build_slide_variant(slide: Union[SlideDescriptor, Slide]) -> SlideVariant:
    """Build the element grid for a planned or validated slide.

    Descriptors are validated first; those missing required fields for
    their layout are built as TITLE_AND_BODY.

    Args:
        slide: Slide descriptor or typed slide

    Returns:
        SlideVariant for submission

    Raises:
        TypeError: If the slide type has no builder
    """
    if isinstance(slide, SlideDescriptor):
        slide = resolve_slide(slide)

    builder = _BUILDERS.get(type(slide))
    if builder is None:
        raise TypeError(f"No layout builder for {type(slide).__name__}")
    return builder(slide)
