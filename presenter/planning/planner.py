"""
Content Slide Planner

Plans slides directly from extracted content, without a model: a title
slide carrying the description, a key-points slide, and an image slide for
the first image found on the page.
"""

import logging
from typing import List

from presenter.content.models import NormalizedContent
from presenter.planning.schemas import SlideDescriptor, SlideLayout


logger = logging.getLogger(__name__)

KEY_POINTS_TITLE = "Key Points"
BULLET = "•"


def presentation_title(title: str) -> str:
    """Title given to the presentation itself."""
    return f"Presentation: {title}"


class ContentSlidePlanner:
    """Maps NormalizedContent onto an ordered list of slide descriptors.

    Example:
        >>> slides = ContentSlidePlanner().plan(content)
        >>> [s.layout for s in slides]
        ['TITLE_AND_BODY_LAYOUT', 'TITLE_AND_BODY_LAYOUT', 'IMAGE_ONLY_LAYOUT']
    """

    def __init__(self, include_images: bool = True):
        self.include_images = include_images

    def plan(self, content: NormalizedContent) -> List[SlideDescriptor]:
        slides = [
            SlideDescriptor(
                layout=SlideLayout.TITLE_AND_BODY.value,
                title=content.title,
                content={"body": content.description},
            )
        ]

        if content.main_points:
            slides.append(SlideDescriptor(
                layout=SlideLayout.TITLE_AND_BODY.value,
                title=KEY_POINTS_TITLE,
                content={"body": "\n".join(f"{BULLET} {point}" for point in content.main_points)},
            ))

        if self.include_images and content.image_urls:
            slides.append(SlideDescriptor(
                layout=SlideLayout.IMAGE_ONLY.value,
                title=content.title,
                content={"imageUrl": content.image_urls[0], "imageCaption": content.title},
            ))

        logger.info(f"Planned {len(slides)} slides from extracted content")
        return slides
