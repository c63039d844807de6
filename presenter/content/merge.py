"""
Content Merge

Combines the markdown and HTML extraction passes into one record.
Markdown results are preferred; HTML results fill in placeholders and add
points that are not near-duplicates of points already kept.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from presenter.content.models import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    MAX_IMAGES,
    MAX_POINTS,
    NormalizedContent,
)


logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.7
MIN_WORD_LENGTH = 3


def calculate_similarity(text1: str, text2: str) -> float:
    """Jaccard similarity of the word sets of two strings.

    Only words longer than three characters count. Returns 0.0 when either
    side has no such words.
    """
    words1 = {word for word in text1.split() if len(word) > MIN_WORD_LENGTH}
    words2 = {word for word in text2.split() if len(word) > MIN_WORD_LENGTH}

    if not words1 or not words2:
        return 0.0

    intersection = len(words1 & words2)
    return intersection / (len(words1) + len(words2) - intersection)


def is_point_duplicate(new_point: str, existing_points: Iterable[str]) -> bool:
    """Check whether a point repeats one already kept.

    A point is a duplicate when, case-insensitively, one string contains the
    other or their word overlap exceeds SIMILARITY_THRESHOLD.
    """
    new_lower = new_point.lower()

    for existing in existing_points:
        existing_lower = existing.lower()
        if (
            new_lower in existing_lower
            or existing_lower in new_lower
            or calculate_similarity(new_lower, existing_lower) > SIMILARITY_THRESHOLD
        ):
            return True

    return False


def merge_points(*sources: Optional[List[str]]) -> List[str]:
    """Concatenate point lists in order, capped at MAX_POINTS.

    The first (preferred) source only loses exact repeats; points from later
    sources are dropped when they near-duplicate any point already kept.
    Distinct headings such as "Point One" and "Point Two" overlap on every
    long word, so the similarity test is not applied within the first source.
    """
    merged: List[str] = []
    for index, source in enumerate(sources):
        for point in source or []:
            if index == 0:
                if point not in merged:
                    merged.append(point)
            elif not is_point_duplicate(point, merged):
                merged.append(point)
    return merged[:MAX_POINTS]


def merge_images(*sources: Optional[List[str]]) -> List[str]:
    """Concatenate image URL lists in order, dropping exact repeats, capped at MAX_IMAGES."""
    merged: List[str] = []
    for source in sources:
        for url in source or []:
            if url not in merged:
                merged.append(url)
    return merged[:MAX_IMAGES]


def combine_content(
    markdown_data: Optional[NormalizedContent],
    html_data: Optional[NormalizedContent],
    metadata: Optional[Dict[str, Any]] = None
) -> NormalizedContent:
    """Merge the two extraction passes.

    Title and description come from the markdown pass unless it holds the
    placeholder, then from the HTML pass, then the placeholder (for the
    title, the provider metadata title before the placeholder).

    Args:
        markdown_data: Result of the markdown pass, or None
        html_data: Result of the HTML pass, or None
        metadata: Provider metadata (may include 'title')
    """
    metadata = metadata or {}

    title = metadata.get('title') or DEFAULT_TITLE
    if markdown_data and markdown_data.title and markdown_data.title != DEFAULT_TITLE:
        title = markdown_data.title
    elif html_data and html_data.title and html_data.title != DEFAULT_TITLE:
        title = html_data.title

    description = DEFAULT_DESCRIPTION
    if (
        markdown_data
        and markdown_data.description
        and markdown_data.description != DEFAULT_DESCRIPTION
    ):
        description = markdown_data.description
    elif html_data and html_data.description and html_data.description != DEFAULT_DESCRIPTION:
        description = html_data.description

    result = NormalizedContent(
        title=title,
        description=description,
        main_points=merge_points(
            markdown_data.main_points if markdown_data else None,
            html_data.main_points if html_data else None,
        ),
        image_urls=merge_images(
            markdown_data.image_urls if markdown_data else None,
            html_data.image_urls if html_data else None,
        ),
    )

    logger.debug(f"Combined content data: {result.to_json_dict()}")
    return result
