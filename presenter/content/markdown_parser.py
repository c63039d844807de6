"""
Markdown Extraction Pass

Parses the scrape provider's markdown rendering into a NormalizedContent
record. Main points are collected in tiers: headings first, then long bold
spans, then long paragraphs. A tier only engages while fewer than three
points have been found.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from presenter.content.models import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    MAX_IMAGES,
    MAX_POINTS,
    NormalizedContent,
)
from presenter.content.urls import resolve_url


logger = logging.getLogger(__name__)

TITLE_HEADING_PATTERN = re.compile(r'^#\s+(.+)$', re.MULTILINE)
TITLE_BOLD_PATTERN = re.compile(r'^\*\*(.+?)\*\*$', re.MULTILINE)
LONE_LINK_PATTERN = re.compile(r'^\[.+?\]\(.+?\)$')
SUBHEADING_PATTERN = re.compile(r'^(#{2,4})\s+(.+)$', re.MULTILINE)
BOLD_PATTERN = re.compile(r'\*\*(.+?)\*\*')
IMAGE_PATTERN = re.compile(r'!\[.*?\]\((.+?)\)')

MIN_DESCRIPTION_LENGTH = 30
MIN_BOLD_POINT_LENGTH = 15
MIN_PARAGRAPH_POINT_LENGTH = 50
MIN_POINTS_PER_TIER = 3


def extract_title(markdown: str) -> Optional[str]:
    """Return the first level-1 heading, else the first line that is entirely bold."""
    match = TITLE_HEADING_PATTERN.search(markdown)
    if match and match.group(1).strip():
        return match.group(1).strip()

    match = TITLE_BOLD_PATTERN.search(markdown)
    if match and match.group(1).strip():
        return match.group(1).strip()

    return None


def extract_description(markdown: str) -> Optional[str]:
    """Return the first line longer than 30 characters that is body text.

    Headings, image markdown and lines consisting of a single link are skipped.
    """
    for line in markdown.split('\n'):
        stripped = line.strip()
        if (
            len(stripped) > MIN_DESCRIPTION_LENGTH
            and not stripped.startswith('#')
            and not stripped.startswith('!')
            and not LONE_LINK_PATTERN.match(stripped)
        ):
            return stripped
    return None


def extract_main_points(markdown: str, description: Optional[str] = None) -> List[str]:
    """Collect up to five key points from the markdown.

    Args:
        markdown: Page markdown
        description: Line already used as the description; it is not
            repeated as a paragraph point

    Returns:
        Points in document order
    """
    points: List[str] = []

    for match in SUBHEADING_PATTERN.finditer(markdown):
        if len(points) >= MAX_POINTS:
            break
        heading = match.group(2).strip()
        if heading:
            points.append(heading)

    if len(points) < MIN_POINTS_PER_TIER:
        for match in BOLD_PATTERN.finditer(markdown):
            if len(points) >= MAX_POINTS:
                break
            text = match.group(1).strip()
            if len(match.group(1)) > MIN_BOLD_POINT_LENGTH:
                points.append(text)

    if len(points) < MIN_POINTS_PER_TIER:
        for line in markdown.split('\n'):
            if len(points) >= MAX_POINTS:
                break
            stripped = line.strip()
            if (
                len(stripped) > MIN_PARAGRAPH_POINT_LENGTH
                and not stripped.startswith('#')
                and not stripped.startswith('!')
                and '](' not in stripped
                and stripped != description
            ):
                points.append(stripped)

    return points


def extract_image_urls(markdown: str, base_url: str) -> List[str]:
    """Collect up to five image URLs from ![alt](url) links.

    Relative URLs are resolved against base_url; unresolvable ones are skipped.
    """
    image_urls: List[str] = []

    for match in IMAGE_PATTERN.finditer(markdown):
        if len(image_urls) >= MAX_IMAGES:
            break
        target = match.group(1).strip()
        # ![alt](url "title")
        target = target.split()[0] if target else target
        resolved = resolve_url(target, base_url)
        if resolved:
            image_urls.append(resolved)

    return image_urls


def parse_markdown_content(
    markdown: str,
    base_url: str,
    metadata: Optional[Dict[str, Any]] = None
) -> NormalizedContent:
    """Parse markdown into a NormalizedContent record.

    Args:
        markdown: Page markdown from the scrape provider
        base_url: Page URL for resolving relative image links
        metadata: Provider metadata; its 'title' is used when the markdown has none

    Returns:
        NormalizedContent with placeholder title/description where nothing was found
    """
    metadata = metadata or {}

    title = extract_title(markdown) or metadata.get('title') or DEFAULT_TITLE
    description = extract_description(markdown)
    main_points = extract_main_points(markdown, description)
    image_urls = extract_image_urls(markdown, base_url)

    result = NormalizedContent(
        title=title,
        description=description or DEFAULT_DESCRIPTION,
        main_points=main_points[:MAX_POINTS],
        image_urls=image_urls,
    )
    logger.debug(f"Parsed markdown data: {result.to_json_dict()}")
    return result
