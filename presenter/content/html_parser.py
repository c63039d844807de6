"""
HTML Extraction Pass

Parses the scrape provider's HTML into a NormalizedContent record using
BeautifulSoup.
"""

import logging
from typing import List

from bs4 import BeautifulSoup

from presenter.content.models import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    MAX_IMAGES,
    MAX_POINTS,
    NormalizedContent,
)
from presenter.content.urls import resolve_url


logger = logging.getLogger(__name__)

MIN_PARAGRAPH_POINT_LENGTH = 50
MIN_HEADING_POINTS = 3


def _text(element) -> str:
    return element.get_text().strip() if element is not None else ""


def _extract_title(soup: BeautifulSoup) -> str:
    return _text(soup.find('title')) or _text(soup.find('h1')) or DEFAULT_TITLE


def _extract_description(soup: BeautifulSoup) -> str:
    meta = soup.find('meta', attrs={'name': 'description'})
    if meta is not None and meta.get('content', '').strip():
        return meta['content'].strip()
    return _text(soup.find('p')) or DEFAULT_DESCRIPTION


def _extract_main_points(soup: BeautifulSoup) -> List[str]:
    points = [text for text in (_text(el) for el in soup.find_all(['h2', 'h3'])) if text]

    if len(points) < MIN_HEADING_POINTS:
        for paragraph in soup.find_all('p'):
            if len(points) >= MAX_POINTS:
                break
            text = _text(paragraph)
            if len(text) > MIN_PARAGRAPH_POINT_LENGTH:
                points.append(text)

    return points[:MAX_POINTS]


def _extract_image_urls(soup: BeautifulSoup, base_url: str) -> List[str]:
    image_urls: List[str] = []
    for img in soup.find_all('img'):
        if len(image_urls) >= MAX_IMAGES:
            break
        src = img.get('src')
        if not src:
            continue
        resolved = resolve_url(src, base_url)
        if resolved:
            image_urls.append(resolved)
    return image_urls


def parse_html_content(html: str, base_url: str) -> NormalizedContent:
    """Parse HTML into a NormalizedContent record.

    - title: <title>, else first <h1>
    - description: meta description, else first <p>
    - main points: <h2>/<h3> text, topped up with long paragraphs when fewer than three
    - images: first five <img src>, resolved against base_url

    Args:
        html: Page HTML from the scrape provider
        base_url: Page URL for resolving relative image sources
    """
    soup = BeautifulSoup(html, 'html.parser')

    result = NormalizedContent(
        title=_extract_title(soup),
        description=_extract_description(soup),
        main_points=_extract_main_points(soup),
        image_urls=_extract_image_urls(soup, base_url),
    )
    logger.debug(f"Parsed HTML data: {result.to_json_dict()}")
    return result
