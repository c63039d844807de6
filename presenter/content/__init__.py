"""
Content Extraction

Parses scraped markdown and HTML into a NormalizedContent record and merges
the two passes (markdown preferred).
"""

from presenter.content.models import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    MAX_IMAGES,
    MAX_POINTS,
    NormalizedContent,
    ScrapeResult,
)
from presenter.content.extractor import ContentExtractor
from presenter.content.merge import combine_content, is_point_duplicate, calculate_similarity

__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_TITLE",
    "MAX_IMAGES",
    "MAX_POINTS",
    "NormalizedContent",
    "ScrapeResult",
    "ContentExtractor",
    "combine_content",
    "is_point_duplicate",
    "calculate_similarity",
]
