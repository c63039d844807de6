"""
Content Models

Records passed between the scraper, the two extraction passes and the
slide planners.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_TITLE = "Untitled"
DEFAULT_DESCRIPTION = "No description available"
MAX_POINTS = 5
MAX_IMAGES = 5


@dataclass
class ScrapeResult:
    """Raw scrape provider output for one URL.

    Attributes:
        url: The scraped URL, also the base for resolving relative links
        markdown: Markdown rendering of the page, if the provider returned one
        html: HTML of the page main content, if the provider returned one
        metadata: Provider metadata (may include 'title')
    """
    url: str
    markdown: Optional[str] = None
    html: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_content(self) -> bool:
        return bool(self.markdown) or bool(self.html)


class NormalizedContent(BaseModel):
    """Structured page content produced by extraction.

    Serialises with camelCase keys (mainPoints, imageUrls) to match the
    JSON the rest of the toolchain exchanges.

    Attributes:
        title: Page title, DEFAULT_TITLE when none was found
        description: First substantial paragraph, DEFAULT_DESCRIPTION when none
        main_points: Up to MAX_POINTS key points, first-seen order
        image_urls: Up to MAX_IMAGES absolute image URLs, first-seen order
    """
    model_config = ConfigDict(populate_by_name=True)

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    main_points: List[str] = Field(default_factory=list, alias="mainPoints")
    image_urls: List[str] = Field(default_factory=list, alias="imageUrls")

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump with camelCase aliases."""
        return self.model_dump(by_alias=True)
