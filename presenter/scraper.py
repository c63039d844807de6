"""
Firecrawl Scraper

Thin client for the Firecrawl scrape endpoint. Requests both markdown and
HTML renderings of the page's main content and returns them untouched;
parsing happens in presenter.content.
"""

import logging
from typing import Optional

import requests

from presenter.config import ScraperConfig
from presenter.content.models import ScrapeResult
from presenter.errors import ConfigurationError, ExtractionError
from presenter.remote import post_json


logger = logging.getLogger(__name__)


class FirecrawlScraper:
    """Fetches a page through the Firecrawl API.

    Example:
        >>> scraper = FirecrawlScraper(ScraperConfig(api_key="fc-..."))
        >>> result = scraper.scrape("https://example.com/article")
        >>> print(result.markdown[:100])
    """

    def __init__(self, config: ScraperConfig, session: Optional[requests.Session] = None):
        """Initialize the scraper.

        Args:
            config: Scrape provider configuration
            session: Optional HTTP session (a new one is created if not provided)

        Raises:
            ConfigurationError: If the API key is not configured
        """
        if not config.api_key:
            raise ConfigurationError(
                "Firecrawl API key not configured. "
                "Set FIRECRAWL_API_KEY environment variable or provide in config."
            )
        self.config = config
        self.session = session or requests.Session()

    def scrape(self, url: str) -> ScrapeResult:
        """Scrape a URL into raw markdown/HTML plus metadata.

        Args:
            url: Page to scrape

        Returns:
            ScrapeResult with whatever formats the provider returned

        Raises:
            RemoteCallError: If the HTTP call fails
            ExtractionError: If the response has no data or neither format
        """
        logger.info(f"Scraping webpage content: {url}")

        body = post_json(
            self.session,
            f"{self.config.base_url.rstrip('/')}/scrape",
            "scrape webpage content",
            payload={
                "url": url,
                "formats": ["markdown", "html"],
                "onlyMainContent": True,
                "waitFor": self.config.wait_for,
                "timeout": self.config.timeout,
                "removeBase64Images": True,
                "blockAds": True,
            },
            headers={
                "Authorization": f"Bearer {self.config.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.config.request_timeout,
        )

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            logger.warning("Unexpected scrape API response format")
            raise ExtractionError("Invalid scrape API response structure")

        result = ScrapeResult(
            url=url,
            markdown=data.get("markdown") or None,
            html=data.get("html") or None,
            metadata=data.get("metadata") or {},
        )

        if not result.has_content:
            raise ExtractionError("Scrape API response contains neither markdown nor HTML data")

        logger.info("Webpage content scraped successfully")
        return result
