"""
Content Extractor

Runs the markdown and HTML extraction passes over a scrape result and
merges them into one NormalizedContent record.
"""

import logging

from presenter.content.html_parser import parse_html_content
from presenter.content.markdown_parser import parse_markdown_content
from presenter.content.merge import combine_content
from presenter.content.models import NormalizedContent, ScrapeResult
from presenter.errors import ExtractionError


logger = logging.getLogger(__name__)


class ContentExtractor:
    """Turns raw scrape output into NormalizedContent.

    Example:
        >>> extractor = ContentExtractor()
        >>> content = extractor.extract(ScrapeResult(url=url, markdown=markdown))
        >>> print(content.main_points)
    """

    def extract(self, scrape: ScrapeResult) -> NormalizedContent:
        """Parse both formats when available and merge the results.

        Args:
            scrape: Raw markdown/HTML and metadata for one URL

        Returns:
            Merged, deduplicated content record

        Raises:
            ExtractionError: If neither markdown nor HTML is available
        """
        if not scrape.has_content:
            raise ExtractionError(
                f"Scrape result for {scrape.url} contains neither markdown nor HTML data"
            )

        markdown_data = (
            parse_markdown_content(scrape.markdown, scrape.url, scrape.metadata)
            if scrape.markdown else None
        )
        html_data = parse_html_content(scrape.html, scrape.url) if scrape.html else None

        content = combine_content(markdown_data, html_data, scrape.metadata)
        logger.info(
            f"Extracted '{content.title}': {len(content.main_points)} points, "
            f"{len(content.image_urls)} images"
        )
        return content
