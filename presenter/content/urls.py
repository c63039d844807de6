"""URL helpers shared by the markdown and HTML extraction passes."""

import logging
from typing import Optional
from urllib.parse import urljoin, urlparse


logger = logging.getLogger(__name__)


def resolve_url(url: str, base_url: str) -> Optional[str]:
    """Resolve a possibly relative URL against the page URL.

    URLs already starting with "http" are returned untouched. Anything that
    does not resolve to an absolute http(s) URL is logged and dropped.

    Args:
        url: Link target as found in the page
        base_url: URL of the scraped page

    Returns:
        Absolute URL, or None when resolution fails
    """
    url = url.strip()
    if not url:
        return None
    if url.startswith("http"):
        return url

    try:
        resolved = urljoin(base_url or "", url)
        parsed = urlparse(resolved)
    except ValueError:
        logger.warning(f"Failed to convert relative URL: {url}")
        return None

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        logger.warning(f"Failed to convert relative URL: {url}")
        return None
    return resolved
