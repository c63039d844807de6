"""
Text Sanitizer

Escapes free text before it is embedded in the presentation service's
content fields, which render a markdown-like markup.
"""

import html
from typing import Any

MARKDOWN_CHARS = "*_`~[]()"

_MARKDOWN_ESCAPES = str.maketrans({char: f"\\{char}" for char in MARKDOWN_CHARS})


def process_content(text: Any, is_markdown: bool = False) -> str:
    """Escape text for a slide content field.

    HTML metacharacters (& < > " ') are always entity-escaped. Plain text
    additionally gets markdown metacharacters backslash-escaped so that it
    renders literally; pass is_markdown=True for fields whose markdown
    (bullets, emphasis, links) should render.

    Args:
        text: Text to escape; None becomes the empty string
        is_markdown: Leave markdown metacharacters unescaped

    Returns:
        Escaped text

    Example:
        >>> process_content("<b>50% off</b>")
        '&lt;b&gt;50% off&lt;/b&gt;'
        >>> process_content("*bold*")
        '\\\\*bold\\\\*'
    """
    if text is None:
        return ""

    escaped = html.escape(str(text), quote=True)

    if is_markdown:
        return escaped

    return escaped.translate(_MARKDOWN_ESCAPES)
