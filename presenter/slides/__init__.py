"""
Layout element builders and text sanitization for slide variants.
"""

from presenter.slides.builders import SlideVariant, build_slide_variant
from presenter.slides.sanitize import process_content
from presenter.slides.elements import infer_mime_type

__all__ = [
    "SlideVariant",
    "build_slide_variant",
    "process_content",
    "infer_mime_type",
]
