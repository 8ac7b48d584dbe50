"""
Formatting Adapters - WhatsApp Markup

This package contains the text rewriting used for WhatsApp output.
"""

from waformat.adapters.formatting.formatter import (
    MARKERS,
    SPOILER_PADDING,
    SPOILER_TAG,
    ZERO_WIDTH_SPACE,
    apply_whole_text_format,
    get_marker,
    render_preview,
    transform,
)

__all__ = [
    "MARKERS",
    "SPOILER_PADDING",
    "SPOILER_TAG",
    "ZERO_WIDTH_SPACE",
    "apply_whole_text_format",
    "get_marker",
    "render_preview",
    "transform",
]
