"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Rate limiting
- Language management
- Logging configuration
"""

from waformat.shared.validators import (
    parse_example_index,
    parse_format_kind,
    validate_bot_token,
)
from waformat.shared.rate_limiter import rate_limiter, RATE_LIMITS
from waformat.shared.language import (
    translate,
    LANG_ENGLISH,
    LANG_FARSI,
)

__all__ = [
    "validate_bot_token",
    "parse_format_kind",
    "parse_example_index",
    "rate_limiter",
    "RATE_LIMITS",
    "translate",
    "LANG_ENGLISH",
    "LANG_FARSI",
]
