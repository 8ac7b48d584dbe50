"""
Domain Layer - Pure Formatting Objects

This package contains domain models and errors.
No dependencies on infrastructure or external systems.
"""

from waformat.domain.models import (
    CopyOutcome,
    FormatKind,
    FormatKindLike,
    FormatMarker,
)
from waformat.domain.errors import (
    CopyFailedError,
    DomainError,
    NothingToCopyError,
    UnknownExampleError,
    UnknownFormatError,
)

__all__ = [
    "FormatKind",
    "FormatKindLike",
    "FormatMarker",
    "CopyOutcome",
    "DomainError",
    "UnknownFormatError",
    "UnknownExampleError",
    "NothingToCopyError",
    "CopyFailedError",
]
