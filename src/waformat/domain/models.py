"""
Domain Models - Markers and Copy Results

This module contains domain models representing core formatting concepts:
- The five marker kinds WhatsApp text can be styled with
- The delimiter (or literal tag) each kind wraps text in
- The outcome of a copy request

Files that USE this module:
- waformat.adapters.formatting.formatter (marker table for whole-text formatting)
- waformat.application.* (session and copy service)
- waformat.adapters.telegram.* (keyboard labels and callback data)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Base class for the fixed set of marker kinds
from typing import Union  # Type hints for kind-or-string arguments


class FormatKind(str, Enum):
    """The five whole-text formats offered by the quick-format buttons."""
    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    MONO = "mono"
    SPOILER = "spoiler"


# Accepted wherever a kind is requested: the enum itself or its string value
FormatKindLike = Union[FormatKind, str]


@dataclass(frozen=True)
class FormatMarker:
    """
    Delimiter used to wrap a whole text for one format kind.
    
    Attributes:
        kind: Format kind this marker belongs to
        token: String placed before and after the text
        label: Caption shown on the quick-format button
        padding: String inserted in front of the text before wrapping
    """
    kind: FormatKind
    token: str
    label: str
    padding: str = ""

    def wrap(self, text: str) -> str:
        """Wrap text with this marker."""
        return f"{self.token}{self.padding}{text}{self.token}"


@dataclass(frozen=True)
class CopyOutcome:
    """
    Result of a successful copy request.
    
    Attributes:
        channel: Name of the writer that delivered the text
        used_fallback: True when the primary writer failed and the fallback was used
    """
    channel: str
    used_fallback: bool = False
