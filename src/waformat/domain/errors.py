"""
Domain Errors - Formatting and Copy Exceptions

This module defines domain-specific exceptions raised by the formatter,
the session model and the copy service.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class UnknownFormatError(DomainError, ValueError):
    """Raised when a whole-text format is requested for an unknown marker kind."""
    pass


class UnknownExampleError(DomainError, IndexError):
    """Raised when a preset example index does not exist."""
    pass


class NothingToCopyError(DomainError):
    """Raised when a copy is requested while the formatted text is empty."""
    pass


class CopyFailedError(DomainError):
    """Raised when both the primary and the fallback copy channels failed."""
    pass
