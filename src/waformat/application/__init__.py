"""
Application Layer - Sessions and Copy Service

This package contains the interactive state of a formatting session and the
copy operation. No Telegram dependencies - writers are injected.
"""

from waformat.application.copy_service import ClipboardWriter, CopyIndicator, CopyService
from waformat.application.session import (
    EXAMPLE_MESSAGES,
    FormatterSession,
    SessionRegistry,
    session_registry,
)

__all__ = [
    "ClipboardWriter",
    "CopyIndicator",
    "CopyService",
    "EXAMPLE_MESSAGES",
    "FormatterSession",
    "SessionRegistry",
    "session_registry",
]
