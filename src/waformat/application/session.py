"""
Session - Per-chat Formatter State

This module holds the interactive state of one formatting session: the text
the user typed, its WhatsApp-formatted projection and the copied indicator.
The formatted text is recomputed explicitly by set_input() after every
mutation, so it can never drift from the input.

Nothing is persisted: sessions live in memory and are dropped on reset or
restart.

Files that USE this module:
- waformat.adapters.telegram.handlers (session_registry for every update)
- waformat.adapters.telegram.keyboards (reads can_format / can_copy / copied)
- tests.test_session (unit tests)

Files that this module USES:
- waformat.adapters.formatting.formatter (transform, apply_whole_text_format)
- waformat.application.copy_service (CopyIndicator)
- waformat.domain (FormatKindLike, UnknownExampleError)
- waformat.config (settings for the character limit and indicator hold time)
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from waformat.adapters.formatting.formatter import apply_whole_text_format, transform
from waformat.application.copy_service import CopyIndicator
from waformat.domain.errors import UnknownExampleError
from waformat.domain.models import FormatKindLike

logger = logging.getLogger(__name__)

EXAMPLE_MESSAGES: List[str] = [
    "The movie ending: ||The butler did it||",
    "Game spoiler: ||The princess is in another castle||",
    "News: ||Election results will be announced tomorrow||",
]


class FormatterSession:
    """Input text, formatted text and copy state of a single chat."""

    def __init__(self, char_limit: int = 1000, hold_seconds: float = 2.0,
                 language: Optional[str] = None):
        """
        Initialize an empty session.

        Args:
            char_limit: Character count shown as the counter's denominator (not enforced)
            hold_seconds: How long the copied indicator stays on
            language: UI language code, None for the configured default
        """
        self.char_limit = char_limit
        self.language = language
        self.indicator = CopyIndicator(hold_seconds=hold_seconds)
        self.panel_message_id: Optional[int] = None
        self._input_text = ""
        self._formatted_text = ""

    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def formatted_text(self) -> str:
        return self._formatted_text

    @property
    def char_counter(self) -> str:
        """Counter shown next to the input, e.g. '42/1000'."""
        return f"{len(self._input_text)}/{self.char_limit}"

    @property
    def can_format(self) -> bool:
        """Quick-format buttons are disabled for empty or whitespace-only input."""
        return bool(self._input_text.strip())

    @property
    def can_copy(self) -> bool:
        return bool(self._formatted_text)

    @property
    def copied(self) -> bool:
        return self.indicator.copied

    def set_input(self, text: str) -> str:
        """
        Replace the input text and recompute the formatted text.

        Args:
            text: New input text

        Returns:
            The new formatted text
        """
        self._input_text = text
        self._formatted_text = transform(text)
        return self._formatted_text

    def apply_format(self, kind: FormatKindLike) -> str:
        """
        Wrap the whole input with a marker (no-op for blank input).

        Args:
            kind: Format kind to apply

        Returns:
            The new formatted text

        Raises:
            UnknownFormatError: If kind is not a known format kind
        """
        return self.set_input(apply_whole_text_format(self._input_text, kind))

    def load_example(self, index: int) -> str:
        """
        Overwrite the input with a preset example message.

        Args:
            index: 0-based index into EXAMPLE_MESSAGES

        Returns:
            The new formatted text

        Raises:
            UnknownExampleError: If index is out of range
        """
        if not 0 <= index < len(EXAMPLE_MESSAGES):
            raise UnknownExampleError(f"No example with index {index}")
        return self.set_input(EXAMPLE_MESSAGES[index])

    def reset(self) -> None:
        """Discard both texts and any pending indicator reset."""
        self.indicator.clear()
        self.panel_message_id = None
        self._input_text = ""
        self._formatted_text = ""


class SessionRegistry:
    """In-memory map of chat id to FormatterSession."""

    def __init__(self, char_limit: Optional[int] = None, hold_seconds: Optional[float] = None):
        """
        Initialize the registry.

        Args:
            char_limit: Counter limit for new sessions (default: settings.input_char_limit)
            hold_seconds: Indicator hold time for new sessions (default: settings.copy_indicator_seconds)
        """
        self._char_limit = char_limit
        self._hold_seconds = hold_seconds
        self._sessions: Dict[int, FormatterSession] = {}

    def _new_session(self) -> FormatterSession:
        # Lazy import to avoid circular dependency
        from waformat.config import settings
        return FormatterSession(
            char_limit=self._char_limit or settings.input_char_limit,
            hold_seconds=self._hold_seconds or settings.copy_indicator_seconds,
        )

    def get(self, chat_id: int) -> FormatterSession:
        """Return the session for a chat, creating it on first use."""
        session = self._sessions.get(chat_id)
        if session is None:
            session = self._new_session()
            self._sessions[chat_id] = session
            logger.debug("Created session for chat %s", chat_id)
        return session

    def discard(self, chat_id: int) -> None:
        """Drop a chat's session, cancelling its pending indicator reset."""
        session = self._sessions.pop(chat_id, None)
        if session is not None:
            session.reset()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, chat_id: int) -> bool:
        return chat_id in self._sessions


# Global session registry instance
session_registry = SessionRegistry()
