"""
Copy Service - Delivering Formatted Text and the "Copied!" Indicator

This module implements the copy operation: the formatted text is handed to a
primary clipboard writer, and if that fails, to a fallback writer. Both
successful paths raise the session's copied indicator, which resets itself
after a short hold time. A failure of both writers is reported instead of
being shown as a success.

Files that USE this module:
- waformat.application.session (each session owns a CopyIndicator)
- waformat.adapters.telegram.handlers (builds a CopyService per copy request)
- waformat.adapters.telegram.clipboard (writers implement ClipboardWriter)
- tests.test_copy_service (unit tests)

Files that this module USES:
- waformat.domain.models (CopyOutcome)
- waformat.domain.errors (CopyFailedError, NothingToCopyError)
"""
from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from waformat.domain.errors import CopyFailedError, NothingToCopyError
from waformat.domain.models import CopyOutcome

logger = logging.getLogger(__name__)

DEFAULT_HOLD_SECONDS = 2.0


class ClipboardWriter(ABC):
    """Destination the formatted text is copied to."""

    name: str = "clipboard"

    @abstractmethod
    async def write(self, text: str) -> None:
        """Deliver ``text``. Raise on failure."""
        raise NotImplementedError


class CopyIndicator:
    """
    Boolean "copied" flag that switches itself off after ``hold_seconds``.

    The pending switch-off is an asyncio timer handle; marking the indicator
    again cancels the previous timer, so only the latest copy decides when
    the indicator goes back to False.
    """

    def __init__(self, hold_seconds: float = DEFAULT_HOLD_SECONDS,
                 on_reset: Optional[Callable[[], None]] = None):
        """
        Initialize the indicator.

        Args:
            hold_seconds: How long the indicator stays True after a copy
            on_reset: Optional callback invoked after the timer switched the indicator off
        """
        self.hold_seconds = hold_seconds
        self.on_reset = on_reset
        self._copied = False
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    @property
    def copied(self) -> bool:
        return self._copied

    @property
    def reset_pending(self) -> bool:
        return self._reset_handle is not None

    def mark_copied(self) -> None:
        """
        Switch the indicator on and schedule its reset.

        Must be called from a running event loop.
        """
        loop = asyncio.get_running_loop()
        self.cancel()
        self._copied = True
        self._reset_handle = loop.call_later(self.hold_seconds, self._expire)

    def cancel(self) -> None:
        """Drop a pending reset without touching the current state."""
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def clear(self) -> None:
        """Cancel any pending reset and switch the indicator off immediately."""
        self.cancel()
        self._copied = False

    def _expire(self) -> None:
        self._reset_handle = None
        self._copied = False
        if self.on_reset is not None:
            try:
                self.on_reset()
            except Exception:
                logger.exception("Copy indicator reset callback failed")


class CopyService:
    """Copies text through a primary writer with a fallback writer behind it."""

    def __init__(self, primary: ClipboardWriter, fallback: ClipboardWriter):
        self.primary = primary
        self.fallback = fallback

    async def copy(self, text: str, indicator: CopyIndicator) -> CopyOutcome:
        """
        Copy text and raise the indicator.

        Args:
            text: Formatted text to copy
            indicator: Indicator to switch on after a successful copy

        Returns:
            CopyOutcome naming the writer that delivered the text

        Raises:
            NothingToCopyError: If text is empty
            CopyFailedError: If both the primary and the fallback writer failed
        """
        if not text:
            raise NothingToCopyError("Formatted text is empty")

        try:
            await self.primary.write(text)
            outcome = CopyOutcome(channel=self.primary.name)
        except Exception as primary_error:
            logger.warning(
                "Primary copy via %s failed (%s: %s), trying %s",
                self.primary.name,
                type(primary_error).__name__,
                primary_error,
                self.fallback.name,
            )
            try:
                await self.fallback.write(text)
            except Exception as fallback_error:
                logger.error(
                    "Fallback copy via %s failed: %s",
                    self.fallback.name,
                    fallback_error,
                    exc_info=True,
                )
                raise CopyFailedError(
                    f"Copy failed via {self.primary.name} and {self.fallback.name}"
                ) from fallback_error
            outcome = CopyOutcome(channel=self.fallback.name, used_fallback=True)

        indicator.mark_copied()
        logger.info("Copied %d characters via %s", len(text), outcome.channel)
        return outcome
