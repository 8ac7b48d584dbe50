"""
Copy Service Tests - Unit Tests for Copy Delivery and the Copied Indicator

This module tests the primary/fallback copy path, the reporting of a total
copy failure and the self-resetting "copied" indicator.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- waformat.application.copy_service (ClipboardWriter, CopyIndicator, CopyService)
- waformat.domain.errors (CopyFailedError, NothingToCopyError)
- pytest (testing framework)
"""
import asyncio  # Event loop for async writers and timers

import pytest  # Testing framework for writing and running tests

from waformat.application.copy_service import ClipboardWriter, CopyIndicator, CopyService
from waformat.domain.errors import CopyFailedError, NothingToCopyError


class RecordingWriter(ClipboardWriter):
    """Writer that records texts or raises a preset error."""

    def __init__(self, name, error=None):
        self.name = name
        self.error = error
        self.texts = []

    async def write(self, text):
        if self.error is not None:
            raise self.error
        self.texts.append(text)


class TestCopyService:
    def test_primary_success(self):
        primary = RecordingWriter("primary")
        fallback = RecordingWriter("fallback")
        indicator = CopyIndicator(hold_seconds=2.0)

        async def scenario():
            outcome = await CopyService(primary, fallback).copy("*hi*", indicator)
            assert indicator.copied
            indicator.clear()
            return outcome

        outcome = asyncio.run(scenario())
        assert outcome.channel == "primary"
        assert not outcome.used_fallback
        assert primary.texts == ["*hi*"]
        assert fallback.texts == []

    def test_fallback_used_when_primary_fails(self):
        primary = RecordingWriter("primary", error=RuntimeError("clipboard unavailable"))
        fallback = RecordingWriter("fallback")
        indicator = CopyIndicator(hold_seconds=2.0)

        async def scenario():
            outcome = await CopyService(primary, fallback).copy("*hi*", indicator)
            assert indicator.copied
            indicator.clear()
            return outcome

        outcome = asyncio.run(scenario())
        assert outcome.channel == "fallback"
        assert outcome.used_fallback
        assert fallback.texts == ["*hi*"]

    def test_total_failure_is_reported(self):
        fallback_error = OSError("no selection API")
        primary = RecordingWriter("primary", error=RuntimeError("denied"))
        fallback = RecordingWriter("fallback", error=fallback_error)
        indicator = CopyIndicator(hold_seconds=2.0)

        async def scenario():
            with pytest.raises(CopyFailedError) as exc_info:
                await CopyService(primary, fallback).copy("*hi*", indicator)
            return exc_info.value

        error = asyncio.run(scenario())
        assert error.__cause__ is fallback_error
        assert not indicator.copied
        assert not indicator.reset_pending

    def test_nothing_to_copy(self):
        primary = RecordingWriter("primary")
        fallback = RecordingWriter("fallback")
        indicator = CopyIndicator(hold_seconds=2.0)

        async def scenario():
            with pytest.raises(NothingToCopyError):
                await CopyService(primary, fallback).copy("", indicator)

        asyncio.run(scenario())
        assert primary.texts == []
        assert fallback.texts == []
        assert not indicator.copied


class TestCopyIndicator:
    def test_resets_after_hold_time(self):
        resets = []
        indicator = CopyIndicator(hold_seconds=0.05, on_reset=lambda: resets.append(True))

        async def scenario():
            indicator.mark_copied()
            assert indicator.copied
            assert indicator.reset_pending
            await asyncio.sleep(0.15)

        asyncio.run(scenario())
        assert not indicator.copied
        assert not indicator.reset_pending
        assert resets == [True]

    def test_new_copy_cancels_pending_reset(self):
        resets = []
        indicator = CopyIndicator(hold_seconds=0.2, on_reset=lambda: resets.append(True))

        async def scenario():
            indicator.mark_copied()
            await asyncio.sleep(0.12)
            indicator.mark_copied()
            # The first timer would have fired by now
            await asyncio.sleep(0.12)
            assert indicator.copied
            assert resets == []
            await asyncio.sleep(0.2)

        asyncio.run(scenario())
        assert not indicator.copied
        assert resets == [True]

    def test_cancel_keeps_state(self):
        indicator = CopyIndicator(hold_seconds=0.05)

        async def scenario():
            indicator.mark_copied()
            indicator.cancel()
            await asyncio.sleep(0.1)

        asyncio.run(scenario())
        assert indicator.copied
        assert not indicator.reset_pending

    def test_clear(self):
        indicator = CopyIndicator(hold_seconds=5.0)

        async def scenario():
            indicator.mark_copied()
            indicator.clear()

        asyncio.run(scenario())
        assert not indicator.copied
        assert not indicator.reset_pending

    def test_failing_reset_callback_still_resets(self):
        def explode():
            raise RuntimeError("panel gone")

        indicator = CopyIndicator(hold_seconds=0.01, on_reset=explode)

        async def scenario():
            indicator.mark_copied()
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert not indicator.copied

    def test_mark_copied_needs_running_loop(self):
        indicator = CopyIndicator()
        with pytest.raises(RuntimeError):
            indicator.mark_copied()
