"""
Session Tests - Unit Tests for Per-chat Formatter State

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- waformat.application.session (FormatterSession, SessionRegistry, EXAMPLE_MESSAGES)
- waformat.domain.errors (UnknownExampleError, UnknownFormatError)
- pytest (testing framework)
"""
import asyncio  # Event loop for the copied indicator

import pytest  # Testing framework for writing and running tests

from waformat.application.session import EXAMPLE_MESSAGES, FormatterSession, SessionRegistry
from waformat.domain.errors import UnknownExampleError, UnknownFormatError


@pytest.fixture
def session():
    return FormatterSession(char_limit=1000, hold_seconds=2.0, language="en")


class TestFormatterSession:
    def test_initial_state(self, session):
        assert session.input_text == ""
        assert session.formatted_text == ""
        assert session.char_counter == "0/1000"
        assert not session.can_format
        assert not session.can_copy
        assert not session.copied

    def test_set_input_recomputes_formatted_text(self, session):
        assert session.set_input("`code`") == "```code```"
        assert session.input_text == "`code`"
        assert session.formatted_text == "```code```"
        assert session.char_counter == "6/1000"

    def test_counter_limit_not_enforced(self, session):
        session.set_input("x" * 1500)
        assert len(session.input_text) == 1500
        assert session.char_counter == "1500/1000"

    def test_whitespace_input(self, session):
        session.set_input("   ")
        assert not session.can_format
        # The formatted text is not empty, so it can still be copied
        assert session.can_copy

    def test_apply_format(self, session):
        session.set_input("hello")
        session.apply_format("bold")
        assert session.input_text == "*hello*"
        assert session.formatted_text == "*hello*"

    def test_apply_format_twice_stacks_markers(self, session):
        session.set_input("hello")
        session.apply_format("italic")
        session.apply_format("bold")
        assert session.input_text == "*_hello_*"
        assert session.formatted_text == "*_hello_*"

    def test_apply_mono_format(self, session):
        session.set_input("hello")
        session.apply_format("mono")
        assert session.input_text == "`hello`"
        assert session.formatted_text == "```hello```"

    def test_apply_format_on_blank_input_is_noop(self, session):
        session.set_input("  ")
        session.apply_format("spoiler")
        assert session.input_text == "  "

    def test_apply_unknown_format(self, session):
        session.set_input("hello")
        with pytest.raises(UnknownFormatError):
            session.apply_format("underline")
        assert session.input_text == "hello"

    def test_load_example(self, session):
        session.load_example(0)
        assert session.input_text == EXAMPLE_MESSAGES[0]
        assert session.formatted_text == "The movie ending:  The butler did it "

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_load_unknown_example(self, session, index):
        with pytest.raises(UnknownExampleError):
            session.load_example(index)

    def test_reset(self, session):
        session.set_input("*hi*")
        session.panel_message_id = 7

        async def scenario():
            session.indicator.mark_copied()
            session.reset()
            assert not session.copied
            assert not session.indicator.reset_pending

        asyncio.run(scenario())
        assert session.input_text == ""
        assert session.formatted_text == ""
        assert session.panel_message_id is None


class TestSessionRegistry:
    def test_get_creates_once(self):
        registry = SessionRegistry(char_limit=500, hold_seconds=1.0)
        first = registry.get(1)
        assert registry.get(1) is first
        assert first.char_limit == 500
        assert first.indicator.hold_seconds == 1.0
        assert 1 in registry
        assert len(registry) == 1

    def test_sessions_are_per_chat(self):
        registry = SessionRegistry(char_limit=500, hold_seconds=1.0)
        registry.get(1).set_input("one")
        registry.get(2).set_input("two")
        assert registry.get(1).input_text == "one"
        assert registry.get(2).input_text == "two"

    def test_discard(self):
        registry = SessionRegistry(char_limit=500, hold_seconds=1.0)
        registry.get(1).set_input("one")
        registry.discard(1)
        assert 1 not in registry
        assert registry.get(1).input_text == ""

    def test_discard_unknown_chat(self):
        registry = SessionRegistry(char_limit=500, hold_seconds=1.0)
        registry.discard(99)
        assert len(registry) == 0

    def test_defaults_from_settings(self):
        registry = SessionRegistry()
        session = registry.get(1)
        assert session.char_limit == 1000
        assert session.indicator.hold_seconds == 2.0
