"""
Keyboard Tests - Unit Tests for Panel Rendering

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- waformat.adapters.telegram.keyboards (render_panel_text, build_panel_keyboard, build_language_keyboard)
- waformat.application.session (FormatterSession for test data)
"""
import asyncio

from waformat.adapters.telegram.keyboards import (
    build_language_keyboard,
    build_panel_keyboard,
    render_panel_text,
)
from waformat.application.session import FormatterSession


def _rows(markup):
    return [[(b.text, b.callback_data) for b in row] for row in markup.inline_keyboard]


def _session(text="", language="en"):
    session = FormatterSession(char_limit=1000, hold_seconds=2.0, language=language)
    session.set_input(text)
    return session


class TestPanelText:
    def test_placeholder_when_empty(self):
        assert render_panel_text(_session()) == (
            "Formatted for WhatsApp (0/1000):\n\nYour formatted text will appear here..."
        )

    def test_preview(self):
        assert render_panel_text(_session("`x`")) == "Formatted for WhatsApp (3/1000):\n\n```x```"

    def test_spoiler_padding_collapsed(self):
        session = _session("hi")
        session.apply_format("spoiler")
        text = render_panel_text(session)
        assert "[4000 invisible characters]" in text
        assert len(text) < 4096

    def test_persian(self):
        text = render_panel_text(_session(language="fa"))
        assert "متن قالب‌بندی شده اینجا نمایش داده می‌شود..." in text


class TestPanelKeyboard:
    def test_empty_session_only_examples(self):
        rows = _rows(build_panel_keyboard(_session()))
        assert len(rows) == 3
        assert [row[0][1] for row in rows] == ["ex:0", "ex:1", "ex:2"]
        assert rows[0][0][0] == "Example 1: The movie ending: ||The butler did it||"

    def test_format_row_and_copy_button(self):
        rows = _rows(build_panel_keyboard(_session("hello")))
        assert rows[0] == [
            ("|| 🔒️ ||", "fmt:spoiler"),
            ("*B*", "fmt:bold"),
            ("_I_", "fmt:italic"),
            ("~S~", "fmt:strike"),
            ("`M`", "fmt:mono"),
        ]
        assert rows[1] == [("📋 Copy to Clipboard", "copy")]
        assert len(rows) == 5

    def test_whitespace_input_hides_format_row(self):
        rows = _rows(build_panel_keyboard(_session("   ")))
        assert rows[0] == [("📋 Copy to Clipboard", "copy")]
        assert all(not data.startswith("fmt:") for row in rows for _, data in row)

    def test_copied_caption(self):
        session = _session("hello")

        async def scenario():
            session.indicator.mark_copied()
            rows = _rows(build_panel_keyboard(session))
            session.indicator.clear()
            return rows

        rows = asyncio.run(scenario())
        assert rows[1] == [("✅ Copied!", "copy")]


class TestLanguageKeyboard:
    def test_buttons(self):
        rows = _rows(build_language_keyboard())
        assert rows == [[("English", "lang:en"), ("فارسی", "lang:fa")]]
