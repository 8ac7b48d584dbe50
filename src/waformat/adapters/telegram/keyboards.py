"""
Telegram Keyboards - Panel Rendering

Builds the formatter panel: the preview text with its character counter and
the inline keyboard holding the quick-format row, the copy button and the
example loaders. Button availability mirrors the session state.

Files that USE this module:
- waformat.adapters.telegram.handlers (render_panel_text, build_panel_keyboard)
- tests.test_keyboards (unit tests)

Files that this module USES:
- waformat.adapters.formatting.formatter (MARKERS, render_preview)
- waformat.application.session (FormatterSession, EXAMPLE_MESSAGES)
- waformat.shared.language (button captions)
"""
from __future__ import annotations

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from waformat.adapters.formatting.formatter import MARKERS, render_preview
from waformat.application.session import EXAMPLE_MESSAGES, FormatterSession
from waformat.shared.language import LANGUAGE_NAMES, translate

FORMAT_PREFIX = "fmt:"
EXAMPLE_PREFIX = "ex:"
LANGUAGE_PREFIX = "lang:"
COPY_DATA = "copy"

# Telegram caps messages at 4096 characters; leave room for the header line
PANEL_PREVIEW_LIMIT = 3500


def render_panel_text(session: FormatterSession) -> str:
    """Header with counter, then the preview or a placeholder."""
    lang = session.language
    header = translate("panel_header", lang=lang, counter=session.char_counter)
    body = render_preview(session.formatted_text, limit=PANEL_PREVIEW_LIMIT, lang=lang)
    return f"{header}\n\n{body or translate('placeholder', lang=lang)}"


def build_panel_keyboard(session: FormatterSession) -> InlineKeyboardMarkup:
    """
    Build the panel keyboard for a session.
    
    The quick-format row is omitted while the input is blank and the copy
    button is omitted while there is nothing to copy.
    """
    lang = session.language
    rows = []

    if session.can_format:
        rows.append([
            InlineKeyboardButton(marker.label, callback_data=f"{FORMAT_PREFIX}{kind.value}")
            for kind, marker in MARKERS.items()
        ])

    if session.can_copy:
        caption = translate("copied_button" if session.copied else "copy_button", lang=lang)
        rows.append([InlineKeyboardButton(caption, callback_data=COPY_DATA)])

    for index, message in enumerate(EXAMPLE_MESSAGES):
        rows.append([
            InlineKeyboardButton(
                translate("example_button", lang=lang, number=index + 1, text=message),
                callback_data=f"{EXAMPLE_PREFIX}{index}",
            )
        ])

    return InlineKeyboardMarkup(rows)


def build_language_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([[
        InlineKeyboardButton(name, callback_data=f"{LANGUAGE_PREFIX}{code}")
        for code, name in LANGUAGE_NAMES.items()
    ]])
