# src/waformat/adapters/formatting/formatter.py
"""
Message Formatter - WhatsApp Markup Rewriting

This module handles all text rewriting for WhatsApp output: the live
transform that turns authoring syntax into WhatsApp markup, the quick-format
operation that wraps the whole input with a marker, and the preview rendering
used by the Telegram panel.

Files that USE this module:
- waformat.application.session (transform and apply_whole_text_format on every edit)
- waformat.adapters.telegram.handlers (render_preview for the panel message)
- waformat.adapters.telegram.keyboards (MARKERS for button captions)
- tests.test_formatter (unit tests)

Files that this module USES:
- waformat.domain.models (FormatKind, FormatMarker)
- waformat.domain.errors (UnknownFormatError)
- waformat.shared.language (translate for the preview notes)
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from waformat.domain.errors import UnknownFormatError
from waformat.domain.models import FormatKind, FormatKindLike, FormatMarker
from waformat.shared.language import translate

ZERO_WIDTH_SPACE = "\u200b"
SPOILER_TAG = "[SPOILER]"
SPOILER_PADDING = ZERO_WIDTH_SPACE * 4000

# Button order matches the quick-format row: spoiler first
MARKERS: Dict[FormatKind, FormatMarker] = {
    FormatKind.SPOILER: FormatMarker(FormatKind.SPOILER, SPOILER_TAG, "|| 🔒️ ||", padding=SPOILER_PADDING),
    FormatKind.BOLD: FormatMarker(FormatKind.BOLD, "*", "*B*"),
    FormatKind.ITALIC: FormatMarker(FormatKind.ITALIC, "_", "_I_"),
    FormatKind.STRIKE: FormatMarker(FormatKind.STRIKE, "~", "~S~"),
    FormatKind.MONO: FormatMarker(FormatKind.MONO, "`", "`M`"),
}

# Applied in this order; each class excludes its own delimiter so spans never nest
_SUBSTITUTIONS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"\*([^*]+)\*"), r"*\1*"),                # bold
    (re.compile(r"(?<!\*)_([^_]+)_(?!\*)"), r"_\1_"),     # italic, not touching '*'
    (re.compile(r"~([^~]+)~"), r"~\1~"),                  # strikethrough
    (re.compile(r"`([^`]+)`"), r"```\1```"),              # monospace -> code block
    (re.compile(r"\|\|([^|]+)\|\|"), r" \1 "),            # spoiler syntax stripped
]

_INVISIBLE_RUN = re.compile(f"{ZERO_WIDTH_SPACE}{{2,}}")


def transform(text: str) -> str:
    """
    Rewrite authoring syntax into WhatsApp markup.

    Bold, italic and strikethrough spans are re-wrapped with the same
    delimiters, single-backtick spans become triple-backtick blocks and
    ``||spoiler||`` spans lose their pipes and get padded with spaces.
    Unbalanced delimiters are left as literal characters.

    Args:
        text: Raw input text

    Returns:
        WhatsApp-formatted text
    """
    result = text
    for pattern, replacement in _SUBSTITUTIONS:
        result = pattern.sub(replacement, result)
    return result


def get_marker(kind: FormatKindLike) -> FormatMarker:
    """
    Look up the marker for a format kind.

    Args:
        kind: FormatKind or its string value ("bold", "italic", ...)

    Returns:
        FormatMarker for that kind

    Raises:
        UnknownFormatError: If kind is not one of the five format kinds
    """
    try:
        return MARKERS[FormatKind(kind)]
    except ValueError as e:
        raise UnknownFormatError(f"Unknown format kind: {kind!r}") from e


def apply_whole_text_format(text: str, kind: FormatKindLike) -> str:
    """
    Wrap the entire text with the marker for ``kind``.

    Bold, italic, strike and mono surround the text with their single
    delimiter character. Spoiler prepends 4000 zero-width spaces and then
    surrounds the result with the literal ``[SPOILER]`` tag on both sides.

    Args:
        text: Current input text
        kind: Requested format kind

    Returns:
        The wrapped text, or ``text`` unchanged if it is empty or whitespace only
    """
    marker = get_marker(kind)
    if not text.strip():
        return text
    return marker.wrap(text)


def render_preview(formatted: str, limit: int = 4000, lang: Optional[str] = None) -> str:
    """
    Make formatted text displayable in a chat panel.

    Runs of zero-width spaces are collapsed into a visible note and the
    result is cut down to ``limit`` characters.

    Args:
        formatted: Output of transform()
        limit: Maximum length of the returned preview
        lang: Language for the collapsed-run note (default: configured language)

    Returns:
        Preview string, or "" if there is nothing to show
    """
    if not formatted:
        return ""

    preview = _INVISIBLE_RUN.sub(
        lambda m: translate("invisible_run", lang=lang, count=len(m.group(0))),
        formatted,
    )
    if len(preview) > limit:
        preview = preview[: limit - 1] + "…"
    return preview
