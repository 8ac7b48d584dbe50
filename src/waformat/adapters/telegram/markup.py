"""
Telegram Markup Restoration - Rebuilding WhatsApp Syntax from Message Entities

Some Telegram clients (Telegram Desktop in particular) turn typed `code`,
||spoiler||, *bold*, _italic_ and ~strike~ into message entities and strip the
markers from the message text. This module puts the markers back so the
formatter sees the text the way the user typed it.

Entity offsets and lengths are counted in UTF-16 code units, so the text is
sliced in its UTF-16 encoding.

Files that USE this module:
- waformat.adapters.telegram.handlers (text_message restores markup before set_input)
- tests.test_markup (unit tests)

Files that this module USES:
- telegram (Message, MessageEntity)
"""
from __future__ import annotations

from typing import Iterable, Optional

from telegram import Message, MessageEntity

# Only the styles WhatsApp has a marker for; links, mentions and the rest stay as plain text
ENTITY_MARKERS = {
    MessageEntity.BOLD: "*",
    MessageEntity.ITALIC: "_",
    MessageEntity.STRIKETHROUGH: "~",
    MessageEntity.CODE: "`",
    MessageEntity.SPOILER: "||",
}

_UTF16 = "utf-16-le"


def restore_markup(text: Optional[str], entities: Iterable[MessageEntity] = ()) -> str:
    """
    Re-insert WhatsApp markers for styled entities.

    Args:
        text: Message text as delivered by Telegram
        entities: Message entities attached to the text

    Returns:
        Text with the markers of supported entities put back around their spans
    """
    if not text:
        return ""

    inserts = []
    for index, entity in enumerate(entities or ()):
        marker = ENTITY_MARKERS.get(entity.type)
        if marker is None or entity.length <= 0:
            continue
        end = entity.offset + entity.length
        # Closings sort before openings at the same position; inner spans close first and open last
        inserts.append((end, 0, -entity.offset, -index, marker))
        inserts.append((entity.offset, 1, -end, index, marker))

    if not inserts:
        return text

    encoded = text.encode(_UTF16)
    pieces = []
    cursor = 0
    for position, _, _, _, marker in sorted(inserts):
        pieces.append(encoded[cursor * 2:position * 2].decode(_UTF16))
        pieces.append(marker)
        cursor = position
    pieces.append(encoded[cursor * 2:].decode(_UTF16))
    return "".join(pieces)


def message_markup(message: Message) -> str:
    """Return a message's text with its styling entities turned back into markers."""
    return restore_markup(message.text, message.entities)
