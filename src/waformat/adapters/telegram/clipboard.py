"""
Telegram Clipboard Writers - Handing Formatted Text Back to the User

A bot cannot touch the user's clipboard, so "copy" means delivering the
formatted text in a form the user can long-press, copy and forward to
WhatsApp. The primary writer sends it as a plain chat message; the fallback
sends it as a .txt document, which also works for texts longer than a chat
message allows (the spoiler padding alone is 4000 characters).

Files that USE this module:
- waformat.adapters.telegram.handlers (copy_callback builds a CopyService from these)

Files that this module USES:
- waformat.application.copy_service (ClipboardWriter base class)
- waformat.shared.language (translate for the document caption)
"""
from __future__ import annotations

import io
from typing import Optional

from telegram import Bot

from waformat.application.copy_service import ClipboardWriter
from waformat.shared.language import translate

DOCUMENT_FILENAME = "whatsapp_message.txt"


class ChatMessageWriter(ClipboardWriter):
    """Send the text as a standalone plain-text message."""

    name = "chat_message"

    def __init__(self, bot: Bot, chat_id: int):
        self.bot = bot
        self.chat_id = chat_id

    async def write(self, text: str) -> None:
        # No parse_mode: the WhatsApp markup must arrive verbatim
        await self.bot.send_message(chat_id=self.chat_id, text=text)


class ChatDocumentWriter(ClipboardWriter):
    """Send the text as a UTF-8 .txt document built from a transient buffer."""

    name = "chat_document"

    def __init__(self, bot: Bot, chat_id: int, lang: Optional[str] = None):
        self.bot = bot
        self.chat_id = chat_id
        self.lang = lang

    async def write(self, text: str) -> None:
        with io.BytesIO(text.encode("utf-8")) as buffer:
            await self.bot.send_document(
                chat_id=self.chat_id,
                document=buffer,
                filename=DOCUMENT_FILENAME,
                caption=translate("copy_sent_document", lang=self.lang),
            )
