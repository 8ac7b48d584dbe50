"""
Telegram Handlers - Command Processing and User Interaction

This module contains all Telegram bot handlers. A text message replaces the
chat session's input and gets answered with the formatter panel; inline
buttons on that panel apply whole-text formats, load example messages and
copy the formatted result. Commands cover the usage guide, the WhatsApp
cheat-sheet, resetting the session and choosing the UI language.

Files that USE this module:
- waformat.adapters.telegram.bot (build_handlers, error_handler)

Files that this module USES:
- waformat.application.session (session_registry)
- waformat.application.copy_service (CopyService)
- waformat.adapters.telegram.clipboard (ChatMessageWriter, ChatDocumentWriter)
- waformat.adapters.telegram.keyboards (panel rendering and callback prefixes)
- waformat.adapters.telegram.markup (message_markup for entity-styled input)
- waformat.shared.rate_limiter (rate limiting functionality)
- waformat.shared.validators (callback payload parsing)
- waformat.shared.language (translate)
"""
from __future__ import annotations

import logging

from telegram import Bot, Update
from telegram.error import BadRequest, TelegramError
from telegram.ext import CallbackQueryHandler, CommandHandler, ContextTypes, MessageHandler, filters

from waformat.adapters.telegram.clipboard import ChatDocumentWriter, ChatMessageWriter
from waformat.adapters.telegram.keyboards import (
    COPY_DATA,
    EXAMPLE_PREFIX,
    FORMAT_PREFIX,
    LANGUAGE_PREFIX,
    build_language_keyboard,
    build_panel_keyboard,
    render_panel_text,
)
from waformat.adapters.telegram.markup import message_markup
from waformat.application.copy_service import CopyService
from waformat.application.session import EXAMPLE_MESSAGES, FormatterSession, session_registry
from waformat.domain.errors import CopyFailedError, NothingToCopyError
from waformat.shared.language import LANGUAGE_NAMES, get_default_language, is_supported, translate
from waformat.shared.rate_limiter import RATE_LIMITS, rate_limiter
from waformat.shared.validators import parse_example_index, parse_format_kind

logger = logging.getLogger(__name__)


def _check_rate_limit(update: Update, limit_type: str) -> bool:
    """
    Check if user is within configured rate limits.

    Buckets are namespaced per limit type so copy requests don't eat into
    the budget for typed edits.

    Args:
        update: Telegram update object
        limit_type: Key in RATE_LIMITS ("user_message", "button_tap", "copy_request")

    Returns:
        True if allowed, False if rate limit exceeded
    """
    config = RATE_LIMITS.get(limit_type)
    if not config:
        return True

    identifier = f"{limit_type}:user:{update.effective_user.id}"
    if not rate_limiter.is_allowed(identifier, config):
        logger.warning(
            "Rate limit exceeded for %s (remaining=%s, reset_time=%s)",
            identifier,
            rate_limiter.get_remaining_requests(identifier, config),
            rate_limiter.get_reset_time(identifier, config),
        )
        return False
    return True


def _is_not_modified(error: BadRequest) -> bool:
    return "not modified" in str(error).lower()


async def _send_panel(update: Update, session: FormatterSession) -> None:
    """Reply with a fresh panel and remember it as the session's panel."""
    message = await update.effective_message.reply_text(
        render_panel_text(session),
        reply_markup=build_panel_keyboard(session),
    )
    session.panel_message_id = message.message_id


async def _edit_panel(update: Update, session: FormatterSession) -> None:
    """Re-render the panel the tapped button belongs to."""
    query = update.callback_query
    session.panel_message_id = query.message.message_id
    try:
        await query.edit_message_text(
            render_panel_text(session),
            reply_markup=build_panel_keyboard(session),
        )
    except BadRequest as e:
        if not _is_not_modified(e):
            raise
        logger.debug("Panel unchanged for chat %s", update.effective_chat.id)


async def _refresh_panel_keyboard(bot: Bot, chat_id: int, session: FormatterSession) -> None:
    """Redraw the panel keyboard after the copied indicator switched off."""
    if session.panel_message_id is None:
        return
    try:
        await bot.edit_message_reply_markup(
            chat_id=chat_id,
            message_id=session.panel_message_id,
            reply_markup=build_panel_keyboard(session),
        )
    except BadRequest as e:
        if not _is_not_modified(e):
            logger.error("Failed to refresh panel in chat %s: %s", chat_id, e, exc_info=True)
    except TelegramError as e:
        logger.error("Failed to refresh panel in chat %s: %s", chat_id, e, exc_info=True)


# --- /start: usage guide and a clean session ---
async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /start command - reset the session and show the usage guide.
    """
    chat_id = update.effective_chat.id
    # The chosen language survives a restart of the conversation
    language = session_registry.get(chat_id).language
    session_registry.discard(chat_id)

    session = session_registry.get(chat_id)
    session.language = language
    await update.effective_message.reply_text(translate("welcome", lang=language))
    await _send_panel(update, session)


# --- /help: WhatsApp syntax cheat-sheet ---
async def help_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    session = session_registry.get(update.effective_chat.id)
    await update.effective_message.reply_text(translate("cheatsheet", lang=session.language))


# --- /examples: show the panel with the example loaders ---
async def examples_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    session = session_registry.get(update.effective_chat.id)
    await _send_panel(update, session)


# --- /reset: forget the current text ---
async def reset_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /reset command - drop the session, keeping a non-default language."""
    chat_id = update.effective_chat.id
    language = session_registry.get(chat_id).language
    session_registry.discard(chat_id)
    if language and language != get_default_language():
        session_registry.get(chat_id).language = language
    await update.effective_message.reply_text(translate("session_reset", lang=language))
    logger.info("Session reset in chat %s", chat_id)


# --- Any text: new input ---
async def text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle any text message (non-command), including edits of earlier messages.

    The message text, with markers restored for entities the client styled
    itself, becomes the session's input and the panel is sent again below it
    with the recomputed preview.
    """
    session = session_registry.get(update.effective_chat.id)

    if not _check_rate_limit(update, "user_message"):
        await update.effective_message.reply_text(translate("rate_limited", lang=session.language))
        return

    session.set_input(message_markup(update.effective_message))
    logger.debug(
        "Chat %s input updated (%s)",
        update.effective_chat.id,
        session.char_counter,
    )
    await _send_panel(update, session)


# --- Panel buttons ---
async def format_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle a quick-format button - wrap the whole input with the chosen marker.
    """
    query = update.callback_query
    session = session_registry.get(update.effective_chat.id)
    lang = session.language

    if not _check_rate_limit(update, "button_tap"):
        await query.answer(translate("rate_limited", lang=lang), show_alert=True)
        return

    kind = parse_format_kind(query.data[len(FORMAT_PREFIX):])
    if kind is None:
        await query.answer(translate("unknown_action", lang=lang))
        return

    # The row is hidden for blank input, but an older panel may still show it
    if not session.can_format:
        await query.answer(translate("type_first", lang=lang), show_alert=True)
        return

    session.apply_format(kind)
    session.indicator.clear()
    await query.answer()
    logger.info("Applied %s to chat %s (%s)", kind.value, update.effective_chat.id, session.char_counter)
    await _edit_panel(update, session)


async def example_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle an example button - overwrite the input with a preset message."""
    query = update.callback_query
    session = session_registry.get(update.effective_chat.id)

    if not _check_rate_limit(update, "button_tap"):
        await query.answer(translate("rate_limited", lang=session.language), show_alert=True)
        return

    index = parse_example_index(query.data[len(EXAMPLE_PREFIX):], len(EXAMPLE_MESSAGES))
    if index is None:
        await query.answer(translate("unknown_action", lang=session.language))
        return

    session.load_example(index)
    session.indicator.clear()
    await query.answer()
    await _edit_panel(update, session)


async def copy_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle the copy button - deliver the formatted text and show "Copied!".

    The text is sent as a chat message, or as a .txt document if the message
    is rejected. The button caption flips back once the indicator expires.
    """
    query = update.callback_query
    chat_id = update.effective_chat.id
    session = session_registry.get(chat_id)
    lang = session.language

    if not _check_rate_limit(update, "copy_request"):
        await query.answer(translate("rate_limited", lang=lang), show_alert=True)
        return

    service = CopyService(
        primary=ChatMessageWriter(context.bot, chat_id),
        fallback=ChatDocumentWriter(context.bot, chat_id, lang=lang),
    )
    session.indicator.on_reset = lambda: context.application.create_task(
        _refresh_panel_keyboard(context.bot, chat_id, session),
        update=update,
    )

    try:
        outcome = await service.copy(session.formatted_text, session.indicator)
    except NothingToCopyError:
        await query.answer(translate("nothing_to_copy", lang=lang), show_alert=True)
        return
    except CopyFailedError:
        logger.error("Copy failed in chat %s", chat_id)
        await query.answer(translate("copy_failed", lang=lang), show_alert=True)
        return

    await query.answer(translate("copied_button", lang=lang))
    logger.info("Copy delivered in chat %s via %s", chat_id, outcome.channel)
    await _edit_panel(update, session)


# --- /language: UI language for this chat ---
async def language_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /language command - show language selection buttons."""
    session = session_registry.get(update.effective_chat.id)
    current_name = LANGUAGE_NAMES[session.language or get_default_language()]
    await update.effective_message.reply_text(
        translate("select_language", lang=session.language, language=current_name),
        reply_markup=build_language_keyboard(),
    )


async def language_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle language selection callback from inline keyboard."""
    query = update.callback_query
    session = session_registry.get(update.effective_chat.id)

    if not _check_rate_limit(update, "button_tap"):
        await query.answer(translate("rate_limited", lang=session.language), show_alert=True)
        return

    code = query.data[len(LANGUAGE_PREFIX):]
    if not is_supported(code):
        await query.answer(translate("unknown_action", lang=session.language))
        return

    session.language = code
    await query.answer()
    await query.edit_message_text(translate("language_changed", lang=code))
    logger.info("Chat %s switched language to %s", update.effective_chat.id, code)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors raised by handlers."""
    logger.error(
        "Unhandled error while processing update: %s (type: %s)",
        context.error,
        type(context.error).__name__,
        exc_info=context.error,
    )


def build_handlers():
    """
    Build and return list of Telegram bot handlers.

    Returns:
        List of handler instances for registration with bot
    """
    return [
        CommandHandler("start", start),
        CommandHandler("help", help_cmd),
        CommandHandler("examples", examples_cmd),
        CommandHandler("reset", reset_cmd),
        CommandHandler("language", language_cmd),
        CallbackQueryHandler(format_callback, pattern=f"^{FORMAT_PREFIX}"),
        CallbackQueryHandler(example_callback, pattern=f"^{EXAMPLE_PREFIX}"),
        CallbackQueryHandler(copy_callback, pattern=f"^{COPY_DATA}$"),
        CallbackQueryHandler(language_callback, pattern=f"^{LANGUAGE_PREFIX}"),
        MessageHandler(filters.TEXT & ~filters.COMMAND, text_message),
    ]
