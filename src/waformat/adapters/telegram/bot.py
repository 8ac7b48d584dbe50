# src/waformat/adapters/telegram/bot.py
"""
Telegram Bot - Application Builder

This module builds the Telegram bot application and registers the formatter
handlers and the error handler on it.
"""

from __future__ import annotations

from telegram.ext import Application

from waformat.adapters.telegram.handlers import build_handlers, error_handler


def build_application(bot_token: str) -> Application:
    """
    Build Telegram bot application with all handlers registered.
    
    Args:
        bot_token: Telegram bot token
        
    Returns:
        Configured Application instance
    """
    app = Application.builder().token(bot_token).build()
    for h in build_handlers():
        app.add_handler(h)
    app.add_error_handler(error_handler)
    return app
