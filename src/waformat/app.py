# src/waformat/app.py
"""
Application Entry Point - Bot Initialization and Startup

This module serves as the composition root for the WA Formatter Telegram bot.
It configures logging, checks the configuration and starts polling.

Files that USE this module:
- python -m waformat (module entry point)
- waformat-bot (console script)

Files that this module USES:
- waformat.shared.logging_conf (setup_logging for logging configuration)
- waformat.config (settings for configuration management)
- waformat.adapters.telegram.bot (build_application)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors

from telegram import Update  # Update types passed to allowed_updates
from telegram.error import TimedOut, NetworkError, Conflict  # Telegram API error exceptions

from waformat.shared.logging_conf import setup_logging  # Configure logging with file rotation
from waformat.adapters.telegram.bot import build_application  # Application with handlers registered


def main() -> None:
    """
    Initialize and start the Telegram bot application.
    
    This function:
    1. Sets up logging and validates configuration
    2. Builds the Telegram application with all handlers
    3. Starts the bot polling loop
    """
    # Import settings here so a bad .env surfaces as an error from main()
    from waformat.config import settings
    
    setup_logging(
        level=settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)
    
    if not settings.bot_token:
        raise RuntimeError("BOT_TOKEN missing")
    
    app = build_application(settings.bot_token)
    
    logger.info(
        "Starting bot polling… input limit=%d chars, copy indicator=%.1fs, default language=%s",
        settings.input_char_limit,
        settings.copy_indicator_seconds,
        settings.default_language,
    )
    
    try:
        app.run_polling(
            allowed_updates=Update.ALL_TYPES,
            drop_pending_updates=True,
        )
    except Conflict as e:
        logger.error(
            "Telegram Conflict error: %s (type: %s)",
            e,
            type(e).__name__,
            exc_info=True,
        )
        logger.error(
            "Another bot instance is already polling for updates with this token. "
            "Stop it first: pkill -f 'python -m waformat'"
        )
        raise
    except (TimedOut, NetworkError) as e:
        logger.error(
            "Network error during bot operation (timeout connecting to Telegram API): %s (type: %s)",
            e,
            type(e).__name__,
            exc_info=True,
        )
        raise
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (KeyboardInterrupt)")
        raise
    except Exception as e:
        logger.exception("Unexpected error during bot operation: %s (type: %s)", e, type(e).__name__)
        raise


if __name__ == "__main__":
    main()
