"""
Telegram Adapters - Bot Interface

This package contains Telegram bot adapters:
- Bot application builder
- Command and button handlers
- Panel keyboards
- Chat-based clipboard writers
- Markup restoration for entity-styled messages
"""

from waformat.adapters.telegram.bot import build_application
from waformat.adapters.telegram.handlers import build_handlers

__all__ = [
    "build_application",
    "build_handlers",
]
