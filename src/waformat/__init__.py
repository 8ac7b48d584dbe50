# src/waformat/__init__.py
"""
WA Formatter - WhatsApp Text Styling Bot

A Telegram bot that rewrites plain text with WhatsApp's inline markup
(bold, italic, strikethrough, monospace, spoiler), shows a live preview
and hands the result back ready to paste into WhatsApp.
"""

__version__ = "1.0.0"
