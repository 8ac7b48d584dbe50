"""
Adapters Layer - Formatting and Telegram

This package contains the WhatsApp formatter and the Telegram bot surface.
"""
