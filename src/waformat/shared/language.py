"""
Language Management - Multi-language UI Strings

This module provides the bot's UI strings in English and Persian and the
translate() helper used to render them. The language is chosen per chat
session; when no language is given the configured default is used.

Files that USE this module:
- waformat.adapters.telegram.handlers (replies, usage guide, cheat-sheet)
- waformat.adapters.telegram.keyboards (button captions)
- waformat.adapters.formatting.formatter (preview notes)

Files that this module USES:
- waformat.config (settings.default_language, read lazily)
"""
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Language constants
LANG_ENGLISH = "en"
LANG_FARSI = "fa"

SUPPORTED_LANGUAGES = (LANG_ENGLISH, LANG_FARSI)

LANGUAGE_NAMES: Dict[str, str] = {
    LANG_ENGLISH: "English",
    LANG_FARSI: "فارسی",
}

# Translation dictionaries
TRANSLATIONS: Dict[str, Dict[str, str]] = {
    LANG_ENGLISH: {
        "title": "💬 WA Formatter",
        "welcome": (
            "💬 WA Formatter\n\n"
            "How to use:\n"
            "• Type your message and send it to me\n"
            "• Tap a formatting button to apply a style to the entire text\n"
            "• Copy the formatted result to WhatsApp\n\n"
            "Use ||text|| for spoilers, *bold*, _italic_, ~strike~, `mono`.\n"
            "/help shows the WhatsApp syntax, /examples loads a sample message."
        ),
        "cheatsheet": (
            "WhatsApp Result:\n\n"
            "*bold text*  →  Bold in WhatsApp\n"
            "_italic text_  →  Italic in WhatsApp\n"
            "~strike text~  →  Strikethrough in WhatsApp\n"
            "`mono text`  →  Monospace in WhatsApp\n"
            "||spoiler||  →  [SPOILER] ...Read more"
        ),
        "panel_header": "Formatted for WhatsApp ({counter}):",
        "placeholder": "Your formatted text will appear here...",
        "invisible_run": "[{count} invisible characters]",
        "copy_button": "📋 Copy to Clipboard",
        "copied_button": "✅ Copied!",
        "example_button": "Example {number}: {text}",
        "copy_sent_document": "📄 Sent as a file. Open it and copy the text.",
        "copy_failed": "❌ Could not deliver the formatted text. Please try again.",
        "nothing_to_copy": "Nothing to copy yet.",
        "type_first": "Type a message first.",
        "unknown_action": "Unknown action.",
        "session_reset": "Cleared. Send me a new message.",
        "rate_limited": "⏰ Slow down a little and try again in a moment.",
        "select_language": "Select language\n\nCurrent language: {language}",
        "language_changed": "✅ Language changed to English",
    },
    LANG_FARSI: {
        "title": "💬 قالب‌ساز واتساپ",
        "welcome": (
            "💬 قالب‌ساز واتساپ\n\n"
            "راهنما:\n"
            "• پیام خود را بنویسید و برای من بفرستید\n"
            "• برای اعمال قالب به کل متن، یکی از دکمه‌ها را بزنید\n"
            "• نتیجه را کپی کرده و در واتساپ بفرستید\n\n"
            "برای اسپویلر ||متن||، و برای قالب‌ها *پررنگ*، _کج_، ~خط‌خورده~، `تک‌فاصله` را بنویسید.\n"
            "دستور /help نحو واتساپ را نشان می‌دهد و /examples یک پیام نمونه بارگذاری می‌کند."
        ),
        "cheatsheet": (
            "نتیجه در واتساپ:\n\n"
            "*متن پررنگ*  ←  پررنگ در واتساپ\n"
            "_متن کج_  ←  کج در واتساپ\n"
            "~متن خط‌خورده~  ←  خط‌خورده در واتساپ\n"
            "`متن تک‌فاصله`  ←  تک‌فاصله در واتساپ\n"
            "||اسپویلر||  ←  [SPOILER] ...ادامه"
        ),
        "panel_header": "قالب‌بندی شده برای واتساپ ({counter}):",
        "placeholder": "متن قالب‌بندی شده اینجا نمایش داده می‌شود...",
        "invisible_run": "[{count} نویسه نامرئی]",
        "copy_button": "📋 کپی",
        "copied_button": "✅ کپی شد!",
        "example_button": "نمونه {number}: {text}",
        "copy_sent_document": "📄 به صورت فایل ارسال شد. آن را باز کنید و متن را کپی کنید.",
        "copy_failed": "❌ ارسال متن قالب‌بندی شده ناموفق بود. دوباره تلاش کنید.",
        "nothing_to_copy": "هنوز چیزی برای کپی وجود ندارد.",
        "type_first": "ابتدا یک پیام بنویسید.",
        "unknown_action": "عملیات نامعتبر.",
        "session_reset": "پاک شد. یک پیام جدید بفرستید.",
        "rate_limited": "⏰ کمی آهسته‌تر! چند لحظه دیگر دوباره تلاش کنید.",
        "select_language": "انتخاب زبان\n\nزبان فعلی: {language}",
        "language_changed": "✅ زبان به فارسی تغییر کرد",
    },
}


def get_default_language() -> str:
    """
    Get the configured default language.

    Returns:
        Language code from settings, or English if the setting is unusable
    """
    # Lazy import to avoid circular dependency
    from waformat.config import settings
    lang = getattr(settings, "default_language", LANG_ENGLISH)
    return lang if lang in SUPPORTED_LANGUAGES else LANG_ENGLISH


def is_supported(lang: Optional[str]) -> bool:
    """Check whether a language code has a translation table."""
    return lang in SUPPORTED_LANGUAGES


def translate(key: str, lang: Optional[str] = None, **kwargs: Any) -> str:
    """
    Translate a message key with optional parameters.

    Args:
        key: Translation key
        lang: Language code ('en' or 'fa'); defaults to the configured language
        **kwargs: Parameters to format into translation

    Returns:
        Translated and formatted string. Falls back to English, then to the key itself.
    """
    current_lang = lang or get_default_language()
    if current_lang not in TRANSLATIONS:
        logger.warning("Language '%s' not in TRANSLATIONS, using English fallback", current_lang)
        current_lang = LANG_ENGLISH

    template = TRANSLATIONS[current_lang].get(key)
    if template is None:
        template = TRANSLATIONS[LANG_ENGLISH].get(key, key)

    try:
        return template.format(**kwargs)
    except KeyError as e:
        logger.warning("Missing parameter in translation '%s': %s", key, e)
        return template
