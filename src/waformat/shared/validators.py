"""
Input Validation Utilities - Configuration and Callback Validation

This module validates the bot token from configuration and the callback data
coming back from inline keyboard taps before it is turned into domain values.

Files that USE this module:
- waformat.config.settings (validate_bot_token in Settings field validators)
- waformat.adapters.telegram.handlers (parse_format_kind, parse_example_index)

Files that this module USES:
- waformat.domain.models (FormatKind)
"""
import re
from typing import Optional

from waformat.domain.models import FormatKind


def validate_bot_token(token: str) -> bool:
    """
    Validate Telegram bot token format.
    
    Args:
        token: Bot token to validate
        
    Returns:
        True if valid, False otherwise
    """
    if not token:
        return False
    
    # Bot tokens should be in format: 123456789:ABCDEFghijklmnopQRSTUVwxyz
    pattern = r'^\d{8,10}:[A-Za-z0-9_-]{35}$'
    return bool(re.match(pattern, token))


def parse_format_kind(value: str) -> Optional[FormatKind]:
    """
    Convert callback data payload to a FormatKind.
    
    Args:
        value: Payload after the "fmt:" prefix
        
    Returns:
        FormatKind, or None if the payload is not a known kind
    """
    try:
        return FormatKind(value)
    except ValueError:
        return None


def parse_example_index(value: str, count: int) -> Optional[int]:
    """
    Convert callback data payload to an example index.
    
    Args:
        value: Payload after the "ex:" prefix
        count: Number of available examples
        
    Returns:
        Index in range [0, count), or None if invalid
    """
    if not value or not value.isdigit():
        return None
    index = int(value)
    return index if index < count else None
