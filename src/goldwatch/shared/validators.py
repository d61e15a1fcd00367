# src/goldwatch/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

This module validates bot tokens, channel IDs and endpoint URLs so that
misconfiguration is caught when settings are loaded rather than on the
first scheduled refresh.

Files that USE this module:
- goldwatch.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import re
from urllib.parse import urlparse


def validate_channel_id(channel_id: str) -> bool:
    """
    Validate Telegram channel/chat ID format.

    Args:
        channel_id: Channel ID to validate

    Returns:
        True if valid, False otherwise
    """
    if not channel_id:
        return False

    # Channel IDs can be:
    # - @channelname (public channels)
    # - -1001234567890 (private channels/chats)
    # - 123456789 (user IDs)
    if channel_id.startswith('@'):
        return bool(re.match(r'^@[a-zA-Z0-9_]+$', channel_id))
    elif channel_id.startswith('-100'):
        return bool(re.match(r'^-100\d+$', channel_id))
    else:
        return bool(re.match(r'^\d+$', channel_id))


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


def validate_url(url: str) -> bool:
    """Return True for absolute http(s) URLs with a host."""
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
