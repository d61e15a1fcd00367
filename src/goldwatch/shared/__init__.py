# src/goldwatch/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Language management
- Logging configuration
"""

from goldwatch.shared.validators import (
    validate_bot_token,
    validate_channel_id,
    validate_url,
)
from goldwatch.shared.language import (
    get_language,
    set_language,
    translate,
    LANG_CHINESE,
    LANG_ENGLISH,
)

__all__ = [
    "validate_bot_token",
    "validate_channel_id",
    "validate_url",
    "get_language",
    "set_language",
    "translate",
    "LANG_CHINESE",
    "LANG_ENGLISH",
]
