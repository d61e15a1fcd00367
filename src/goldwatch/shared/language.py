# src/goldwatch/shared/language.py
"""
Language Management - Multi-language Support

This module provides the message catalogue for the ticker (Chinese and
English) and a small in-memory language manager. The initial language comes
from settings.default_language; changes made at runtime are not persisted.

Files that USE this module:
- goldwatch.adapters.formatting.formatter (uses translate for all display strings)
- goldwatch.adapters.telegram.handlers (reports rate provenance via translate)

Files that this module USES:
- goldwatch.config (settings.default_language, loaded lazily)
"""
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Language constants
LANG_CHINESE = "zh"
LANG_ENGLISH = "en"

SUPPORTED_LANGUAGES = (LANG_CHINESE, LANG_ENGLISH)


# Translation dictionaries
TRANSLATIONS: Dict[str, Dict[str, str]] = {
    LANG_CHINESE: {
        "price_line": "{symbol}{value}/克",
        "load_failed": "数据加载失败",
        "updated_at": "更新时间: {date} {time}",
        "data_updated": "数据已更新",
        "connect_failed": "无法连接到服务器，请稍后再试",
        "showing_previous": "更新失败，显示的是上次成功获取的数据",
        "no_data_yet": "暂无数据，请稍后再试",
        "status_report": "状态: {state}\n汇率: {rate} ({source})",
        "rate_source_primary": "主要汇率API",
        "rate_source_backup": "备用汇率API",
        "rate_source_cache": "上次成功的汇率",
        "rate_source_default": "默认汇率",
    },
    LANG_ENGLISH: {
        "price_line": "{symbol}{value}/g",
        "load_failed": "Failed to load data",
        "updated_at": "Updated: {date} {time}",
        "data_updated": "Data updated",
        "connect_failed": "Cannot connect to the server, please try again later",
        "showing_previous": "Update failed, showing the last successfully fetched data",
        "no_data_yet": "No data yet, please try again later",
        "status_report": "State: {state}\nRate: {rate} ({source})",
        "rate_source_primary": "primary rate API",
        "rate_source_backup": "backup rate API",
        "rate_source_cache": "last good rate",
        "rate_source_default": "default rate",
    },
}


class LanguageManager:
    """Holds the active display language for the running process."""

    def __init__(self, default: Optional[str] = None):
        """
        Initialize language manager.

        Args:
            default: Initial language code; when omitted, settings.default_language
                     is read on first use
        """
        self._current_language: Optional[str] = default

    def get_language(self) -> str:
        """
        Get current language.

        Returns:
            Current language code ('zh' or 'en')
        """
        if self._current_language is None:
            from goldwatch.config import settings
            self._current_language = settings.default_language
        return self._current_language

    def set_language(self, lang: str) -> bool:
        """
        Set language preference.

        Args:
            lang: Language code ('zh' or 'en')

        Returns:
            True if language was set successfully, False if invalid
        """
        if lang not in SUPPORTED_LANGUAGES:
            logger.warning("Invalid language code: %s", lang)
            return False
        old_lang = self._current_language
        self._current_language = lang
        logger.info("Language changed from %s to %s", old_lang, lang)
        return True

    def translate(self, key: str, **kwargs: Any) -> str:
        """
        Translate a message key with optional parameters.

        Args:
            key: Translation key
            **kwargs: Parameters to format into translation

        Returns:
            Translated and formatted string, or key if translation not found
        """
        current_lang = self.get_language()
        lang_dict = TRANSLATIONS.get(current_lang, TRANSLATIONS[LANG_ENGLISH])
        template = lang_dict.get(key, key)
        try:
            return template.format(**kwargs)
        except KeyError as e:
            logger.warning("Missing parameter in translation '%s': %s", key, e)
            return template


# Global language manager instance
language_manager = LanguageManager()


def get_language() -> str:
    """Get current language."""
    return language_manager.get_language()


def set_language(lang: str) -> bool:
    """Set language."""
    return language_manager.set_language(lang)


def translate(key: str, **kwargs: Any) -> str:
    """Translate a message key."""
    return language_manager.translate(key, **kwargs)
