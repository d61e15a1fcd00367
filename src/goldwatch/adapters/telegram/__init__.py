# src/goldwatch/adapters/telegram/__init__.py
"""
Telegram Adapters - Scheduler and Presentation

This package contains Telegram bot adapters:
- Ticker message sink (edits one message in place)
- Scheduled refresh job
- Command handlers
"""

from goldwatch.adapters.telegram.handlers import build_handlers
from goldwatch.adapters.telegram.jobs import refresh_job
from goldwatch.adapters.telegram.sink import TelegramTickerSink

__all__ = [
    "build_handlers",
    "refresh_job",
    "TelegramTickerSink",
]
