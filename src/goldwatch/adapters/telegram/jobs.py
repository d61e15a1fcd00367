# src/goldwatch/adapters/telegram/jobs.py
"""
Telegram Jobs - Scheduled Refresh

The job queue runs refresh_job once at startup and then every
REFRESH_INTERVAL_SECONDS. Each run performs one update cycle and hands the
rendered state to the ticker sink.

Files that USE this module:
- goldwatch.app (refresh_job is registered as a repeating job)
- tests.test_telegram (unit tests)

Files that this module USES:
- goldwatch.application.update_cycle (UpdateCycle.run_once)
- goldwatch.adapters.formatting.formatter (render)
- goldwatch.adapters.telegram.sink (TelegramTickerSink)
"""
from __future__ import annotations

import logging
from typing import Optional

from telegram.ext import ContextTypes

from goldwatch.adapters.formatting.formatter import render
from goldwatch.adapters.telegram.sink import TelegramTickerSink
from goldwatch.application.update_cycle import UpdateCycle

logger = logging.getLogger(__name__)


async def refresh_job(context: ContextTypes.DEFAULT_TYPE, cycle: UpdateCycle,
                      sink: Optional[TelegramTickerSink] = None) -> None:
    """
    Run one update cycle and publish the result.

    Args:
        context: Telegram job context (provides the bot)
        cycle: The application's UpdateCycle
        sink: Ticker sink; when None the rendered state is only logged
    """
    state = await cycle.run_once()
    if state is None:
        return

    update = render(state)
    logger.info(
        "Ticker: %s | %s | %s | %s",
        update.price_text, update.change_text or "-", update.time_text, update.status_text,
    )
    if sink is not None:
        await sink.publish(context.bot, update)
