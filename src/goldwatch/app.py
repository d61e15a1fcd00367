# src/goldwatch/app.py
"""
Application Entry Point - Ticker Initialization and Startup

This module serves as the composition root for GoldWatch. It wires the
providers into a single UpdateCycle, registers the refresh job (first run
immediately, then every REFRESH_INTERVAL_SECONDS) and starts the bot.

Files that USE this module:
- the `goldwatch` console script (pyproject.toml)

Files that this module USES:
- goldwatch.shared.logging_conf (setup_logging for logging configuration)
- goldwatch.config (settings)
- goldwatch.adapters.providers.* (API clients)
- goldwatch.application.* (RateProvider, PriceProvider, UpdateCycle)
- goldwatch.adapters.telegram.* (handlers, refresh job, ticker sink)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
from datetime import timedelta  # Interval for the repeating job
from functools import partial  # Create partial functions with preset arguments

from telegram.ext import Application  # Main Telegram bot application class
from telegram.error import TimedOut, NetworkError  # Telegram API error exceptions

from goldwatch.shared.logging_conf import setup_logging
from goldwatch.adapters.providers.exchange_rates import ExchangeRateApiProvider, OpenErApiProvider
from goldwatch.adapters.providers.goldprice import GoldPriceProvider
from goldwatch.adapters.telegram.handlers import build_handlers
from goldwatch.adapters.telegram.jobs import refresh_job
from goldwatch.adapters.telegram.sink import TelegramTickerSink
from goldwatch.application.price_provider import PriceProvider
from goldwatch.application.rate_provider import RateProvider
from goldwatch.application.update_cycle import UpdateCycle


def build_cycle() -> UpdateCycle:
    """Create the process-wide UpdateCycle with the configured API clients."""
    rate_provider = RateProvider(primary=ExchangeRateApiProvider(), backup=OpenErApiProvider())
    price_provider = PriceProvider(GoldPriceProvider())
    return UpdateCycle(rate_provider, price_provider)


def main() -> None:
    """
    Initialize and start the ticker.

    This function:
    1. Sets up logging and validates configuration
    2. Builds the UpdateCycle and the ticker sink
    3. Registers command handlers and the repeating refresh job
    4. Starts the bot polling loop
    """
    from goldwatch.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)

    if not settings.bot_token:
        raise RuntimeError("BOT_TOKEN missing")

    cycle = build_cycle()
    sink = TelegramTickerSink(settings.channel_id) if settings.channel_id else None
    if sink is None:
        logger.warning("CHANNEL_ID not configured, ticker updates will only be logged")

    app = Application.builder().token(settings.bot_token).build()

    for h in build_handlers(cycle):
        app.add_handler(h)

    app.job_queue.run_repeating(
        callback=partial(refresh_job, cycle=cycle, sink=sink),
        interval=timedelta(seconds=settings.refresh_interval_seconds),
        first=0,  # start immediately at boot
        name="gold_ticker",
        job_kwargs={"max_instances": 1, "coalesce": True},
    )

    logger.info(
        "Starting GoldWatch… refresh interval=%ds, currency=%s, http timeout=%ds",
        settings.refresh_interval_seconds,
        settings.local_currency,
        settings.http_timeout_seconds,
    )

    try:
        app.run_polling(close_loop=False, drop_pending_updates=True)
    except (TimedOut, NetworkError) as e:
        logger.error(
            "Network error during bot operation: %s (type: %s)",
            e,
            type(e).__name__,
            exc_info=True,
        )
        raise
    except KeyboardInterrupt:
        logger.info("GoldWatch stopped by user (KeyboardInterrupt)")
        raise


if __name__ == "__main__":
    main()
