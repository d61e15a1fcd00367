# src/goldwatch/adapters/telegram/handlers.py
"""
Telegram Handlers - Command Processing

Read-only commands over the latest published display state:
- /price:  the current ticker text
- /status: cycle outcome plus the exchange rate and the tier it came from

Files that USE this module:
- goldwatch.app (build_handlers creates handler instances)
- tests.test_telegram (unit tests)

Files that this module USES:
- goldwatch.application.update_cycle (UpdateCycle read-only accessors)
- goldwatch.adapters.formatting.formatter (render)
- goldwatch.shared.language (translate)
"""
from __future__ import annotations

import logging
from functools import partial

from telegram import Update
from telegram.ext import CommandHandler, ContextTypes

from goldwatch.adapters.formatting.formatter import render
from goldwatch.application.update_cycle import UpdateCycle
from goldwatch.shared.language import translate

logger = logging.getLogger(__name__)


async def price_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE, cycle: UpdateCycle) -> None:
    """Handle /price - reply with the latest rendered ticker."""
    state = cycle.display
    if state is None:
        await update.message.reply_text(translate("no_data_yet"))
        return
    await update.message.reply_text(render(state).as_message())


async def status_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE, cycle: UpdateCycle) -> None:
    """Handle /status - report the last cycle outcome and rate provenance."""
    state = cycle.display
    if state is None or state.rate_source is None:
        await update.message.reply_text(translate("no_data_yet"))
        return
    outcome = cycle.last_outcome.value if cycle.last_outcome else cycle.state.value
    text = translate(
        "status_report",
        state=outcome,
        rate=f"{state.rate:.4f}",
        source=translate(f"rate_source_{state.rate_source.value}"),
    )
    logger.debug("Status requested by %s", update.effective_user.id if update.effective_user else "?")
    await update.message.reply_text(text)


def build_handlers(cycle: UpdateCycle):
    """
    Build and return list of Telegram bot handlers.

    Args:
        cycle: The application's UpdateCycle

    Returns:
        List of handler instances for registration with bot
    """
    return [
        CommandHandler("price", partial(price_cmd, cycle=cycle)),
        CommandHandler("status", partial(status_cmd, cycle=cycle)),
    ]
