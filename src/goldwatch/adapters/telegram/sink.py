# src/goldwatch/adapters/telegram/sink.py
"""
Telegram Ticker Sink - Presentation of the Latest Display State

The ticker is a single channel message: it is sent once and then edited in
place on every cycle, so the channel always shows the current price rather
than a stream of posts.

Files that USE this module:
- goldwatch.adapters.telegram.jobs (refresh_job publishes through the sink)
- goldwatch.app (creates the sink when Telegram is configured)
- tests.test_telegram (unit tests)

Files that this module USES:
- goldwatch.adapters.formatting.formatter (PresentationUpdate)
"""
from __future__ import annotations

import logging
from typing import Optional

from telegram import Bot
from telegram.error import BadRequest, RetryAfter, TelegramError

from goldwatch.adapters.formatting.formatter import PresentationUpdate

logger = logging.getLogger(__name__)


class TelegramTickerSink:
    """Keeps one chat message in sync with the latest PresentationUpdate."""

    def __init__(self, chat_id: str):
        self.chat_id = chat_id
        self.message_id: Optional[int] = None
        self._last_text: Optional[str] = None

    async def publish(self, bot: Bot, update: PresentationUpdate) -> None:
        """
        Show the update in the ticker message.

        Telegram failures are logged and never propagate; the next cycle
        publishes again.
        """
        text = update.as_message()
        if text == self._last_text:
            logger.debug("Ticker text unchanged, skipping edit")
            return

        try:
            if self.message_id is None:
                message = await bot.send_message(chat_id=self.chat_id, text=text)
                self.message_id = message.message_id
                logger.info("Ticker message created in %s (message_id=%s)", self.chat_id, self.message_id)
            else:
                await bot.edit_message_text(chat_id=self.chat_id, message_id=self.message_id, text=text)
            self._last_text = text
        except RetryAfter as e:
            logger.warning("Telegram rate limit (429): retry after %s seconds, skipping this update", e.retry_after)
        except BadRequest as e:
            if "not modified" in str(e).lower():
                self._last_text = text
                return
            # Message deleted or not editable: start a new ticker message next time
            logger.warning("Ticker message %s could not be edited (%s), will send a new one", self.message_id, e)
            self.message_id = None
            self._last_text = None
        except TelegramError as e:
            logger.warning("Failed to publish ticker update: %s (type: %s)", e, type(e).__name__)
