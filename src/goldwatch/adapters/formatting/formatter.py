# src/goldwatch/adapters/formatting/formatter.py
"""
Message Formatter - Display Strings for the Ticker

This module turns a DisplayState into the strings the presentation sink
shows: price, change with its sign class, update time and status message.

Files that USE this module:
- goldwatch.adapters.telegram.jobs (renders each published state)
- goldwatch.adapters.telegram.handlers (/price and /status replies)
- tests.test_formatter (unit tests)

Files that this module USES:
- goldwatch.config (settings.currency_symbol)
- goldwatch.domain.models (DisplayState)
- goldwatch.shared.language (translate for all user-facing text)
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from goldwatch.config import settings
from goldwatch.domain.models import DisplayState
from goldwatch.shared.language import translate

POSITIVE = "positive"
NEGATIVE = "negative"


@dataclass(frozen=True)
class PresentationUpdate:
    """Everything the presentation sink needs for one cycle."""
    price_text: str
    change_text: str
    change_class: str
    time_text: str
    status_text: str

    def as_message(self) -> str:
        """Plain text layout used for chat messages."""
        lines = [self.price_text]
        if self.change_text:
            arrow = "📈" if self.change_class == POSITIVE else "📉"
            lines.append(f"{self.change_text} {arrow}")
        lines.append(self.time_text)
        lines.append(self.status_text)
        return "\n".join(lines)


def format_price(price: float) -> str:
    """
    Format a price with grouped thousands and exactly 2 decimals.

    Example: 1234567.891 -> '1,234,567.89'
    """
    return f"{price:,.2f}"


def format_change(percent: float) -> str:
    """
    Format a change percentage with 2 decimals and an explicit sign.

    Non-negative values get a leading '+'; negative zero is shown as '+0.00%'.
    """
    percent = percent + 0.0  # -0.0 -> 0.0
    prefix = "+" if percent >= 0 else ""
    return f"{prefix}{percent:.2f}%"


def change_class(percent: float) -> str:
    return POSITIVE if percent >= 0 else NEGATIVE


def format_timestamp(ts: datetime) -> str:
    """Format an update time in local time, e.g. 'Updated: 2024-01-05 13:05:09'."""
    local = ts.astimezone() if ts.tzinfo is not None else ts
    return translate("updated_at", date=local.strftime("%Y-%m-%d"), time=local.strftime("%H:%M:%S"))


def format_price_line(price: float, symbol: Optional[str] = None) -> str:
    return translate("price_line", symbol=symbol if symbol is not None else settings.currency_symbol,
                     value=format_price(price))


def render(state: DisplayState) -> PresentationUpdate:
    """
    Build the presentation strings for a display snapshot.

    A snapshot without a price renders the 'failed to load' label and no change.
    """
    if state.price_per_gram is None:
        price_text = translate("load_failed")
        change_text, css = "", ""
    else:
        price_text = format_price_line(state.price_per_gram)
        change = state.change_percent or 0.0
        change_text, css = format_change(change), change_class(change)

    return PresentationUpdate(
        price_text=price_text,
        change_text=change_text,
        change_class=css,
        time_text=format_timestamp(state.updated_at),
        status_text=translate(state.notice.value),
    )
