# src/goldwatch/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Spot price readings and exchange rates, tagged with provenance
- The display snapshot published after each update cycle
- Update cycle states and user-facing notices

Files that USE this module:
- goldwatch.application.* (providers, converter and update cycle)
- goldwatch.adapters.* (formatting and telegram adapters)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from datetime import datetime  # Date/time utilities for timestamps
from enum import Enum  # Enumerations for provenance and status tags
from typing import Optional  # Type hints for optional values


class RateSource(str, Enum):
    """Fallback tier that produced an exchange rate."""
    PRIMARY = "primary"
    BACKUP = "backup"
    CACHE = "cache"
    DEFAULT = "default"


class PriceProvenance(str, Enum):
    """Whether a spot reading came from a fresh fetch or the last good response."""
    LIVE = "live"
    CACHE = "cache"


class DisplayStatus(str, Enum):
    OK = "ok"
    STALE = "stale"
    ERROR = "error"


class CycleState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    DEGRADED = "degraded"
    FAILED = "failed"


class Notice(str, Enum):
    """User-facing status message attached to a display snapshot."""
    UPDATED = "data_updated"
    CONNECT_FAILED = "connect_failed"
    SHOWING_PREVIOUS = "showing_previous"


@dataclass(frozen=True)
class SpotPriceReading:
    """
    Gold spot price reading.

    Attributes:
        price_usd_per_ounce: Spot price in USD per troy ounce
        change_percent: Percent change reported by the API, if any
        fetched_at: When the underlying response was received
        provenance: LIVE for a fresh fetch, CACHE when served from the last good response
    """
    price_usd_per_ounce: float
    change_percent: Optional[float]
    fetched_at: datetime
    provenance: PriceProvenance = PriceProvenance.LIVE

    @property
    def is_stale(self) -> bool:
        return self.provenance is PriceProvenance.CACHE


@dataclass(frozen=True)
class ExchangeRate:
    """
    USD to local currency rate.

    Attributes:
        value: Local-currency units per 1 USD
        source: Fallback tier that produced the value
    """
    value: float
    source: RateSource


@dataclass(frozen=True)
class DisplayState:
    """
    Snapshot published to the presentation layer after each cycle.

    A new instance replaces the previous one; instances are never mutated.

    Attributes:
        price_per_gram: Local price per gram (None when nothing could be loaded)
        change_percent: Period-over-period change in percent
        updated_at: Time of the last attempted update
        status: OK, STALE or ERROR
        notice: Message to surface alongside the numbers
        rate_source: Provenance of the exchange rate used
        rate: Exchange rate value used
    """
    price_per_gram: Optional[float]
    change_percent: Optional[float]
    updated_at: datetime
    status: DisplayStatus
    notice: Notice
    rate_source: Optional[RateSource] = None
    rate: Optional[float] = None

    @property
    def has_price(self) -> bool:
        return self.price_per_gram is not None
