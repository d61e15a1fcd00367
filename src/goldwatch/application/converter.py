# src/goldwatch/application/converter.py
"""
Price Converter - Per-gram Price and Change Percentage

Pure functions turning a spot reading and an exchange rate into the
displayed per-gram price and change percentage. No rounding happens here;
formatting belongs to goldwatch.adapters.formatting.

Files that USE this module:
- goldwatch.application.update_cycle (UpdateCycle converts each live reading)
- tests.test_converter (unit tests)

Files that this module USES:
- goldwatch.domain.models (SpotPriceReading, ExchangeRate)
"""
from __future__ import annotations

from typing import Optional, Tuple

from goldwatch.domain.models import ExchangeRate, SpotPriceReading

# Grams per troy ounce
GRAMS_PER_TROY_OUNCE = 31.1035


def price_per_gram(spot_usd_per_ounce: float, rate: float) -> float:
    return spot_usd_per_ounce * rate / GRAMS_PER_TROY_OUNCE


def change_percent(current: float, previous: Optional[float],
                   reported: Optional[float] = None) -> float:
    """
    Change percentage for the current spot price.

    The delta observed against the previous cycle takes precedence over the
    percentage reported by the API; with neither available the change is 0.

    Args:
        current: Current spot price
        previous: Spot price from the previous successful cycle, if any
        reported: API-supplied change percentage, if any
    """
    if previous:
        return (current - previous) / previous * 100.0
    if reported is not None:
        return reported
    return 0.0


def convert(spot: SpotPriceReading, rate: ExchangeRate,
            previous_spot_usd: Optional[float] = None) -> Tuple[float, float]:
    """
    Convert a spot reading into (price_per_gram, change_percent).

    Args:
        spot: Spot price reading in USD per troy ounce
        rate: Local-currency units per 1 USD
        previous_spot_usd: Spot price used as the change baseline, if any
    """
    return (
        price_per_gram(spot.price_usd_per_ounce, rate.value),
        change_percent(spot.price_usd_per_ounce, previous_spot_usd, spot.change_percent),
    )
