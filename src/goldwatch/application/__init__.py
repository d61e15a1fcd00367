# src/goldwatch/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the rate and price providers, the price converter
and the update cycle that orchestrates them.
"""

from goldwatch.application.converter import GRAMS_PER_TROY_OUNCE, convert
from goldwatch.application.price_provider import PriceProvider
from goldwatch.application.rate_provider import DEFAULT_USD_RATE, RateProvider
from goldwatch.application.update_cycle import UpdateCycle

__all__ = [
    "GRAMS_PER_TROY_OUNCE",
    "DEFAULT_USD_RATE",
    "convert",
    "PriceProvider",
    "RateProvider",
    "UpdateCycle",
]
