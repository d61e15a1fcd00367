# src/goldwatch/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for the gold price API and the two
exchange rate APIs. All clients share the JSON fetching and error
translation in JsonApiProvider.
"""

from goldwatch.adapters.providers.base import JsonApiProvider
from goldwatch.adapters.providers.exchange_rates import (
    ExchangeRateApiProvider,
    OpenErApiProvider,
    UsdRateSource,
)
from goldwatch.adapters.providers.goldprice import GoldPriceProvider

__all__ = [
    "JsonApiProvider",
    "UsdRateSource",
    "ExchangeRateApiProvider",
    "OpenErApiProvider",
    "GoldPriceProvider",
]
