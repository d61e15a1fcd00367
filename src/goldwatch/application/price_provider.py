# src/goldwatch/application/price_provider.py
"""
Price Provider - Gold Spot Price with Last-Known-Good Cache

This module wraps the gold price API client. A fresh, validated response is
cached in full; when a later fetch fails (network, HTTP or shape problem),
the cached response is served again and the reading is tagged as CACHE.
Any client failure counts as a failed fetch, not only DomainError.
NoDataAvailable is raised only when the fetch fails and nothing has ever
been cached in this process.

Files that USE this module:
- goldwatch.application.update_cycle (UpdateCycle calls fetch_spot_price each cycle)
- goldwatch.app (builds the provider)
- tests.test_price_provider (unit tests)

Files that this module USES:
- goldwatch.adapters.providers.goldprice (GoldPriceProvider client and reading builder)
- goldwatch.domain.errors (NoDataAvailable)
- goldwatch.domain.models (SpotPriceReading, PriceProvenance)
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from goldwatch.adapters.providers.goldprice import GoldPriceProvider
from goldwatch.domain.errors import NoDataAvailable
from goldwatch.domain.models import PriceProvenance, SpotPriceReading

log = logging.getLogger(__name__)


class PriceProvider:
    """Fetches the gold spot price, serving the last good response on failure."""

    def __init__(self, client: Optional[GoldPriceProvider] = None):
        """
        Args:
            client: Gold price API client (defaults to GoldPriceProvider with settings)
        """
        self.client = client or GoldPriceProvider()
        self._last_data: Optional[Dict[str, Any]] = None
        self._last_ts: Optional[datetime] = None

    def has_cache(self) -> bool:
        return self._last_data is not None

    def fetch_spot_price(self) -> SpotPriceReading:
        """
        Get the current spot price reading.

        Returns:
            SpotPriceReading with provenance LIVE, or CACHE when the fetch failed

        Raises:
            NoDataAvailable: If the fetch failed and no response was ever cached
        """
        try:
            data = self.client.get_latest_raw()
        except Exception as e:
            if self._last_data is None:
                log.error("Gold price fetch failed and no cached data exists: %s", e)
                raise NoDataAvailable(f"gold price unavailable: {e}") from e
            log.warning("Gold price fetch failed, serving cached data from %s: %s", self._last_ts, e)
            return GoldPriceProvider.to_reading(self._last_data, self._last_ts, PriceProvenance.CACHE)

        self._last_data = data
        self._last_ts = datetime.now(timezone.utc)
        reading = GoldPriceProvider.to_reading(data, self._last_ts)
        log.info("Gold spot price: %s USD/oz", reading.price_usd_per_ounce)
        return reading
