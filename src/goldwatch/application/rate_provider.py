# src/goldwatch/application/rate_provider.py
"""
Rate Provider - USD→Local Exchange Rate with Fallback Chain

This module resolves the exchange rate used for price conversion. The
rate is resolved by walking an ordered list of fallback steps:

1. Primary rate API
2. Backup rate API
3. Last successfully fetched rate (this process only)
4. Hardcoded default rate

Each step either yields a value or None ("continue with the next step").
The last step always yields a value, so fetch_rate() never raises.

Files that USE this module:
- goldwatch.application.update_cycle (UpdateCycle calls fetch_rate each cycle)
- goldwatch.app (builds the provider with both rate APIs)
- tests.test_rate_provider (unit tests)

Files that this module USES:
- goldwatch.adapters.providers.exchange_rates (clients satisfying UsdRateClient)
- goldwatch.domain.models (ExchangeRate, RateSource)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from goldwatch.domain.models import ExchangeRate, RateSource

log = logging.getLogger(__name__)

# Local-currency units per 1 USD used when nothing better is known
DEFAULT_USD_RATE = 7.2


class UsdRateClient(Protocol):
    """Anything that can return local-currency units per 1 USD."""
    name: str

    def usd_rate(self) -> float:
        ...


@dataclass(frozen=True)
class FallbackStep:
    """One tier of the rate fallback chain."""
    source: RateSource
    resolve: Callable[[], Optional[float]]


class RateProvider:
    """
    Resolves the exchange rate through primary → backup → cache → default.

    The cache holds the last rate returned by either API and is only
    written after a successful, validated fetch.
    """

    def __init__(self, primary: UsdRateClient, backup: UsdRateClient,
                 default_rate: float = DEFAULT_USD_RATE):
        """
        Args:
            primary: Rate API tried first
            backup: Rate API tried when the primary fails
            default_rate: Value returned when both APIs fail and nothing is cached
        """
        self.primary = primary
        self.backup = backup
        self.default_rate = default_rate
        self._cached_rate: Optional[float] = None
        self._last_source: Optional[RateSource] = None

    @property
    def cached_rate(self) -> Optional[float]:
        return self._cached_rate

    @property
    def last_source(self) -> Optional[RateSource]:
        """Provenance of the most recent fetch_rate() result, or None before the first call."""
        return self._last_source

    def steps(self) -> List[FallbackStep]:
        """Return the fallback chain in evaluation order."""
        return [
            FallbackStep(RateSource.PRIMARY, lambda: self._from_api(self.primary)),
            FallbackStep(RateSource.BACKUP, lambda: self._from_api(self.backup)),
            FallbackStep(RateSource.CACHE, lambda: self._cached_rate),
            FallbackStep(RateSource.DEFAULT, lambda: self.default_rate),
        ]

    def _from_api(self, client: UsdRateClient) -> Optional[float]:
        try:
            rate = client.usd_rate()
        except Exception as e:
            log.warning("Rate source %s failed: %s", getattr(client, "name", client), e)
            return None
        self._cached_rate = rate
        return rate

    def fetch_rate(self) -> ExchangeRate:
        """
        Resolve the current exchange rate.

        Returns:
            ExchangeRate tagged with the tier that produced it
        """
        for step in self.steps():
            value = step.resolve()
            if value is None:
                continue
            if step.source in (RateSource.CACHE, RateSource.DEFAULT):
                log.warning("Both rate APIs failed, using %s rate %s", step.source.value, value)
            self._last_source = step.source
            return ExchangeRate(value=value, source=step.source)

        # The DEFAULT step always yields a value
        raise AssertionError("rate fallback chain produced no value")
