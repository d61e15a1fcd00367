# src/goldwatch/application/update_cycle.py
"""
Update Cycle - One Refresh of the Gold Price Display

This module owns all mutable ticker state: the published DisplayState, the
spot price used as the change baseline, and the first-cycle flag. One call
to run_once() performs a full refresh:

1. Resolve the exchange rate (never fails)
2. Fetch the spot price (may fail with NoDataAvailable)
3. Convert and publish a new DisplayState

Outcomes:
- SUCCEEDED: live reading converted, status OK
- DEGRADED:  fetch failed after a previous cycle; the previous numbers are
             kept with a refreshed timestamp and a "showing previous data" notice
- FAILED:    first cycle and nothing to show; status ERROR

Blocking HTTP calls run in the default executor. Calls that arrive while a
cycle is still in flight are skipped, so cycles never overlap.

Files that USE this module:
- goldwatch.adapters.telegram.jobs (refresh_job runs one cycle per tick)
- goldwatch.adapters.telegram.handlers (/price and /status read the published state)
- goldwatch.app (creates the single UpdateCycle instance)
- tests.test_update_cycle (unit tests)

Files that this module USES:
- goldwatch.application.rate_provider (RateProvider)
- goldwatch.application.price_provider (PriceProvider)
- goldwatch.application.converter (convert)
- goldwatch.domain.models (DisplayState, CycleState, DisplayStatus, Notice)
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Optional

from goldwatch.application.converter import convert
from goldwatch.application.price_provider import PriceProvider
from goldwatch.application.rate_provider import RateProvider
from goldwatch.domain.errors import NoDataAvailable
from goldwatch.domain.models import (
    CycleState,
    DisplayState,
    DisplayStatus,
    ExchangeRate,
    Notice,
    SpotPriceReading,
)

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UpdateCycle:
    """Runs refresh cycles and publishes immutable DisplayState snapshots."""

    def __init__(self, rate_provider: RateProvider, price_provider: PriceProvider,
                 clock: Callable[[], datetime] = _utcnow):
        """
        Args:
            rate_provider: Exchange rate fallback chain
            price_provider: Spot price provider with last-good cache
            clock: Source of timestamps for published states
        """
        self.rate_provider = rate_provider
        self.price_provider = price_provider
        self._clock = clock
        self._lock = asyncio.Lock()
        self._state = CycleState.IDLE
        self._last_outcome: Optional[CycleState] = None
        self._display: Optional[DisplayState] = None
        self._previous_spot: Optional[float] = None
        self._first_cycle = True

    @property
    def state(self) -> CycleState:
        return self._state

    @property
    def last_outcome(self) -> Optional[CycleState]:
        """SUCCEEDED, DEGRADED or FAILED for the last finished cycle."""
        return self._last_outcome

    @property
    def display(self) -> Optional[DisplayState]:
        """Latest published snapshot, or None before the first cycle finishes."""
        return self._display

    @property
    def previous_spot(self) -> Optional[float]:
        return self._previous_spot

    @property
    def is_first_cycle(self) -> bool:
        return self._first_cycle

    async def run_once(self) -> Optional[DisplayState]:
        """
        Run one refresh cycle.

        Returns:
            The newly published DisplayState, or None if the call was skipped
            because another cycle is still running
        """
        if self._lock.locked():
            log.warning("Previous update cycle still in flight, skipping this tick")
            return None

        async with self._lock:
            self._state = CycleState.RUNNING
            try:
                outcome = await self._run()
            finally:
                self._state = CycleState.IDLE
            self._last_outcome = outcome
            log.info("Update cycle finished: %s", outcome.value)
            return self._display

    async def _run(self) -> CycleState:
        loop = asyncio.get_running_loop()
        rate = await loop.run_in_executor(None, self.rate_provider.fetch_rate)

        try:
            reading = await loop.run_in_executor(None, self.price_provider.fetch_spot_price)
        except NoDataAvailable as e:
            log.error("No gold price data available: %s", e)
            return self._on_no_data(rate)
        except Exception:
            log.exception("Unexpected error while fetching the gold price")
            return self._on_no_data(rate)

        if reading.is_stale:
            return self._on_stale(reading, rate)
        return self._on_live(reading, rate)

    def _on_live(self, reading: SpotPriceReading, rate: ExchangeRate) -> CycleState:
        per_gram, change = convert(reading, rate, self._previous_spot)
        self._display = DisplayState(
            price_per_gram=per_gram,
            change_percent=change,
            updated_at=self._clock(),
            status=DisplayStatus.OK,
            notice=Notice.UPDATED,
            rate_source=rate.source,
            rate=rate.value,
        )
        self._previous_spot = reading.price_usd_per_ounce
        self._first_cycle = False
        return CycleState.SUCCEEDED

    def _on_stale(self, reading: SpotPriceReading, rate: ExchangeRate) -> CycleState:
        prior = self._display
        if prior is not None and prior.has_price:
            self._display = self._keep_previous(prior, rate)
        else:
            per_gram, change = convert(reading, rate, self._previous_spot)
            self._display = DisplayState(
                price_per_gram=per_gram,
                change_percent=change,
                updated_at=self._clock(),
                status=DisplayStatus.STALE,
                notice=Notice.SHOWING_PREVIOUS,
                rate_source=rate.source,
                rate=rate.value,
            )
        return CycleState.DEGRADED

    def _on_no_data(self, rate: ExchangeRate) -> CycleState:
        if self._first_cycle or self._display is None:
            self._display = DisplayState(
                price_per_gram=None,
                change_percent=None,
                updated_at=self._clock(),
                status=DisplayStatus.ERROR,
                notice=Notice.CONNECT_FAILED,
                rate_source=rate.source,
                rate=rate.value,
            )
            self._first_cycle = False
            return CycleState.FAILED

        self._display = self._keep_previous(self._display, rate)
        return CycleState.DEGRADED

    def _keep_previous(self, prior: DisplayState, rate: ExchangeRate) -> DisplayState:
        """
        Re-publish the prior numbers with a fresh timestamp.

        The rate tag follows this cycle's resolution. A prior state without a
        price keeps its ERROR status; one with a price becomes STALE.
        """
        return replace(
            prior,
            updated_at=self._clock(),
            status=DisplayStatus.STALE if prior.has_price else prior.status,
            notice=Notice.SHOWING_PREVIOUS,
            rate_source=rate.source,
            rate=rate.value,
        )
