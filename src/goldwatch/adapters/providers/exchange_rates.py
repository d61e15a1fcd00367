# src/goldwatch/adapters/providers/exchange_rates.py
"""
Exchange Rate Providers - USD to Local Currency

This module implements clients for the two USD-based exchange rate APIs.
Both return a body of the form {"rates": {"CNY": 7.19, ...}}; the primary
is exchangerate-api.com and the backup is open.er-api.com.

Files that USE this module:
- goldwatch.application.rate_provider (primary and backup fallback steps)
- goldwatch.app (wires both providers)
- tests.test_providers (unit tests)

Files that this module USES:
- goldwatch.adapters.providers.base (JsonApiProvider)
- goldwatch.config (settings for URLs and the local currency code)
- goldwatch.domain.errors (ValidationError)
"""
import logging
import math
from typing import Optional

from goldwatch.adapters.providers.base import JsonApiProvider, is_number
from goldwatch.config import settings
from goldwatch.domain.errors import ValidationError

log = logging.getLogger(__name__)


class UsdRateSource(JsonApiProvider):
    """
    Client for an endpoint publishing USD-based rates under a "rates" mapping.
    """

    name = "rate API"

    def __init__(self, url: str, currency: Optional[str] = None, timeout: Optional[int] = None):
        """
        Args:
            url: Endpoint URL
            currency: Local currency code to extract (defaults to settings.local_currency)
            timeout: Optional HTTP timeout in seconds
        """
        super().__init__(url, timeout)
        self.currency = (currency or settings.local_currency).upper()

    def usd_rate(self) -> float:
        """
        Get local-currency units per 1 USD.

        Returns:
            Positive finite rate as float

        Raises:
            NetworkError: If the request fails
            ValidationError: If the response has no usable rate for the currency
        """
        data = self._get_json()

        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            log.warning("%s response missing 'rates' mapping", self.name)
            raise ValidationError(f"{self.name} response missing 'rates' mapping")

        rate = rates.get(self.currency)
        if not is_number(rate) or not math.isfinite(rate) or rate <= 0:
            log.warning("%s returned unusable %s rate: %r", self.name, self.currency, rate)
            raise ValidationError(f"{self.name} has no valid rate for {self.currency}")

        log.info("%s: 1 USD = %s %s", self.name, rate, self.currency)
        return float(rate)


class ExchangeRateApiProvider(UsdRateSource):
    """Primary source: exchangerate-api.com v4."""

    name = "exchangerate-api"

    def __init__(self, base_url: Optional[str] = None, currency: Optional[str] = None,
                 timeout: Optional[int] = None):
        super().__init__(base_url or settings.rate_api_url, currency, timeout)


class OpenErApiProvider(UsdRateSource):
    """Backup source: open.er-api.com v6."""

    name = "open-er-api"

    def __init__(self, base_url: Optional[str] = None, currency: Optional[str] = None,
                 timeout: Optional[int] = None):
        super().__init__(base_url or settings.backup_rate_api_url, currency, timeout)
