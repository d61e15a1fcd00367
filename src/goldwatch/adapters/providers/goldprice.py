# src/goldwatch/adapters/providers/goldprice.py
"""
Gold Price Provider - goldprice.org Spot Price Client

This module implements the client for the goldprice.org USD endpoint.
The response looks like:
  {"ts": ..., "items": [{"curr": "USD", "xauPrice": 2034.5, "chgXau": 3.1, "pcXau": 0.15, ...}]}

Only the first item is used. A response is valid when it has at least one
item whose xauPrice is a finite positive number; anything else raises
ValidationError.

Files that USE this module:
- goldwatch.application.price_provider (PriceProvider wraps this client with caching)
- goldwatch.app (wires the provider)
- tests.test_providers (unit tests)

Files that this module USES:
- goldwatch.adapters.providers.base (JsonApiProvider)
- goldwatch.config (settings for the endpoint URL)
- goldwatch.domain.models (SpotPriceReading)
"""
import logging
import math
from datetime import datetime
from typing import Any, Dict, Optional

from goldwatch.adapters.providers.base import JsonApiProvider, is_number
from goldwatch.config import settings
from goldwatch.domain.errors import ValidationError
from goldwatch.domain.models import PriceProvenance, SpotPriceReading

log = logging.getLogger(__name__)


class GoldPriceProvider(JsonApiProvider):
    """Client for the gold spot price endpoint (USD per troy ounce)."""

    name = "goldprice.org"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        super().__init__(base_url or settings.gold_api_url, timeout)

    @staticmethod
    def validate(data: Any) -> Dict[str, Any]:
        """
        Check the response shape.

        Args:
            data: Decoded JSON body

        Returns:
            The same body, typed as a dict

        Raises:
            ValidationError: If items[0].xauPrice is missing, non-numeric, non-finite or <= 0
        """
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list) or not items:
            raise ValidationError("gold price response has no items")
        first = items[0]
        if not isinstance(first, dict) or not is_number(first.get("xauPrice")):
            raise ValidationError("gold price response has no numeric xauPrice")
        price = first["xauPrice"]
        if not math.isfinite(price) or price <= 0:
            raise ValidationError(f"gold price response has unusable xauPrice: {price!r}")
        return data

    def get_latest_raw(self) -> Dict[str, Any]:
        """
        Fetch and validate the latest raw response.

        Raises:
            NetworkError: If the request fails
            ValidationError: If the response shape is unexpected
        """
        data = self._get_json()
        try:
            return self.validate(data)
        except ValidationError:
            log.warning("%s returned an unexpected response shape: %.200r", self.name, data)
            raise

    @staticmethod
    def to_reading(data: Dict[str, Any], fetched_at: datetime,
                   provenance: PriceProvenance = PriceProvenance.LIVE) -> SpotPriceReading:
        """
        Build a SpotPriceReading from a validated response.

        Args:
            data: Response already accepted by validate()
            fetched_at: When the response was received
            provenance: LIVE for a fresh response, CACHE for a re-served one
        """
        item = data["items"][0]
        change = item.get("chgXau")
        return SpotPriceReading(
            price_usd_per_ounce=float(item["xauPrice"]),
            change_percent=float(change) if is_number(change) else None,
            fetched_at=fetched_at,
            provenance=provenance,
        )
