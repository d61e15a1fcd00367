# src/goldwatch/adapters/providers/base.py
"""
Base Provider - Shared JSON Fetching for HTTP APIs

This module defines the base class for all upstream API clients. It issues
a single GET request and translates every transport-level problem into
a NetworkError so callers only deal with domain errors.

Files that USE this module:
- goldwatch.adapters.providers.exchange_rates (rate endpoints)
- goldwatch.adapters.providers.goldprice (gold price endpoint)
- tests.test_providers (unit tests)

Files that this module USES:
- goldwatch.config (settings for HTTP timeout)
- goldwatch.domain.errors (NetworkError)
"""
import logging
from typing import Any, Optional

import requests

from goldwatch.config import settings
from goldwatch.domain.errors import NetworkError

log = logging.getLogger(__name__)


class JsonApiProvider:
    """Base class for clients of JSON-over-HTTP endpoints."""

    name = "api"

    def __init__(self, url: str, timeout: Optional[int] = None):
        """
        Args:
            url: Endpoint URL
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.url = url
        self.timeout = timeout or settings.http_timeout_seconds

    def _get_json(self) -> Any:
        """
        Fetch and decode the endpoint's JSON body.

        Returns:
            Decoded JSON value

        Raises:
            NetworkError: On timeout, connection failure, non-success status or invalid JSON
        """
        try:
            log.debug("Fetching %s from %s", self.name, self.url)
            resp = requests.get(
                self.url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.json()
        except requests.exceptions.Timeout as e:
            log.warning("%s timeout after %d seconds", self.name, self.timeout)
            raise NetworkError(f"{self.name} timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            log.warning("%s returned HTTP %s", self.name, status)
            raise NetworkError(f"{self.name} HTTP error: {status}") from e
        except requests.exceptions.RequestException as e:
            log.warning("%s request failed: %s", self.name, e)
            raise NetworkError(f"{self.name} request failed: {e}") from e
        except ValueError as e:
            log.warning("%s returned invalid JSON: %s", self.name, e)
            raise NetworkError(f"{self.name} returned invalid JSON: {e}") from e


def is_number(value: Any) -> bool:
    """True for int/float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
