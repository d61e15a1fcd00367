# tests/test_providers.py
"""
Provider Tests - Unit Tests for API Provider Classes

This module contains unit tests for the HTTP clients: the shared JSON
fetching in JsonApiProvider, both exchange rate APIs and the gold price API.
It tests error translation, response validation and reading construction.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- goldwatch.adapters.providers.* (providers under test)
- unittest.mock (Mock for API mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking responses)
from datetime import datetime, timezone

from goldwatch.adapters.providers.exchange_rates import (
    ExchangeRateApiProvider,
    OpenErApiProvider,
    UsdRateSource,
)
from goldwatch.adapters.providers.goldprice import GoldPriceProvider
from goldwatch.domain.errors import NetworkError, ValidationError
from goldwatch.domain.models import PriceProvenance


def _response(payload=None, status_error=None, json_error=None):
    resp = Mock()
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    else:
        resp.raise_for_status.return_value = None
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


class TestJsonApiProvider:
    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_timeout_is_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        provider = ExchangeRateApiProvider()
        with pytest.raises(NetworkError, match="timeout"):
            provider.usd_rate()

    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_connection_error_is_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        provider = ExchangeRateApiProvider()
        with pytest.raises(NetworkError, match="request failed"):
            provider.usd_rate()

    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_http_error_is_network_error(self, mock_get):
        error_response = Mock(status_code=503)
        mock_get.return_value = _response(
            status_error=requests.exceptions.HTTPError("503", response=error_response)
        )

        provider = GoldPriceProvider()
        with pytest.raises(NetworkError, match="HTTP error: 503"):
            provider.get_latest_raw()

    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_invalid_json_is_network_error(self, mock_get):
        mock_get.return_value = _response(json_error=ValueError("Invalid JSON"))

        provider = GoldPriceProvider()
        with pytest.raises(NetworkError, match="invalid JSON"):
            provider.get_latest_raw()

    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_request_uses_timeout(self, mock_get):
        mock_get.return_value = _response({"rates": {"CNY": 7.1}})

        provider = ExchangeRateApiProvider(timeout=3)
        provider.usd_rate()

        _, kwargs = mock_get.call_args
        assert kwargs["timeout"] == 3
        assert kwargs["headers"]["Accept"] == "application/json"


class TestExchangeRateProviders:
    def test_init_with_defaults(self):
        primary = ExchangeRateApiProvider()
        backup = OpenErApiProvider()
        assert primary.url == "https://api.exchangerate-api.com/v4/latest/USD"
        assert backup.url == "https://open.er-api.com/v6/latest/USD"
        assert primary.currency == "CNY"
        assert primary.timeout == 10  # default from config

    def test_init_with_custom_params(self):
        provider = UsdRateSource("http://test.com/rates", currency="eur", timeout=5)
        assert provider.url == "http://test.com/rates"
        assert provider.currency == "EUR"
        assert provider.timeout == 5

    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_usd_rate_success(self, mock_get):
        mock_get.return_value = _response({"base": "USD", "rates": {"USD": 1, "CNY": 7.18}})

        assert ExchangeRateApiProvider().usd_rate() == 7.18
        mock_get.assert_called_once()

    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_usd_rate_integer_value(self, mock_get):
        mock_get.return_value = _response({"rates": {"CNY": 7}})

        rate = OpenErApiProvider().usd_rate()
        assert rate == 7.0
        assert isinstance(rate, float)

    @pytest.mark.parametrize("payload", [
        {},
        {"rates": None},
        {"rates": {"EUR": 0.92}},
        {"rates": {"CNY": "7.18"}},
        {"rates": {"CNY": 0}},
        {"rates": {"CNY": -1.0}},
        {"rates": {"CNY": True}},
        ["not", "a", "dict"],
    ])
    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_usd_rate_invalid_shape(self, mock_get, payload):
        mock_get.return_value = _response(payload)

        with pytest.raises(ValidationError):
            ExchangeRateApiProvider().usd_rate()


class TestGoldPriceProvider:
    def test_init_with_defaults(self):
        provider = GoldPriceProvider()
        assert provider.url == "https://data-asg.goldprice.org/dbXRates/USD"
        assert provider.timeout == 10

    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_get_latest_raw_success(self, mock_get):
        payload = {"ts": 1, "items": [{"curr": "USD", "xauPrice": 2034.5, "chgXau": 0.4}]}
        mock_get.return_value = _response(payload)

        assert GoldPriceProvider().get_latest_raw() == payload

    @pytest.mark.parametrize("payload", [
        None,
        {},
        {"items": []},
        {"items": "USD"},
        {"items": [{}]},
        {"items": [{"xauPrice": "2034.5"}]},
        {"items": [{"xauPrice": None}]},
        {"items": [None]},
        {"items": [{"xauPrice": float("nan")}]},
        {"items": [{"xauPrice": float("inf")}]},
        {"items": [{"xauPrice": -5.0}]},
        {"items": [{"xauPrice": 0}]},
        {"items": [{"xauPrice": True}]},
    ])
    @patch('goldwatch.adapters.providers.base.requests.get')
    def test_get_latest_raw_invalid_shape(self, mock_get, payload):
        mock_get.return_value = _response(payload)

        with pytest.raises(ValidationError):
            GoldPriceProvider().get_latest_raw()

    def test_to_reading_with_change(self):
        ts = datetime(2024, 1, 5, 5, 0, tzinfo=timezone.utc)
        data = {"items": [{"xauPrice": 2000, "chgXau": 0.5}]}

        reading = GoldPriceProvider.to_reading(data, ts)

        assert reading.price_usd_per_ounce == 2000.0
        assert reading.change_percent == 0.5
        assert reading.fetched_at == ts
        assert reading.provenance is PriceProvenance.LIVE
        assert not reading.is_stale

    def test_to_reading_without_change(self):
        ts = datetime(2024, 1, 5, 5, 0, tzinfo=timezone.utc)
        data = {"items": [{"xauPrice": 2000.25, "chgXau": "n/a"}]}

        reading = GoldPriceProvider.to_reading(data, ts, PriceProvenance.CACHE)

        assert reading.change_percent is None
        assert reading.is_stale
