# tests/test_rate_provider.py
"""
Rate Provider Tests - Exchange Rate Fallback Chain

Covers every combination of primary/backup success and failure, the
last-good rate cache and the hardcoded default.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- goldwatch.application.rate_provider (RateProvider under test)
- goldwatch.domain (errors and models)
- unittest.mock (Mock rate clients)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock objects standing in for the rate APIs

from goldwatch.application.rate_provider import DEFAULT_USD_RATE, RateProvider
from goldwatch.domain.errors import NetworkError, ValidationError
from goldwatch.domain.models import ExchangeRate, RateSource


def _client(name, value=None, error=None):
    client = Mock()
    client.name = name
    if error is not None:
        client.usd_rate.side_effect = error
    else:
        client.usd_rate.return_value = value
    return client


class TestRateProviderChain:
    def test_primary_success(self):
        primary = _client("primary", 7.19)
        backup = _client("backup", 7.15)
        provider = RateProvider(primary, backup)

        rate = provider.fetch_rate()

        assert rate == ExchangeRate(value=7.19, source=RateSource.PRIMARY)
        backup.usd_rate.assert_not_called()
        assert provider.cached_rate == 7.19
        assert provider.last_source is RateSource.PRIMARY

    def test_primary_fails_backup_success(self):
        primary = _client("primary", error=NetworkError("down"))
        backup = _client("backup", 7.15)
        provider = RateProvider(primary, backup)

        rate = provider.fetch_rate()

        assert rate.value == 7.15
        assert rate.source is RateSource.BACKUP
        assert provider.cached_rate == 7.15

    def test_both_fail_with_cache(self):
        primary = _client("primary", 7.18)
        backup = _client("backup", error=NetworkError("down"))
        provider = RateProvider(primary, backup)
        provider.fetch_rate()

        primary.usd_rate.side_effect = ValidationError("missing CNY")
        rate = provider.fetch_rate()

        assert rate.value == 7.18
        assert rate.source is RateSource.CACHE

    def test_both_fail_without_cache(self):
        primary = _client("primary", error=NetworkError("down"))
        backup = _client("backup", error=ValidationError("bad shape"))
        provider = RateProvider(primary, backup)

        rate = provider.fetch_rate()

        assert rate.value == DEFAULT_USD_RATE == 7.2
        assert rate.source is RateSource.DEFAULT
        assert provider.cached_rate is None

    def test_custom_default_rate(self):
        primary = _client("primary", error=NetworkError("down"))
        backup = _client("backup", error=NetworkError("down"))

        rate = RateProvider(primary, backup, default_rate=6.9).fetch_rate()

        assert rate == ExchangeRate(value=6.9, source=RateSource.DEFAULT)

    def test_unexpected_client_error_does_not_escape(self):
        primary = _client("primary", error=RuntimeError("bug"))
        backup = _client("backup", error=KeyError("rates"))

        rate = RateProvider(primary, backup).fetch_rate()

        assert rate.source is RateSource.DEFAULT

    def test_failed_fetch_keeps_previous_cache(self):
        primary = _client("primary", 7.18)
        backup = _client("backup", 7.15)
        provider = RateProvider(primary, backup)
        provider.fetch_rate()

        primary.usd_rate.side_effect = NetworkError("down")
        backup.usd_rate.side_effect = ValidationError("bad")
        provider.fetch_rate()

        assert provider.cached_rate == 7.18

    @pytest.mark.parametrize("primary_ok", [True, False])
    @pytest.mark.parametrize("backup_ok", [True, False])
    @pytest.mark.parametrize("warm_cache", [True, False])
    def test_always_returns_a_number(self, primary_ok, backup_ok, warm_cache):
        primary = _client("primary", 7.19)
        backup = _client("backup", 7.15)
        provider = RateProvider(primary, backup)
        if warm_cache:
            provider.fetch_rate()
        if not primary_ok:
            primary.usd_rate.side_effect = NetworkError("down")
        if not backup_ok:
            backup.usd_rate.side_effect = NetworkError("down")

        rate = provider.fetch_rate()

        assert isinstance(rate.value, float)
        assert rate.value > 0

    def test_steps_order(self):
        provider = RateProvider(_client("p", 1.0), _client("b", 1.0))
        assert [s.source for s in provider.steps()] == [
            RateSource.PRIMARY,
            RateSource.BACKUP,
            RateSource.CACHE,
            RateSource.DEFAULT,
        ]
