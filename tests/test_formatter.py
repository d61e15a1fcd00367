# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Display Formatting

This module contains unit tests for the ticker display strings: price with
thousands separators, signed change percentage, update time and the
rendering of each display status in both languages.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- goldwatch.adapters.formatting.formatter (all formatter functions for testing)
- goldwatch.shared.language (switch languages for the tests)
- goldwatch.domain.models (DisplayState for test data)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from datetime import datetime  # Date/time utilities for test data

from goldwatch.adapters.formatting.formatter import (
    NEGATIVE,
    POSITIVE,
    PresentationUpdate,
    change_class,
    format_change,
    format_price,
    format_timestamp,
    render,
)
from goldwatch.domain.models import DisplayState, DisplayStatus, Notice, RateSource
from goldwatch.shared.language import language_manager

TS = datetime(2024, 1, 5, 13, 5, 9)


@pytest.fixture
def lang():
    previous = language_manager.get_language()

    def use(code):
        assert language_manager.set_language(code)

    yield use
    language_manager.set_language(previous)


def _state(price=462.9704, change=1.0, status=DisplayStatus.OK, notice=Notice.UPDATED):
    return DisplayState(
        price_per_gram=price,
        change_percent=change,
        updated_at=TS,
        status=status,
        notice=notice,
        rate_source=RateSource.PRIMARY,
        rate=7.2,
    )


class TestFormatPrice:
    @pytest.mark.parametrize("value,expected", [
        (462.9704, "462.97"),
        (1234.5, "1,234.50"),
        (1234567.891, "1,234,567.89"),
        (0, "0.00"),
        (999.999, "1,000.00"),
    ])
    def test_format_price(self, value, expected):
        assert format_price(value) == expected


class TestFormatChange:
    @pytest.mark.parametrize("value,expected", [
        (1.0, "+1.00%"),
        (0.0, "+0.00%"),
        (-0.0, "+0.00%"),
        (-1.234, "-1.23%"),
        (12.345678, "+12.35%"),
    ])
    def test_format_change(self, value, expected):
        assert format_change(value) == expected

    def test_change_class(self):
        assert change_class(0.0) == POSITIVE
        assert change_class(2.5) == POSITIVE
        assert change_class(-0.01) == NEGATIVE


class TestFormatTimestamp:
    def test_english(self, lang):
        lang("en")
        assert format_timestamp(TS) == "Updated: 2024-01-05 13:05:09"

    def test_chinese(self, lang):
        lang("zh")
        assert format_timestamp(TS) == "更新时间: 2024-01-05 13:05:09"


class TestRender:
    def test_render_ok_chinese(self, lang):
        lang("zh")
        update = render(_state())

        assert update.price_text == "¥462.97/克"
        assert update.change_text == "+1.00%"
        assert update.change_class == POSITIVE
        assert update.status_text == "数据已更新"

    def test_render_ok_english(self, lang):
        lang("en")
        update = render(_state(price=12345.678, change=-0.5))

        assert update.price_text == "¥12,345.68/g"
        assert update.change_text == "-0.50%"
        assert update.change_class == NEGATIVE
        assert update.status_text == "Data updated"

    def test_render_stale(self, lang):
        lang("en")
        update = render(_state(status=DisplayStatus.STALE, notice=Notice.SHOWING_PREVIOUS))

        assert update.price_text == "¥462.97/g"
        assert update.status_text == "Update failed, showing the last successfully fetched data"

    def test_render_error(self, lang):
        lang("zh")
        update = render(_state(price=None, change=None, status=DisplayStatus.ERROR,
                               notice=Notice.CONNECT_FAILED))

        assert update.price_text == "数据加载失败"
        assert update.change_text == ""
        assert update.change_class == ""
        assert update.status_text == "无法连接到服务器，请稍后再试"


class TestPresentationUpdate:
    def test_as_message(self):
        update = PresentationUpdate(
            price_text="¥462.97/g",
            change_text="+1.00%",
            change_class=POSITIVE,
            time_text="Updated: 2024-01-05 13:05:09",
            status_text="Data updated",
        )

        assert update.as_message() == "\n".join([
            "¥462.97/g",
            "+1.00% 📈",
            "Updated: 2024-01-05 13:05:09",
            "Data updated",
        ])

    def test_as_message_without_change(self):
        update = PresentationUpdate("Failed to load data", "", "", "Updated: x", "Cannot connect")
        assert update.as_message() == "Failed to load data\nUpdated: x\nCannot connect"
