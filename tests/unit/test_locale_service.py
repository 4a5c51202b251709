"""Tests for locale-aware currency formatting and parsing."""

from decimal import Decimal

import pytest
from babel.numbers import NumberFormatError

from househunt.services.locale_service import (
    CURRENCY,
    LOCALE,
    format_amount,
    get_currency_symbol,
    parse_decimal,
)


class TestLocaleDefaults:
    def test_default_locale_is_british(self):
        assert LOCALE == "en_GB"
        assert CURRENCY == "GBP"
        assert get_currency_symbol() == "£"


class TestFormatAmount:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("0"), "£0.00"),
            (Decimal("7500"), "£7,500.00"),
            (Decimal("36250"), "£36,250.00"),
            (Decimal("153750.5"), "£153,750.50"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_amount(amount) == expected


class TestParseDecimal:
    def test_plain(self):
        assert parse_decimal("350000") == Decimal("350000")

    def test_with_symbol_and_grouping(self):
        assert parse_decimal("£ 350,000.25") == Decimal("350000.25")

    def test_garbage(self):
        with pytest.raises(NumberFormatError):
            parse_decimal("lots")
