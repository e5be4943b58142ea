# tests/unit/core/test_utils.py
from datetime import date, datetime
from decimal import Decimal

import pytest

from backoffice.core.utils import decimal_to_str, format_date, format_price, localized, parse_date, parse_decimal


@pytest.mark.parametrize("value, expected", [
    (Decimal("10.500000"), "10.5"),
    (Decimal("2.000000"), "2"),
    (Decimal("0.000000"), "0"),
    (Decimal("100"), "100"),
    (Decimal("0.001000"), "0.001"),
    (None, "0"),
])
def test_decimal_to_str_drops_trailing_zeros(value, expected):
    assert decimal_to_str(value) == expected


def test_parse_decimal_accepts_comma_separator():
    assert parse_decimal("14,90") == Decimal("14.90")
    assert parse_decimal(" ") is None
    with pytest.raises(ValueError):
        parse_decimal("abc")


def test_format_price():
    assert format_price(Decimal("61.8")) == "€61.80"


def test_dates():
    assert format_date(date(2026, 1, 5)) == "2026-01-05"
    assert format_date(None) == ""
    assert parse_date("2026-01-05") == date(2026, 1, 5)
    assert parse_date(datetime(2026, 1, 5, 12, 0)) == date(2026, 1, 5)
    assert parse_date("  ") is None
    with pytest.raises(ValueError):
        parse_date("05/01/2026")


def test_localized_turns_language_keys_into_integers():
    assert localized({"1": "a", "2": "b"}) == {1: "a", 2: "b"}
    assert localized(None) == {}
