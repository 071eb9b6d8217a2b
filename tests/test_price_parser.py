# tests/test_price_parser.py
"""
Price parsing, banding and canonical formatting.

Covers:
  - stored " $12.34 " form parses to 12.34
  - unreadable / missing prices -> None
  - every band edge lands in the right band
  - invalid prices go to the "⚠️ Invalid Price" band
  - band order is fixed (8 bands, invalid last)
  - format_price pads, prefixes "$" and keeps two decimals, huge values too
"""

from __future__ import annotations

import pytest

from catalog.parsers.price_parser import (
    INVALID_PRICE,
    PRICE_BAND_ORDER,
    format_price,
    parse_price_value,
    price_band,
)


class TestParsePriceValue:
    @pytest.mark.parametrize("raw, expected", [
        (" $12.34 ", 12.34),
        ("$0.50", 0.5),
        ("1,299.00", 1299.0),
        ("USD 7", 7.0),
        (" $-2.00 ", -2.0),
    ])
    def test_parses(self, raw, expected):
        assert parse_price_value(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", [" $abc ", "", None, "$", "free"])
    def test_unreadable(self, raw):
        assert parse_price_value(raw) is None


class TestPriceBand:
    @pytest.mark.parametrize("raw, band", [
        (" $0.50 ", "Under $1"),
        (" $0.99 ", "Under $1"),
        (" $1.00 ", "$1 - $4.99"),
        (" $4.99 ", "$1 - $4.99"),
        (" $5.00 ", "$5 - $9.99"),
        (" $9.99 ", "$5 - $9.99"),
        (" $10.00 ", "$10 - $24.99"),
        (" $24.99 ", "$10 - $24.99"),
        (" $25.00 ", "$25 - $49.99"),
        (" $49.99 ", "$25 - $49.99"),
        (" $50.00 ", "$50 - $99.99"),
        (" $99.99 ", "$50 - $99.99"),
        (" $100.00 ", "$100+"),
        (" $2500.00 ", "$100+"),
        (" $-2.00 ", "Under $1"),
    ])
    def test_band_edges(self, raw, band):
        assert price_band(raw) == band

    @pytest.mark.parametrize("raw", [" $abc ", None, ""])
    def test_invalid(self, raw):
        assert price_band(raw) == INVALID_PRICE

    def test_band_order(self):
        assert PRICE_BAND_ORDER == [
            "Under $1",
            "$1 - $4.99",
            "$5 - $9.99",
            "$10 - $24.99",
            "$25 - $49.99",
            "$50 - $99.99",
            "$100+",
            "⚠️ Invalid Price",
        ]


class TestFormatPrice:
    @pytest.mark.parametrize("value, expected", [
        (12.34, " $12.34 "),
        (12.3, " $12.30 "),
        (5, " $5.00 "),
        ("7.5", " $7.50 "),
        (0.125, " $0.13 "),
    ])
    def test_format(self, value, expected):
        assert format_price(value) == expected

    def test_beyond_default_decimal_precision(self):
        assert format_price(1e30) == f" ${int(1e30)}.00 "

    def test_round_trips_through_parser(self):
        assert parse_price_value(format_price(19.99)) == pytest.approx(19.99)
