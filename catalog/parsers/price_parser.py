"""
Price Parser
Recovers numeric prices from the stored " $12.34 " form, renders the
canonical form back, and assigns price bands for grouping.
"""

import re

from catalog.parsers.number_parser import parse_leading_float, round_cents

NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")

INVALID_PRICE = "⚠️ Invalid Price"

# (upper bound exclusive, label); the last open band catches everything else
PRICE_BANDS = [
    (1, "Under $1"),
    (5, "$1 - $4.99"),
    (10, "$5 - $9.99"),
    (25, "$10 - $24.99"),
    (50, "$25 - $49.99"),
    (100, "$50 - $99.99"),
    (None, "$100+"),
]

PRICE_BAND_ORDER = [label for _, label in PRICE_BANDS] + [INVALID_PRICE]


def parse_price_value(price):
    """Numeric value of a stored price string, or None if unreadable."""
    if price is None:
        return None
    return parse_leading_float(NON_NUMERIC_RE.sub("", str(price)))


def price_band(price):
    value = parse_price_value(price)
    if value is None:
        return INVALID_PRICE
    for upper, label in PRICE_BANDS:
        if upper is None or value < upper:
            return label
    return PRICE_BANDS[-1][1]


def format_price(value):
    """Canonical stored form: 12.3 -> ' $12.30 '."""
    cents = round_cents(value)
    return f" ${cents} "
