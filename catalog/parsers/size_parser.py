# catalog/parsers/size_parser.py
"""
Size Parser

Turns the free-text `productSize` field into a numeric magnitude (for
ordering) plus a unit and a display value (for labels).

Three informal formats show up in catalog data:
    "1/2"     -> fraction            -> 0.5
    "6-8"     -> whole + twelfths    -> 6 + 8/12  (feet-inches convention)
    "8OZ"     -> plain number + unit -> 8

Anything that does not yield a number lands in "Not Specified".

Examples:
    parse_size("8OZ")  -> SizeInfo(8.0, "OZ", "8")           label "8 OZ"
    parse_size("1/2")  -> SizeInfo(0.5, "UNITS", "0.5")      label "0.5 UNITS"
    parse_size("6-8")  -> SizeInfo(6.666.., "UNITS", "6.67")
    parse_size("")     -> SizeInfo(None, "Not Specified", "Not Specified")
"""

from __future__ import annotations

import math
import re
from typing import Optional

from catalog.parsers.number_parser import format_number, parse_leading_float
from catalog.product_types import SizeInfo

NOT_SPECIFIED = "Not Specified"
DEFAULT_UNIT = "UNITS"

_UNIT_RE = re.compile(r"[A-Za-z]+")

NOT_SPECIFIED_SIZE = SizeInfo(None, NOT_SPECIFIED, NOT_SPECIFIED)


def extract_unit(text: str) -> str:
    m = _UNIT_RE.search(text or "")
    return m.group(0).upper() if m else DEFAULT_UNIT


def _parse_fraction(text: str) -> Optional[float]:
    parts = text.split("/")
    if len(parts) != 2:
        return None
    numerator = parse_leading_float(parts[0])
    denominator = parse_leading_float(parts[1])
    if numerator is None or denominator is None or denominator == 0:
        return None
    return numerator / denominator


def _parse_twelfths(text: str) -> Optional[float]:
    # "6-8" -> 6 + 8/12; extra segments beyond the second are ignored
    parts = text.split("-")
    whole = parse_leading_float(parts[0])
    twelfths = parse_leading_float(parts[1])
    if whole is None or twelfths is None:
        return None
    return whole + twelfths / 12


def parse_size_value(text: Optional[str]) -> Optional[float]:
    """Numeric magnitude of a size string, or None if it cannot be read."""
    if not text:
        return None
    if "/" in text:
        return _parse_fraction(text)
    if "-" in text:
        return _parse_twelfths(text)
    return parse_leading_float(text)


def parse_size(text: Optional[str]) -> SizeInfo:
    if not text:
        return NOT_SPECIFIED_SIZE

    value = parse_size_value(text)
    if value is None or not math.isfinite(value):
        return NOT_SPECIFIED_SIZE

    return SizeInfo(
        numeric_value=value,
        unit=extract_unit(text),
        formatted_value=format_number(value),
    )
