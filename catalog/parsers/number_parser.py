# catalog/parsers/number_parser.py
"""
Number helpers shared by the size and price parsers.

- parse_leading_float("8OZ")   -> 8.0     (leading number, trailing text ignored)
- parse_leading_float("OZ")    -> None
- parse_leading_int("12abc")   -> 12
- first_digit_run("PLU/UPC: 042421") -> 42421
- format_number(1234.5)        -> "1,234.5"
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

# ASCII digits only
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")
_DIGIT_RUN_RE = re.compile(r"[0-9]+")

_TWO_PLACES = Decimal("0.01")


def round_cents(value) -> Decimal:
    """
    Half-up rounding to two places on the exact value. The working precision
    grows with the magnitude so 1e30 rounds instead of failing.
    """
    d = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, d.adjusted() + 4)
        return d.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def parse_leading_float(text: Optional[str]) -> Optional[float]:
    """
    Parse the number at the start of `text`, ignoring anything after it.

    Returns None when nothing numeric leads the string, or when the value
    is not finite ("1e999").
    """
    if not text:
        return None
    m = _LEADING_FLOAT_RE.match(text)
    if not m:
        return None
    value = float(m.group(1))
    if not math.isfinite(value):
        return None
    return value


def _digits_to_number(digits: str) -> Union[int, float]:
    # runs past the interpreter's int string limit are far beyond float range
    try:
        return int(digits)
    except ValueError:
        return float(digits)


def parse_leading_int(text: Optional[str]) -> Optional[Union[int, float]]:
    """
    Leading integer of `text`, or None. Digit runs too long for int()
    come back as float +/-inf, which still orders correctly.
    """
    if not text:
        return None
    m = _LEADING_INT_RE.match(text)
    return _digits_to_number(m.group(1)) if m else None


def first_digit_run(text: Optional[str]) -> Union[int, float]:
    """Integer value of the first run of digits in `text`; 0 if there is none."""
    m = _DIGIT_RUN_RE.search(text or "")
    return _digits_to_number(m.group(0)) if m else 0


def format_number(value: float) -> str:
    """
    en-US rendering with thousands separators and at most two fraction digits.

    Rounds half-up on the exact binary value, then drops trailing zeros:
        8.0     -> "8"
        0.5     -> "0.5"
        6.6667  -> "6.67"
        1234.5  -> "1,234.5"
    """
    q = round_cents(value)
    if q == 0:
        q = abs(q)
    text = f"{q:,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
