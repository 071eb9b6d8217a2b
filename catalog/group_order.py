# catalog/group_order.py
"""
Group Sort Orders

Each grouping mode has its own ordering policy for bucket labels:

  - price:               the fixed band order (Under $1 ... $100+, Invalid last)
  - catId / uom / plu_upc: numeric on the first digit run in the label
                         ("Category: 2" before "Category: 10"); no digits -> 0
  - productSize (units): alphabetical, "Not Specified" always last
  - everything else:     alphabetical

All sorts are stable, so equal keys keep the order they were first seen in.
Inner size buckets sort by their numeric magnitude with unknowns last.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from catalog.parsers.number_parser import first_digit_run, parse_leading_int
from catalog.parsers.price_parser import PRICE_BAND_ORDER
from catalog.parsers.size_parser import NOT_SPECIFIED
from catalog.product_types import Product

NUMERIC_LABEL_MODES = frozenset({"catId", "uom", "plu_upc"})


def order_price_labels(labels: Iterable[str]) -> List[str]:
    present = set(labels)
    return [label for label in PRICE_BAND_ORDER if label in present]


def order_numeric_labels(labels: Iterable[str]) -> List[str]:
    return sorted(labels, key=first_digit_run)


def order_unit_labels(labels: Iterable[str]) -> List[str]:
    return sorted(labels, key=lambda label: (label == NOT_SPECIFIED, label))


def order_labels(mode: str, labels: Sequence[str]) -> List[str]:
    """Order top-level bucket labels for `mode`; input order breaks ties."""
    if mode == "none":
        return list(labels)
    if mode == "price":
        return order_price_labels(labels)
    if mode in NUMERIC_LABEL_MODES:
        return order_numeric_labels(labels)
    if mode == "productSize":
        return order_unit_labels(labels)
    return sorted(labels)


def order_size_labels(numeric_values: Dict[str, Optional[float]]) -> List[str]:
    """
    Order inner size labels by magnitude; labels without a number go last.

    `numeric_values` maps label -> magnitude in encounter order.
    """
    def _key(label: str):
        value = numeric_values[label]
        return (value is None, value if value is not None else 0.0)

    return sorted(numeric_values, key=_key)


def order_members(mode: str, members: List[Product]) -> List[Product]:
    """
    Members keep their filtered-list order, except under catId grouping
    where they are re-sorted by numeric catId (unreadable ids last).
    """
    if mode != "catId":
        return list(members)

    def _key(product: Product):
        cat = parse_leading_int(str(product.get("catId") or ""))
        return (cat is None, cat if cat is not None else 0)

    return sorted(members, key=_key)
