# catalog/grouping.py
"""
Grouping Engine

Given the product list, a search term and a grouping mode, produce the
ordered group structure the product table is drawn from.

Public API
----------
    group(products, search_term, mode) -> GroupStructure
    filter_products(products, search_term) -> List[Product]
    group_products(products, mode) -> GroupStructure
    group_keys(structure) -> List[str]

Returns a dict shaped like:

    {
        "mode": "productSize",
        "groups": {
            "OZ": [p1, p3, p2],             # members in subgroup order
            "UNITS": [p4],
            "Not Specified": [p5],          # flat, no subgroup level
        },
        "subgroups": {
            "OZ": {"8 OZ": [p1, p3], "16 OZ": [p2]},
            "UNITS": {"0.5 UNITS": [p4]},
        },
    }

For every other mode "subgroups" is empty and "groups" is a single level.

Notes:
- Input products and the input list are never modified; each call builds a
  fresh structure from scratch.
- Malformed data never raises. It lands in "Not Specified" or
  "⚠️ Invalid Price" so it stays visible in the table.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from catalog.group_order import order_labels, order_members, order_size_labels
from catalog.grouping_keys import ALL_PRODUCTS, key_function
from catalog.parsers.size_parser import NOT_SPECIFIED, parse_size
from catalog.product_types import GroupStructure, Product

log = logging.getLogger(__name__)

# (value, display label) in the order the "Group by" picker lists them
GROUPING_MODES: List[Tuple[str, str]] = [
    ("none", "No Grouping"),
    ("uom", "Group by UOM"),
    ("catId", "Group by Category"),
    ("productSize", "Group by Size"),
    ("price", "Group by Price"),
    ("plu_upc", "Group by PLU/UPC"),
]

MODE_VALUES = frozenset(value for value, _ in GROUPING_MODES)

SUBGROUP_SEPARATOR = "|"


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def _text(product: Product, name: str) -> str:
    value = product.get(name)
    return "" if value is None else str(value)


def matches_search(product: Product, search_term: str) -> bool:
    """
    Item name and UOM match case-insensitively; the raw price string
    matches case-sensitively (it is mostly digits anyway).
    """
    if not search_term:
        return True
    needle = search_term.lower()
    return (
        needle in _text(product, "item").lower()
        or search_term in _text(product, "price")
        or needle in _text(product, "uom").lower()
    )


def filter_products(products: Sequence[Product], search_term: Optional[str]) -> List[Product]:
    term = search_term or ""
    return [p for p in products if matches_search(p, term)]


# ---------------------------------------------------------------------------
# Bucketing
# ---------------------------------------------------------------------------

def _bucket(products: Sequence[Product], mode: str) -> Dict[str, List[Product]]:
    key_of = key_function(mode)
    buckets: Dict[str, List[Product]] = {}
    for product in products:
        buckets.setdefault(key_of(product), []).append(product)
    return buckets


def _group_flat(products: Sequence[Product], mode: str) -> GroupStructure:
    buckets = _bucket(products, mode)
    groups: Dict[str, List[Product]] = {}
    for label in order_labels(mode, list(buckets)):
        groups[label] = order_members(mode, buckets[label])
    return {"mode": mode, "groups": groups, "subgroups": {}}


def _group_by_size(products: Sequence[Product]) -> GroupStructure:
    # unit -> size label -> members, plus the magnitude that orders each label
    by_unit: Dict[str, Dict[str, List[Product]]] = {}
    magnitudes: Dict[str, Dict[str, Optional[float]]] = {}

    for product in products:
        info = parse_size(_text(product, "productSize"))
        unit, label = info.unit, info.label
        sizes = by_unit.setdefault(unit, {})
        if label not in sizes:
            sizes[label] = []
            magnitudes.setdefault(unit, {})[label] = info.numeric_value
        sizes[label].append(product)

    groups: Dict[str, List[Product]] = {}
    subgroups: Dict[str, Dict[str, List[Product]]] = {}

    for unit in order_labels("productSize", list(by_unit)):
        sizes = by_unit[unit]
        if unit == NOT_SPECIFIED:
            # single flat bucket; its only size label is also "Not Specified"
            groups[unit] = [p for members in sizes.values() for p in members]
            continue

        ordered: Dict[str, List[Product]] = {}
        for label in order_size_labels(magnitudes[unit]):
            ordered[label] = list(sizes[label])
        subgroups[unit] = ordered
        groups[unit] = [p for members in ordered.values() for p in members]

    return {"mode": "productSize", "groups": groups, "subgroups": subgroups}


def group_products(products: Sequence[Product], mode: str) -> GroupStructure:
    """Group an already-filtered product list."""
    if mode == "none":
        structure: GroupStructure = {
            "mode": "none",
            "groups": {ALL_PRODUCTS: list(products)},
            "subgroups": {},
        }
    elif mode == "productSize":
        structure = _group_by_size(products)
    else:
        structure = _group_flat(products, mode)

    log.debug(
        "grouped %d products by %s into %d groups",
        len(products), mode, len(structure["groups"]),
    )
    return structure


def group(products: Sequence[Product], search_term: Optional[str], mode: str) -> GroupStructure:
    return group_products(filter_products(products, search_term), mode)


# ---------------------------------------------------------------------------
# Expansion keys
# ---------------------------------------------------------------------------

def subgroup_key(unit: str, size_label: str) -> str:
    return f"{unit}{SUBGROUP_SEPARATOR}{size_label}"


def group_keys(structure: GroupStructure) -> List[str]:
    """Every expandable key in display order: group labels plus unit|size keys."""
    keys: List[str] = []
    for label in structure["groups"]:
        keys.append(label)
        for size_label in structure["subgroups"].get(label, {}):
            keys.append(subgroup_key(label, size_label))
    return keys


def member_count(structure: GroupStructure) -> int:
    return sum(len(members) for members in structure["groups"].values())
