# catalog/grouping_keys.py
"""
Grouping Key Functions

Maps a product to the label of the bucket it belongs to for a given
grouping mode. Every product gets exactly one key per mode; missing or
unreadable data lands in a sentinel bucket instead of raising.

    group_key("price", {"price": " $4.99 "})     -> "$1 - $4.99"
    group_key("catId", {"catId": "10"})          -> "Category: 10"
    group_key("plu_upc", {"plu_upc": "4011-22"}) -> "PLU/UPC: 4011"
    group_key("uom", {"uom": ""})                -> "Not Specified"

Size grouping is two-level; `size_keys()` returns the (unit, size label)
pair used for the outer and inner buckets.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from catalog.parsers.price_parser import price_band
from catalog.parsers.size_parser import NOT_SPECIFIED, parse_size
from catalog.product_types import Product

ALL_PRODUCTS = "All Products"
CATEGORY_PREFIX = "Category: "
PLU_UPC_PREFIX = "PLU/UPC: "


def _field(product: Product, name: str) -> str:
    value: Any = product.get(name)
    if value is None:
        return ""
    return str(value)


# ---------------------------------------------------------------------------
# Per-mode key functions
# ---------------------------------------------------------------------------

def none_key(product: Product) -> str:
    return ALL_PRODUCTS


def price_key(product: Product) -> str:
    return price_band(product.get("price"))


def uom_key(product: Product) -> str:
    return _field(product, "uom") or NOT_SPECIFIED


def category_key(product: Product) -> str:
    cat_id = _field(product, "catId")
    return CATEGORY_PREFIX + cat_id if cat_id else NOT_SPECIFIED


def plu_upc_key(product: Product) -> str:
    prefix = _field(product, "plu_upc").split("-")[0]
    return PLU_UPC_PREFIX + prefix if prefix else NOT_SPECIFIED


def size_keys(product: Product) -> Tuple[str, str]:
    """(unit, size label) for the two-level size hierarchy."""
    info = parse_size(_field(product, "productSize"))
    return info.unit, info.label


def size_key(product: Product) -> str:
    return size_keys(product)[0]


KEY_FUNCTIONS: Dict[str, Callable[[Product], str]] = {
    "none": none_key,
    "price": price_key,
    "uom": uom_key,
    "catId": category_key,
    "plu_upc": plu_upc_key,
    "productSize": size_key,
}


def key_function(mode: str) -> Callable[[Product], str]:
    """
    Key function for a mode. Modes outside the known set group by the raw
    field of the same name.
    """
    fn: Optional[Callable[[Product], str]] = KEY_FUNCTIONS.get(mode)
    if fn is not None:
        return fn
    return lambda product: _field(product, mode) or NOT_SPECIFIED


def group_key(mode: str, product: Product) -> str:
    return key_function(mode)(product)
