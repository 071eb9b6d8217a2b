# catalog/contracts.py
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from catalog.parsers.number_parser import parse_leading_float
from catalog.parsers.price_parser import format_price
from catalog.product_types import Product

"""
Contracts & validators for the product add/edit form.

- Field rules live here; the form widget only shows what comes back.
- Problems are reported as a list of {"field", "message"} dicts, never raised,
  so the form can show every message at once.
- build_product_payload() turns accepted form values into the stored shape
  (canonical " $12.34 " price, trimmed name, defaults for blanks).

Intended consumers:
- catalog/catalog_view.py (session add / edit)
- any renderer that draws the product dialog
"""

FormData = Dict[str, Any]
ValidationError = Dict[str, str]

UOM_OPTIONS = ("LB", "EA", "OZ", "KG", "PKG")
DEFAULT_UOM = "LB"
DEFAULT_CAT_ID = "1"

PLU_UPC_RE = re.compile(r"^[0-9]+-[0-9]+$")

FORM_FIELDS = ("item", "price", "uom", "productSize", "plu_upc", "catId")


class ProductFormError(ValueError):
    """Raised when a product is built from form data that did not validate."""

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        super().__init__("; ".join(f"{e['field']}: {e['message']}" for e in errors))


# ---------------------------------------------------------------------------
# Basic helpers
# ---------------------------------------------------------------------------

def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _error(field: str, message: str) -> ValidationError:
    return {"field": field, "message": message}


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

def form_defaults(product: Optional[Product] = None) -> FormData:
    """
    Initial form values. With a product (edit mode) the stored price is shown
    without its padding and dollar sign: " $12.34 " -> "12.34".
    """
    if product is None:
        return {
            "item": "",
            "price": "",
            "uom": DEFAULT_UOM,
            "productSize": "",
            "plu_upc": "",
            "catId": DEFAULT_CAT_ID,
        }

    price = _text(product.get("price"))
    return {
        "item": _text(product.get("item")),
        "price": price.strip().replace("$", "").strip() if price else "",
        "uom": product.get("uom") if product.get("uom") is not None else DEFAULT_UOM,
        "productSize": _text(product.get("productSize")),
        "plu_upc": _text(product.get("plu_upc")),
        "catId": product.get("catId") if product.get("catId") is not None else DEFAULT_CAT_ID,
    }


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_product_form(data: FormData) -> List[ValidationError]:
    """
    Rules:
      - item:    required, not just whitespace
      - price:   required, numeric, > 0
      - uom:     required, one of UOM_OPTIONS
      - plu_upc: optional; digits-digits when given
      - productSize / catId: free text
    """
    errors: List[ValidationError] = []

    if not _text(data.get("item")).strip():
        errors.append(_error("item", "Item name is required"))

    raw_price = _text(data.get("price")).strip()
    if not raw_price:
        errors.append(_error("price", "Price is required"))
    else:
        value = parse_leading_float(raw_price)
        if value is None:
            errors.append(_error("price", "Price must be a number"))
        elif value <= 0:
            errors.append(_error("price", "Price must be a positive number"))

    uom = _text(data.get("uom"))
    if not uom:
        errors.append(_error("uom", "Unit of measure is required"))
    elif uom not in UOM_OPTIONS:
        errors.append(_error("uom", "Unit of measure must be one of: " + ", ".join(UOM_OPTIONS)))

    plu_upc = _text(data.get("plu_upc"))
    if plu_upc.strip() and not PLU_UPC_RE.match(plu_upc):
        errors.append(_error(
            "plu_upc", "PLU/UPC must be in format: digits-digits (e.g., 042421-1606)",
        ))

    return errors


# ---------------------------------------------------------------------------
# Payload
# ---------------------------------------------------------------------------

def build_product_payload(data: FormData) -> Dict[str, Any]:
    """Stored product fields (no productId) from validated form values."""
    errors = validate_product_form(data)
    if errors:
        raise ProductFormError(errors)

    cat_id = data.get("catId")
    return {
        "item": _text(data.get("item")).strip(),
        "price": format_price(parse_leading_float(_text(data.get("price")).strip())),
        "uom": _text(data.get("uom")),
        "productSize": _text(data.get("productSize")),
        "plu_upc": _text(data.get("plu_upc")),
        "catId": DEFAULT_CAT_ID if cat_id is None else _text(cat_id),
    }


def submit_product_form(store, data: FormData, product: Optional[Product] = None) -> Product:
    """
    Add a new product, or update `product` in place of its productId.
    Returns the stored product. Raises ProductFormError on invalid data.
    """
    payload = build_product_payload(data)
    if product is None:
        return store.add_product(payload)
    payload["productId"] = product["productId"]
    updated = store.update_product(payload)
    return updated if updated is not None else payload
