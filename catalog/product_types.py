"""
Catalog Types: product records, size info, group structures and view rows.

Products stay plain dicts (TypedDict) so they can come straight from a form
payload or a fixture file; derived values (SizeInfo, ViewRow) are small
dataclasses.

Field names on Product keep the catalog's camelCase wire keys (productId, catId,
plu_upc, ...) since renderers and fixtures already use them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, TypedDict


# ────────────────────────────────────────────────
# Product record (owned by the CRUD layer)
# ────────────────────────────────────────────────

class Product(TypedDict, total=False):
    productId: str
    item: str
    price: str          # canonical form: " $12.34 "
    uom: str            # LB | EA | OZ | KG | PKG | ""
    productSize: str    # "8OZ", "1/2", "6-8", ...
    plu_upc: str        # "042421-1606" or ""
    catId: str          # "1", "12", ...


GroupingMode = Literal["none", "price", "uom", "catId", "productSize", "plu_upc"]


# ────────────────────────────────────────────────
# Size parsing result
# ────────────────────────────────────────────────

@dataclass(frozen=True)
class SizeInfo:
    numeric_value: Optional[float]
    unit: str
    formatted_value: str

    @property
    def label(self) -> str:
        """Visible subgroup label, e.g. '8 OZ'."""
        if self.numeric_value is None:
            return self.formatted_value
        return f"{self.formatted_value} {self.unit}"


# ────────────────────────────────────────────────
# Grouping output
# ────────────────────────────────────────────────

class GroupStructure(TypedDict):
    mode: str
    # label -> members, in display order
    groups: Dict[str, List[Product]]
    # size mode only: unit -> size label -> members
    subgroups: Dict[str, Dict[str, List[Product]]]


# ────────────────────────────────────────────────
# View rows (what a table renderer draws)
# ────────────────────────────────────────────────

RowKind = Literal["group", "subgroup", "product"]


@dataclass
class ViewRow:
    kind: RowKind
    key: str                              # expansion key for headers, productId for products
    label: str
    indent: int = 0
    item_count: int = 0
    expanded: bool = True
    secondary_label: Optional[str] = None
    product: Optional[Product] = None
