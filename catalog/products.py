# catalog/products.py  (product list state: add / update / delete)
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from catalog.parsers.number_parser import parse_leading_int
from catalog.product_types import Product

log = logging.getLogger(__name__)


# ------------------------------------------------------------
# Commands
# ------------------------------------------------------------
@dataclass(frozen=True)
class AddProduct:
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateProduct:
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteProduct:
    product_id: str


Command = Union[AddProduct, UpdateProduct, DeleteProduct]


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------
def next_product_id(products: Sequence[Product]) -> str:
    """
    One past the largest integer productId in the list ("1" when empty).
    Ids that do not start with an integer, or are too long to read as one,
    are skipped.
    """
    highest = 0
    for p in products:
        pid = parse_leading_int(str(p.get("productId") or ""))
        if isinstance(pid, int) and pid > highest:
            highest = pid
    return str(highest + 1)


def find_product(products: Sequence[Product], product_id: str) -> Optional[Product]:
    for p in products:
        if p.get("productId") == product_id:
            return p
    return None


# ------------------------------------------------------------
# State transitions (copy-on-write; inputs are never modified)
# ------------------------------------------------------------
def apply_command(products: Sequence[Product], command: Command) -> List[Product]:
    if isinstance(command, AddProduct):
        new_product: Product = dict(command.data)  # type: ignore[assignment]
        new_product["productId"] = next_product_id(products)
        return [*products, new_product]

    if isinstance(command, UpdateProduct):
        target = command.data.get("productId")
        replacement: Product = dict(command.data)  # type: ignore[assignment]
        out: List[Product] = []
        replaced = False
        for p in products:
            if not replaced and p.get("productId") == target:
                out.append(replacement)
                replaced = True
            else:
                out.append(p)
        return out

    if isinstance(command, DeleteProduct):
        return [p for p in products if p.get("productId") != command.product_id]

    raise TypeError(f"unsupported product command: {command!r}")


# ------------------------------------------------------------
# Store
# ------------------------------------------------------------
class ProductStore:
    """
    Holds the current product list. Every change swaps in a new list, so a
    snapshot taken from `products` stays valid while it is being grouped.
    """

    def __init__(self, products: Optional[Sequence[Product]] = None):
        self._products: Tuple[Product, ...] = tuple(dict(p) for p in (products or ()))  # type: ignore[misc]

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        return find_product(self._products, product_id)

    def dispatch(self, command: Command) -> Tuple[Product, ...]:
        if isinstance(command, UpdateProduct) and self.get(command.data.get("productId")) is None:
            log.info("update ignored; no product with id %r", command.data.get("productId"))
        elif isinstance(command, DeleteProduct) and self.get(command.product_id) is None:
            log.info("delete ignored; no product with id %r", command.product_id)

        self._products = tuple(apply_command(self._products, command))
        log.debug("%s applied; %d products", type(command).__name__, len(self._products))
        return self._products

    def add_product(self, data: Dict[str, Any]) -> Product:
        self.dispatch(AddProduct(dict(data)))
        return self._products[-1]

    def update_product(self, data: Dict[str, Any]) -> Optional[Product]:
        self.dispatch(UpdateProduct(dict(data)))
        return self.get(data.get("productId"))

    def delete_product(self, product_id: str) -> None:
        self.dispatch(DeleteProduct(product_id))
