# catalog/catalog_view.py
"""
Catalog Session & View Model

Holds the per-session UI state around the product list (search term,
grouping mode, page, expansion) and turns it into the flat list of rows a
table renderer draws:

    none mode     -> product rows for the current page only
    flat modes    -> [group header, its products if expanded] per group
    size mode     -> [unit header ("N sizes"),
                      [size header, its products if expanded] per size]
                     "Not Specified" lists its products directly

Groups are recomputed on every view() call; expansion is reseeded whenever
the mode or the set of group keys changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from catalog import settings
from catalog.contracts import FormData, submit_product_form
from catalog.expansion import ExpansionState
from catalog.grouping import MODE_VALUES, group, group_keys, member_count, subgroup_key
from catalog.pagination import ROWS_PER_PAGE_OPTIONS, clamp_page, page_count, paginate
from catalog.product_types import GroupStructure, Product, ViewRow
from catalog.products import ProductStore

log = logging.getLogger(__name__)


@dataclass
class CatalogView:
    mode: str
    rows: List[ViewRow] = field(default_factory=list)
    product_count: int = 0
    group_count: int = 0
    all_expanded: bool = False
    page: int = 0
    rows_per_page: int = settings.ROWS_PER_PAGE
    page_count: int = 0

    @property
    def show_pagination(self) -> bool:
        return self.mode == "none"

    @property
    def show_toggle_all(self) -> bool:
        return self.mode != "none"

    @property
    def toggle_all_label(self) -> str:
        return "Collapse All" if self.all_expanded else "Expand All"


# ---------------------------------------------------------------------------
# Row building
# ---------------------------------------------------------------------------

def _product_row(product: Product, indent: int) -> ViewRow:
    return ViewRow(
        kind="product",
        key=str(product.get("productId", "")),
        label=str(product.get("item", "")),
        indent=indent,
        product=product,
    )


def _size_count_label(count: int) -> str:
    return f"{count} size" if count == 1 else f"{count} sizes"


def build_rows(
    structure: GroupStructure,
    expansion: ExpansionState,
    page: int = 0,
    rows_per_page: int = settings.ROWS_PER_PAGE,
) -> List[ViewRow]:
    mode = structure["mode"]
    rows: List[ViewRow] = []

    if mode == "none":
        for members in structure["groups"].values():
            rows.extend(_product_row(p, 0) for p in paginate(members, page, rows_per_page))
        return rows

    for label, members in structure["groups"].items():
        sizes = structure["subgroups"].get(label)
        expanded = expansion.is_expanded(label)
        rows.append(ViewRow(
            kind="group",
            key=label,
            label=label,
            item_count=len(members),
            expanded=expanded,
            secondary_label=_size_count_label(len(sizes)) if sizes else None,
        ))
        if not expanded:
            continue

        if not sizes:
            rows.extend(_product_row(p, 0) for p in members)
            continue

        for size_label, size_members in sizes.items():
            key = subgroup_key(label, size_label)
            sub_expanded = expansion.is_expanded(key)
            rows.append(ViewRow(
                kind="subgroup",
                key=key,
                label=size_label,
                indent=1,
                item_count=len(size_members),
                expanded=sub_expanded,
            ))
            if sub_expanded:
                rows.extend(_product_row(p, 1) for p in size_members)

    return rows


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class CatalogSession:
    def __init__(
        self,
        store: Optional[ProductStore] = None,
        rows_per_page: Optional[int] = None,
        group_by: Optional[str] = None,
    ):
        self.store = store if store is not None else ProductStore()
        self.expansion = ExpansionState()
        self.search_term = ""
        self.page = 0
        self.rows_per_page = settings.ROWS_PER_PAGE
        self.group_by = "none"

        if rows_per_page is not None:
            self.set_rows_per_page(rows_per_page)

        mode = group_by if group_by is not None else settings.DEFAULT_GROUP_BY
        if mode in MODE_VALUES:
            self.group_by = mode
        else:
            log.warning("unknown grouping mode %r; falling back to 'none'", mode)

    # --- Inputs ---

    def set_search(self, term: Optional[str]) -> None:
        self.search_term = term or ""

    def set_group_by(self, mode: str) -> None:
        if mode not in MODE_VALUES:
            raise ValueError(f"unknown grouping mode: {mode!r}")
        self.group_by = mode

    def set_page(self, page: int) -> None:
        self.page = max(page, 0)

    def set_rows_per_page(self, rows_per_page: int) -> None:
        if rows_per_page not in ROWS_PER_PAGE_OPTIONS:
            raise ValueError(
                f"rows_per_page must be one of {ROWS_PER_PAGE_OPTIONS}, got {rows_per_page!r}"
            )
        self.rows_per_page = rows_per_page
        self.page = 0

    # --- Expansion ---

    def groups(self) -> GroupStructure:
        structure = group(self.store.products, self.search_term, self.group_by)
        self.expansion.sync(self.group_by, group_keys(structure))
        return structure

    def toggle_group(self, key: str) -> bool:
        self.groups()
        return self.expansion.toggle(key)

    def toggle_all_groups(self) -> bool:
        self.groups()
        return self.expansion.toggle_all()

    # --- Edits ---

    def save_product(self, data: FormData, product: Optional[Product] = None) -> Product:
        """Add (no `product`) or update from form values; raises ProductFormError."""
        return submit_product_form(self.store, data, product)

    def delete_product(self, product_id: str) -> None:
        self.store.delete_product(product_id)

    # --- Output ---

    def view(self) -> CatalogView:
        structure = self.groups()
        product_count = member_count(structure)

        page = self.page
        if self.group_by == "none":
            page = clamp_page(page, product_count, self.rows_per_page)

        return CatalogView(
            mode=self.group_by,
            rows=build_rows(structure, self.expansion, page, self.rows_per_page),
            product_count=product_count,
            group_count=len(structure["groups"]),
            all_expanded=self.expansion.all_expanded,
            page=page,
            rows_per_page=self.rows_per_page,
            page_count=page_count(product_count, self.rows_per_page),
        )
