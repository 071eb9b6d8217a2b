# tests/test_products.py
"""
Product list state transitions.

Covers:
  next_product_id:
  - empty list -> "1"
  - max + 1, not length + 1
  - non-integer ids and ids too long for int() skipped

  apply_command:
  - add assigns a fresh id and appends a copy
  - add never reuses the caller's productId
  - update replaces by productId, keeps position
  - update of an unknown id is a no-op
  - delete removes by productId; unknown id is a no-op
  - input list and input products never mutated
  - unsupported command -> TypeError

  ProductStore:
  - add / update / delete helpers
  - snapshots stay valid after later changes
  - no-op update / delete are logged
"""

from __future__ import annotations

import copy
import logging

import pytest

from catalog.products import (
    AddProduct,
    DeleteProduct,
    ProductStore,
    UpdateProduct,
    apply_command,
    next_product_id,
)


@pytest.fixture
def products():
    return [
        {"productId": "1", "item": "Apples", "price": " $1.99 ", "uom": "LB",
         "productSize": "", "plu_upc": "", "catId": "1"},
        {"productId": "5", "item": "Milk", "price": " $3.49 ", "uom": "EA",
         "productSize": "1/2 gal", "plu_upc": "", "catId": "2"},
        {"productId": "3", "item": "Bread", "price": " $2.99 ", "uom": "EA",
         "productSize": "", "plu_upc": "", "catId": "3"},
    ]


class TestNextProductId:
    def test_empty(self):
        assert next_product_id([]) == "1"

    def test_max_plus_one(self, products):
        assert next_product_id(products) == "6"

    def test_non_integer_ids_skipped(self):
        assert next_product_id([{"productId": "abc"}, {"productId": "2"}, {}]) == "3"

    def test_ids_too_long_for_int_skipped(self):
        assert next_product_id([{"productId": "9" * 5000}, {"productId": "4"}]) == "5"


class TestApplyCommand:
    def test_add(self, products):
        out = apply_command(products, AddProduct({"item": "Eggs", "price": " $4.00 "}))
        assert len(out) == 4
        assert out[-1] == {"item": "Eggs", "price": " $4.00 ", "productId": "6"}

    def test_add_ignores_caller_id(self, products):
        out = apply_command(products, AddProduct({"productId": "1", "item": "Dup"}))
        assert out[-1]["productId"] == "6"

    def test_add_is_monotonic(self):
        out = []
        for name in ("a", "b", "c"):
            out = apply_command(out, AddProduct({"item": name}))
        assert [p["productId"] for p in out] == ["1", "2", "3"]

    def test_update(self, products):
        changed = dict(products[1], item="Skim Milk")
        out = apply_command(products, UpdateProduct(changed))
        assert out[1]["item"] == "Skim Milk"
        assert [p["productId"] for p in out] == ["1", "5", "3"]

    def test_update_unknown_is_noop(self, products):
        out = apply_command(products, UpdateProduct({"productId": "99", "item": "X"}))
        assert out == products

    def test_delete(self, products):
        out = apply_command(products, DeleteProduct("5"))
        assert [p["productId"] for p in out] == ["1", "3"]

    def test_delete_unknown_is_noop(self, products):
        assert apply_command(products, DeleteProduct("99")) == products

    @pytest.mark.parametrize("command", [
        AddProduct({"item": "Eggs"}),
        UpdateProduct({"productId": "1", "item": "Green Apples"}),
        DeleteProduct("1"),
    ])
    def test_inputs_untouched(self, products, command):
        snapshot = copy.deepcopy(products)
        out = apply_command(products, command)
        assert products == snapshot
        assert out is not products

    def test_add_copies_payload(self, products):
        data = {"item": "Eggs"}
        out = apply_command(products, AddProduct(data))
        out[-1]["item"] = "changed"
        assert data == {"item": "Eggs"}

    def test_unsupported_command(self, products):
        with pytest.raises(TypeError):
            apply_command(products, {"type": "add"})


class TestProductStore:
    def test_add_update_delete(self, products):
        store = ProductStore(products)
        added = store.add_product({"item": "Eggs", "price": " $4.00 "})
        assert added["productId"] == "6"
        assert len(store) == 4

        updated = store.update_product(dict(added, item="Brown Eggs"))
        assert updated["item"] == "Brown Eggs"
        assert store.get("6")["item"] == "Brown Eggs"

        store.delete_product("6")
        assert store.get("6") is None
        assert len(store) == 3

    def test_snapshot_survives_changes(self, products):
        store = ProductStore(products)
        snapshot = store.products
        store.delete_product("1")
        assert [p["productId"] for p in snapshot] == ["1", "5", "3"]
        assert [p["productId"] for p in store.products] == ["5", "3"]

    def test_store_copies_initial_products(self, products):
        store = ProductStore(products)
        products[0]["item"] = "changed"
        assert store.get("1")["item"] == "Apples"

    def test_noop_update_logged(self, products, caplog):
        store = ProductStore(products)
        with caplog.at_level(logging.INFO, logger="catalog.products"):
            assert store.update_product({"productId": "42", "item": "Ghost"}) is None
        assert "update ignored" in caplog.text
        assert len(store) == 3

    def test_noop_delete_logged(self, products, caplog):
        store = ProductStore(products)
        with caplog.at_level(logging.INFO, logger="catalog.products"):
            store.delete_product("42")
        assert "delete ignored" in caplog.text
