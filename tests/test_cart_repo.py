"""Tests for online_store.repos.cart_repo."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from online_store.repos.cart_repo import CartRepo


class TestCartRepo:
    def test_unknown_customer_has_empty_cart(self, carts):
        assert carts.get_cart(5) == []

    def test_add_creates_cart_lazily(self, carts):
        carts.add_item(5, 1, "Keyboard", 299.90, 2)
        [line] = carts.get_cart(5)
        assert (line.product_id, line.product_name, line.qty) == (1, "Keyboard", 2)
        assert line.unit_price == pytest.approx(299.90)

    def test_same_product_is_merged(self, carts):
        for qty in (1, 2, 3):
            carts.add_item(5, 1, "Keyboard", 299.90, qty)
        lines = carts.get_cart(5)
        assert len(lines) == 1
        assert lines[0].qty == 6

    def test_merge_keeps_first_snapshot(self, carts):
        carts.add_item(5, 1, "Keyboard", 299.90, 1)
        carts.add_item(5, 1, "Keyboard v2", 199.90, 1)
        [line] = carts.get_cart(5)
        assert line.product_name == "Keyboard"
        assert line.unit_price == pytest.approx(299.90)

    def test_lines_keep_insertion_order(self, carts):
        carts.add_item(5, 2, "Mouse", 149.50, 1)
        carts.add_item(5, 1, "Keyboard", 299.90, 1)
        carts.add_item(5, 2, "Mouse", 149.50, 1)
        assert [line.product_id for line in carts.get_cart(5)] == [2, 1]

    def test_carts_are_per_customer(self, carts):
        carts.add_item(5, 1, "Keyboard", 299.90, 1)
        carts.add_item(6, 2, "Mouse", 149.50, 1)
        assert [l.product_id for l in carts.get_cart(5)] == [1]
        assert [l.product_id for l in carts.get_cart(6)] == [2]

    def test_get_cart_is_snapshot(self, carts):
        carts.add_item(5, 1, "Keyboard", 299.90, 1)
        snapshot = carts.get_cart(5)
        snapshot.clear()
        assert len(carts.get_cart(5)) == 1

    def test_clear_cart(self, carts):
        carts.add_item(5, 1, "Keyboard", 299.90, 1)
        carts.clear_cart(5)
        assert carts.get_cart(5) == []

    def test_clear_unknown_cart_is_noop(self, carts):
        carts.clear_cart(123)
        assert carts.get_cart(123) == []

    def test_concurrent_adds_sum_quantities(self):
        carts = CartRepo()

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: carts.add_item(5, 1, "Keyboard", 1.0, 1), range(200)))

        [line] = carts.get_cart(5)
        assert line.qty == 200
