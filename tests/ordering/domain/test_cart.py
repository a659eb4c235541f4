"""Tests for the session cart value object."""

import pytest
from ordering.placement.cart import Cart, CartItem
from shared.errors import InvalidOperationError, ValidationError


class TestCartAdd:
    def test_new_cart_is_empty(self):
        cart = Cart()
        assert cart.is_empty
        assert cart.total == 0

    def test_add_returns_new_cart(self):
        cart = Cart()
        updated = cart.add(product_id=1, price=120, available=5, name="Red Rice")
        assert cart.is_empty
        assert updated.find(1) == CartItem(product_id=1, price=120, quantity=1, name="Red Rice")

    def test_add_same_product_increments_quantity(self):
        cart = Cart().add(1, 120, available=5).add(1, 120, available=5, quantity=2)
        assert len(cart.items) == 1
        assert cart.find(1).quantity == 3

    def test_first_seen_price_is_kept(self):
        cart = Cart().add(1, 120, available=5).add(1, 150, available=5)
        assert cart.find(1).price == 120

    def test_out_of_stock(self):
        with pytest.raises(InvalidOperationError, match="out of stock"):
            Cart().add(1, 120, available=0)

    def test_cannot_exceed_available(self):
        cart = Cart().add(1, 120, available=2, quantity=2)
        with pytest.raises(InvalidOperationError, match="only 2 items available"):
            cart.add(1, 120, available=2)

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError) as exc:
            Cart().add(1, 120, available=5, quantity=0)
        assert "quantity" in exc.value.messages


class TestCartRemoveAndTotals:
    def test_remove(self):
        cart = Cart().add(1, 120, available=5).add(2, 40, available=5)
        cart = cart.remove(1)
        assert cart.find(1) is None
        assert cart.find(2) is not None

    def test_remove_missing_product_is_noop(self):
        cart = Cart().add(1, 120, available=5)
        assert cart.remove(99) == cart

    def test_total(self):
        cart = Cart().add(1, 120, available=5, quantity=2).add(2, 40, available=5, quantity=3)
        assert cart.total == 360

    def test_as_items_matches_order_payload(self):
        cart = Cart().add(1, 120, available=5, name="Red Rice", quantity=2)
        assert cart.as_items() == [{"product_id": 1, "price": 120, "quantity": 2, "name": "Red Rice"}]
