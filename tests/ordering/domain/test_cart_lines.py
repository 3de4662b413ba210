"""Tests for cart line management on the ShoppingCart aggregate."""

import pytest
from ordering.cart.cart import ShoppingCart
from ordering.cart.events import CartLineAdded, CartLineRemoved, CartLineUpdated
from ordering.errors import LineNotFound, OutOfStock
from protean.exceptions import ValidationError


def _make_cart():
    return ShoppingCart.create(customer_id="cust-001")


class TestAddLine:
    def test_add_line(self):
        cart = _make_cart()
        cart.add_line("prod-001", 2, available=10)
        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 2

    def test_add_line_raises_event(self):
        cart = _make_cart()
        cart.add_line("prod-001", 2, available=10)

        events = [e for e in cart._events if isinstance(e, CartLineAdded)]
        assert len(events) == 1
        assert events[0].product_id == "prod-001"
        assert events[0].quantity == 2
        assert events[0].line_quantity == 2

    def test_same_product_merges_into_one_line(self):
        cart = _make_cart()
        cart.add_line("prod-001", 1, available=10)
        cart.add_line("prod-001", 2, available=10)
        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 3

    def test_different_products_get_own_lines(self):
        cart = _make_cart()
        cart.add_line("prod-001", 1, available=10)
        cart.add_line("prod-002", 1, available=10)
        assert len(cart.lines) == 2

    def test_quantity_above_stock_rejected(self):
        cart = _make_cart()
        with pytest.raises(OutOfStock) as exc:
            cart.add_line("prod-001", 4, available=3)

        assert exc.value.messages == {"quantity": ["Only 3 items available"]}
        assert len(cart.lines) == 0

    def test_only_requested_quantity_is_checked(self):
        cart = _make_cart()
        cart.add_line("prod-001", 3, available=3)
        cart.add_line("prod-001", 3, available=3)
        assert cart.lines[0].quantity == 6

    def test_non_positive_quantity_rejected(self):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.add_line("prod-001", 0, available=10)


class TestUpdateLine:
    def test_update_overwrites_quantity(self):
        cart = _make_cart()
        cart.add_line("prod-001", 1, available=10)
        cart._events.clear()

        cart.update_line("prod-001", 5, available=10)

        assert cart.lines[0].quantity == 5
        assert len(cart._events) == 1
        event = cart._events[0]
        assert isinstance(event, CartLineUpdated)
        assert event.previous_quantity == 1
        assert event.new_quantity == 5

    def test_update_to_zero_removes_line(self):
        cart = _make_cart()
        cart.add_line("prod-001", 2, available=10)
        cart.update_line("prod-001", 0)
        assert len(cart.lines) == 0

    def test_update_above_stock_rejected(self):
        cart = _make_cart()
        cart.add_line("prod-001", 1, available=10)
        with pytest.raises(OutOfStock):
            cart.update_line("prod-001", 11, available=10)
        assert cart.lines[0].quantity == 1

    def test_update_missing_line(self):
        cart = _make_cart()
        with pytest.raises(LineNotFound):
            cart.update_line("prod-404", 2)

    def test_update_missing_line_to_zero(self):
        cart = _make_cart()
        with pytest.raises(LineNotFound):
            cart.update_line("prod-404", 0)

    def test_negative_quantity_rejected(self):
        cart = _make_cart()
        cart.add_line("prod-001", 1, available=10)
        with pytest.raises(ValidationError):
            cart.update_line("prod-001", -1)


class TestRemoveLine:
    def test_remove_line(self):
        cart = _make_cart()
        cart.add_line("prod-001", 1, available=10)
        assert cart.remove_line("prod-001") is True
        assert len(cart.lines) == 0
        assert isinstance(cart._events[-1], CartLineRemoved)

    def test_remove_missing_line_is_noop(self):
        cart = _make_cart()
        cart.add_line("prod-001", 1, available=10)
        cart._events.clear()

        assert cart.remove_line("prod-404") is False
        assert len(cart.lines) == 1
        assert cart._events == []


class TestClear:
    def test_clear_empties_cart(self):
        cart = _make_cart()
        cart.add_line("prod-001", 1, available=10)
        cart.add_line("prod-002", 2, available=10)
        cart.clear()
        assert len(cart.lines) == 0

    def test_clear_empty_cart(self):
        cart = _make_cart()
        cart.clear()
        assert len(cart.lines) == 0
