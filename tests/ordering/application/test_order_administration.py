"""Tests for the admin transaction view and order status updates."""

import pytest
from ordering.order.history import get_order, recent_orders
from ordering.order.status import update_order_status
from ordering.placement.checkout import place_order
from shared.errors import InvalidOperationError, ObjectNotFoundError, ValidationError


@pytest.fixture()
def placed_order(committer, customer, make_product):
    product_id = make_product(stock=50)

    def _place(quantity=1):
        items = [{"product_id": product_id, "quantity": quantity, "price": 120}]
        return place_order(committer, items=items, **customer).order_id

    return _place


class TestRecentOrders:
    def test_newest_first(self, session_factory, placed_order):
        ids = [placed_order() for _ in range(3)]
        with session_factory() as session:
            assert [order.order_id for order in recent_orders(session)] == list(reversed(ids))

    def test_limit(self, session_factory, placed_order):
        for _ in range(4):
            placed_order()
        with session_factory() as session:
            assert len(recent_orders(session, limit=2)) == 2

    def test_empty(self, session_factory):
        with session_factory() as session:
            assert recent_orders(session) == []


class TestGetOrder:
    def test_includes_lines(self, session_factory, placed_order):
        order_id = placed_order(quantity=3)
        with session_factory() as session:
            order = get_order(session, order_id)
            assert order.to_dict(include_lines=True)["items"][0]["subtotal"] == 360

    def test_missing(self, session_factory):
        with session_factory() as session, pytest.raises(ObjectNotFoundError):
            get_order(session, 404)


class TestStatusUpdates:
    def test_mark_delivered(self, session_factory, placed_order):
        order_id = placed_order()
        with session_factory.begin() as session:
            update_order_status(session, order_id, "Delivered")
        with session_factory() as session:
            assert get_order(session, order_id).status == "Delivered"

    def test_cancel_keeps_stock_decremented(self, session_factory, placed_order, stock_of):
        order_id = placed_order(quantity=5)
        with session_factory() as session:
            product_id = get_order(session, order_id).lines[0].product_id

        with session_factory.begin() as session:
            update_order_status(session, order_id, "Cancelled")

        assert stock_of(product_id) == 45

    def test_terminal_order_cannot_change(self, session_factory, placed_order):
        order_id = placed_order()
        with session_factory.begin() as session:
            update_order_status(session, order_id, "Cancelled")

        with session_factory.begin() as session, pytest.raises(InvalidOperationError):
            update_order_status(session, order_id, "Delivered")

    def test_unknown_status(self, session_factory, placed_order):
        order_id = placed_order()
        with session_factory.begin() as session, pytest.raises(ValidationError) as exc:
            update_order_status(session, order_id, "Shipped")
        assert "status" in exc.value.messages

    def test_unknown_order(self, session_factory):
        with session_factory.begin() as session, pytest.raises(ObjectNotFoundError):
            update_order_status(session, 404, "Delivered")
