"""Shared BDD fixtures and step definitions for order placement."""

import pytest
from ordering.order.history import get_order
from ordering.placement.results import OrderPlaced, OrderRejected, PlacementFailure
from ordering.placement.store import UnitOfWork
from pytest_bdd import given, parsers, then
from sqlalchemy.exc import OperationalError


@pytest.fixture()
def catalogue_ids():
    """Product name to product id, filled in by Given steps."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced {price:d} with {stock:d} in stock'))
def _(name, price, stock, make_product, catalogue_ids):
    catalogue_ids[name] = make_product(name=name, category="Pantry", price=price, stock=stock)


@given("stock updates are failing")
def _(monkeypatch):
    def _failing(self, product_id, quantity):
        raise OperationalError("UPDATE products", {}, Exception("disk I/O error"))

    monkeypatch.setattr(UnitOfWork, "decrement_stock", _failing)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the order is placed")
def _(outcome):
    assert isinstance(outcome, OrderPlaced), outcome


@then(parsers.cfparse('the order is rejected with "{reason}"'))
def _(outcome, reason):
    assert isinstance(outcome, OrderRejected)
    assert outcome.reason is PlacementFailure(reason)


@then(parsers.cfparse("the order total is {total:d}"))
def _(outcome, total, session_factory):
    with session_factory() as session:
        assert get_order(session, outcome.order_id).total_amount == total


@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def _(name, stock, catalogue_ids, stock_of):
    assert stock_of(catalogue_ids[name]) == stock


@then("no orders are recorded")
def _(row_counts):
    assert row_counts() == (0, 0)
