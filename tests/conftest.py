import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Select the configuration environment and drop any settings cached before it was set.
    """
    os.environ["STOREFRONT_ENV"] = session.config.option.env

    from shared.config import get_settings

    get_settings.cache_clear()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------
@pytest.fixture()
def database_uri(tmp_path):
    """A fresh database per test.

    File-backed SQLite by default; set STOREFRONT_TEST_DATABASE_URI to run
    against a disposable PostgreSQL database instead.
    """
    return os.getenv("STOREFRONT_TEST_DATABASE_URI") or f"sqlite:///{tmp_path / 'storefront.db'}"


@pytest.fixture()
def is_sqlite(database_uri):
    return database_uri.startswith("sqlite")


@pytest.fixture()
def engine(database_uri):
    from shared.db import create_engine_for, drop_db, setup_db

    engine = create_engine_for(database_uri, timeout=5.0)
    drop_db(engine)
    setup_db(engine)

    yield engine

    drop_db(engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    from shared.db import make_session_factory

    return make_session_factory(engine)


@pytest.fixture()
def store(session_factory):
    from ordering.placement.store import OrderStore

    return OrderStore(session_factory)


@pytest.fixture()
def committer(store):
    from ordering.placement.committer import OrderCommitter

    return OrderCommitter(store, timeout=5.0)


# ---------------------------------------------------------------------------
# Data helpers
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product(session_factory):
    """Insert a product and return its id."""
    from catalogue.product.creation import add_product

    def _make(name="Organic Red Rice", category="Grains", price=120, stock=10):
        with session_factory.begin() as session:
            return add_product(session, name=name, category=category, price=price, stock=stock).product_id

    return _make


@pytest.fixture()
def stock_of(session_factory):
    from catalogue.product.product import Product

    def _stock(product_id):
        with session_factory() as session:
            return session.get(Product, product_id).stock_quantity

    return _stock


@pytest.fixture()
def row_counts(session_factory):
    """Return (orders, order lines) currently stored."""
    from ordering.order.order import Order, OrderLine
    from sqlalchemy import func, select

    def _counts():
        with session_factory() as session:
            orders = session.scalar(select(func.count()).select_from(Order))
            lines = session.scalar(select(func.count()).select_from(OrderLine))
            return orders, lines

    return _counts


@pytest.fixture()
def customer():
    return {
        "customer_name": "Rahim Uddin",
        "customer_phone": "01711-000000",
        "customer_address": "12 Lake Road, Dhaka",
    }
