"""Durable store for order placement.

``OrderStore.begin_unit_of_work`` hands out a ``UnitOfWork``: a context
manager owning one session and one transaction. Inside it the committer
inserts the order header and lines and decrements stock. Leaving the
``with`` block without ``commit()`` rolls everything back; the session is
closed on every exit path.

The stock decrement is a guarded relative update executed by the database:

    UPDATE products SET stock_quantity = stock_quantity - :q
     WHERE product_id = :id AND stock_quantity >= :q

Concurrent placements touching the same product therefore never lose an
update and never drive stock below zero. Zero rows affected means the
product did not have enough stock.
"""

import time
from collections.abc import Callable

from sqlalchemy import update
from sqlalchemy.orm import Session, sessionmaker

from catalogue.product.product import Product
from ordering.order.order import Order, OrderLine, OrderStatus
from shared.db import BEGIN_IMMEDIATE

# PostgreSQL: query_canceled (statement_timeout), lock_not_available (lock_timeout)
_TIMEOUT_PGCODES = {"57014", "55P03"}
_TIMEOUT_MESSAGES = ("database is locked", "statement timeout", "lock timeout", "canceling statement")


def is_timeout_error(exc: Exception) -> bool:
    """True if ``exc`` reports a lock wait or statement timeout."""
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) in _TIMEOUT_PGCODES:
        return True
    message = str(orig if orig is not None else exc).lower()
    return any(marker in message for marker in _TIMEOUT_MESSAGES)


def describe_error(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc).splitlines()[0]


class UnitOfWork:
    """One all-or-nothing placement transaction."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._session_factory = session_factory
        self._timeout = timeout
        self._clock = clock
        self._deadline: float | None = None
        self.session: Session | None = None

    def __enter__(self) -> "UnitOfWork":
        self.session = self._session_factory()
        try:
            self._begin()
        except BaseException:
            self.session.close()
            raise
        if self._timeout is not None:
            self._deadline = self._clock() + self._timeout
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if self.session.in_transaction():
                self.session.rollback()
        finally:
            self.session.close()
        return False

    def _begin(self) -> None:
        self.session.begin()
        # Acquire the connection now so lock waits happen at begin, not mid-sequence
        connection = self.session.connection(execution_options={BEGIN_IMMEDIATE: True})
        if connection.dialect.name == "postgresql" and self._timeout:
            connection.exec_driver_sql(f"SET LOCAL statement_timeout = {int(self._timeout * 1000)}")

    @property
    def expired(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline

    # ---------------------------------------------------------------------------
    # Transaction boundary
    # ---------------------------------------------------------------------------
    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    # ---------------------------------------------------------------------------
    # Writes
    # ---------------------------------------------------------------------------
    def insert_order(
        self,
        customer_name: str,
        customer_phone: str,
        customer_address: str,
        customer_email: str,
        total_amount: int,
    ) -> int:
        order = Order(
            customer_name=customer_name,
            customer_phone=customer_phone,
            customer_address=customer_address,
            customer_email=customer_email or "",
            total_amount=total_amount,
            status=OrderStatus.PENDING.value,
        )
        self.session.add(order)
        self.session.flush()
        return order.order_id

    def insert_order_line(self, order_id: int, product_id: int, quantity: int, price: int) -> None:
        self.session.add(OrderLine(order_id=order_id, product_id=product_id, quantity=quantity, price=price))
        self.session.flush()

    def decrement_stock(self, product_id: int, quantity: int) -> int:
        """Subtract ``quantity`` from the product's stock if enough remains.

        Returns the number of rows affected: 1 on success, 0 when the
        product is short of stock.
        """
        stmt = (
            update(Product)
            .where(Product.product_id == product_id, Product.stock_quantity >= quantity)
            .values(stock_quantity=Product.stock_quantity - quantity)
            .execution_options(synchronize_session=False)
        )
        return self.session.execute(stmt).rowcount


class OrderStore:
    def __init__(self, session_factory: sessionmaker[Session], clock: Callable[[], float] = time.monotonic):
        self._session_factory = session_factory
        self._clock = clock

    def begin_unit_of_work(self, timeout: float | None = None) -> UnitOfWork:
        return UnitOfWork(self._session_factory, timeout=timeout, clock=self._clock)
