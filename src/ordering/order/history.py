"""Order history queries for the admin transaction view."""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ordering.order.order import Order
from shared.errors import ObjectNotFoundError


def recent_orders(session: Session, limit: int = 20) -> list[Order]:
    """Newest orders first."""
    stmt = select(Order).order_by(Order.order_date.desc(), Order.order_id.desc()).limit(limit)
    return list(session.scalars(stmt))


def get_order(session: Session, order_id: int) -> Order:
    stmt = select(Order).options(selectinload(Order.lines)).where(Order.order_id == order_id)
    order = session.scalar(stmt)
    if order is None:
        raise ObjectNotFoundError(f"Order {order_id} not found")
    return order
