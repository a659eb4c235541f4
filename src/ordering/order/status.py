"""Order status updates from the admin surface.

Pending orders may be marked Delivered or Cancelled; nothing moves an order
out of a terminal state. Stock is not restored on cancellation.
"""

from sqlalchemy.orm import Session

from ordering.domain import logger
from ordering.order.history import get_order
from ordering.order.order import Order, OrderStatus
from shared.errors import ValidationError


def parse_status(value) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        valid = ", ".join(status.value for status in OrderStatus)
        raise ValidationError({"status": [f"Invalid status. Expected one of: {valid}"]}) from None


def update_order_status(session: Session, order_id: int, status) -> Order:
    new_status = parse_status(status)
    order = get_order(session, order_id)

    previous = order.status
    order.transition_to(new_status)
    session.flush()

    logger.info(
        "order_status_updated",
        order_id=order_id,
        from_status=previous,
        to_status=new_status.value,
    )
    return order
