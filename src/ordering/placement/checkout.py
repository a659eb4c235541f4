"""Order placement entry point.

``place_order`` validates a submission and, only if it is valid, hands it to
the committer. A rejected submission never touches storage, so submitting
the same invalid order again yields the same rejection and no writes.
"""

from ordering.domain import logger
from ordering.placement.cart import Cart
from ordering.placement.committer import OrderCommitter
from ordering.placement.results import OrderPlaced, OrderRejected
from ordering.placement.validation import OrderRequest, validate_order


def place_order(
    committer: OrderCommitter,
    customer_name,
    customer_phone,
    customer_address,
    items,
    customer_email=None,
    total_amount=None,
) -> OrderPlaced | OrderRejected:
    request = OrderRequest(
        customer_name=customer_name,
        customer_phone=customer_phone,
        customer_address=customer_address,
        items=items,
        customer_email=customer_email,
        total_amount=total_amount,
    )

    outcome = validate_order(request)
    if isinstance(outcome, OrderRejected):
        logger.info("order_request_rejected", reason=outcome.reason.value, detail=outcome.detail)
        return outcome

    return committer.commit(outcome)


def checkout(
    committer: OrderCommitter,
    cart: Cart,
    customer_name,
    customer_phone,
    customer_address,
    customer_email=None,
) -> OrderPlaced | OrderRejected:
    """Place an order for everything in ``cart`` at the prices it captured."""
    return place_order(
        committer,
        customer_name=customer_name,
        customer_phone=customer_phone,
        customer_address=customer_address,
        items=cart.as_items(),
        customer_email=customer_email,
        total_amount=cart.total,
    )
