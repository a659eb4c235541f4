"""FastAPI routes for the Ordering domain: checkout and order administration."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from ordering.api.schemas import (
    OrderIdResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateOrderStatusRequest,
)
from ordering.order.history import get_order, recent_orders
from ordering.order.status import update_order_status
from ordering.placement.checkout import place_order
from ordering.placement.committer import OrderCommitter
from ordering.placement.results import FailureCategory, OrderRejected, PlacementFailure
from ordering.placement.store import OrderStore
from shared.config import Settings, get_settings
from shared.db import get_session_factory

order_router = APIRouter(prefix="/orders", tags=["orders"])


def get_committer(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
) -> OrderCommitter:
    return OrderCommitter(OrderStore(session_factory), timeout=settings.commit_timeout)


def _rejection_status(rejection: OrderRejected) -> int:
    if rejection.reason.category is FailureCategory.VALIDATION:
        return 422
    if rejection.reason is PlacementFailure.INSUFFICIENT_STOCK:
        return 409
    if rejection.reason in (PlacementFailure.TIMEOUT, PlacementFailure.STORE_UNAVAILABLE):
        return 503
    return 500


@order_router.post("", status_code=201, response_model=OrderIdResponse)
def create_order(body: PlaceOrderRequest, committer: OrderCommitter = Depends(get_committer)):
    outcome = place_order(
        committer,
        customer_name=body.customer_name,
        customer_phone=body.customer_phone,
        customer_address=body.customer_address,
        items=body.items,
        customer_email=body.customer_email,
        total_amount=body.total_amount,
    )
    if isinstance(outcome, OrderRejected):
        return JSONResponse(status_code=_rejection_status(outcome), content=outcome.to_dict())
    return OrderIdResponse(order_id=outcome.order_id)


@order_router.get("", response_model=list[OrderResponse])
def list_orders(
    limit: int | None = Query(default=None, ge=1, le=500),
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
):
    with session_factory() as session:
        orders = recent_orders(session, limit=limit or settings.recent_orders_limit)
        return [order.to_dict() for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
def show_order(order_id: int, session_factory: sessionmaker[Session] = Depends(get_session_factory)):
    with session_factory() as session:
        return get_order(session, order_id).to_dict(include_lines=True)


@order_router.put("/{order_id}/status", response_model=OrderResponse)
def change_order_status(
    order_id: int,
    body: UpdateOrderStatusRequest,
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
):
    with session_factory.begin() as session:
        order = update_order_status(session, order_id, body.status)
        return order.to_dict()
