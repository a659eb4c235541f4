"""Transactional order committer.

Records a validated ``OrderCommand`` as one unit of work:

1. begin the unit of work
2. insert the order header and capture its id
3. for each line, in client order: insert the line, then decrement stock
4. commit

Every step yields an explicit outcome. The first failing step ends the
sequence; the unit of work is rolled back and a single ``OrderRejected`` is
returned, so no header, line or stock change from this attempt survives.
The deadline is checked before each step and after a failed one.
"""

from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from ordering.domain import logger
from ordering.placement.results import OrderPlaced, OrderRejected, PlacementFailure
from ordering.placement.store import OrderStore, UnitOfWork, describe_error, is_timeout_error
from ordering.placement.validation import OrderCommand


class OrderCommitter:
    def __init__(self, store: OrderStore, timeout: float | None = None):
        self.store = store
        self.timeout = timeout

    def commit(self, command: OrderCommand) -> OrderPlaced | OrderRejected:
        log = logger.bind(
            customer_name=command.customer_name,
            line_count=len(command.lines),
            total_amount=command.total_amount,
        )

        try:
            with self.store.begin_unit_of_work(self.timeout) as uow:
                outcome = self._apply(uow, command)
                if isinstance(outcome, OrderRejected):
                    uow.rollback()
        except SQLAlchemyError as exc:
            reason = PlacementFailure.TIMEOUT if is_timeout_error(exc) else PlacementFailure.STORE_UNAVAILABLE
            outcome = OrderRejected(reason, describe_error(exc))

        if isinstance(outcome, OrderPlaced):
            log.info("order_placed", order_id=outcome.order_id)
        elif outcome.reason is PlacementFailure.INSUFFICIENT_STOCK:
            log.info("order_rejected", reason=outcome.reason.value, detail=outcome.detail)
        else:
            log.warning("order_rolled_back", reason=outcome.reason.value, detail=outcome.detail)
        return outcome

    def _apply(self, uow: UnitOfWork, command: OrderCommand) -> OrderPlaced | OrderRejected:
        order_id, failure = self._step(
            uow,
            PlacementFailure.ORDER_INSERT_FAILED,
            uow.insert_order,
            command.customer_name,
            command.customer_phone,
            command.customer_address,
            command.customer_email,
            command.total_amount,
        )
        if failure:
            return failure

        for line in command.lines:
            _, failure = self._step(
                uow,
                PlacementFailure.ITEM_INSERT_FAILED,
                uow.insert_order_line,
                order_id,
                line.product_id,
                line.quantity,
                line.price,
            )
            if failure:
                return failure

            affected, failure = self._step(
                uow,
                PlacementFailure.STOCK_UPDATE_FAILED,
                uow.decrement_stock,
                line.product_id,
                line.quantity,
            )
            if failure:
                return failure
            if affected == 0:
                return OrderRejected(
                    PlacementFailure.INSUFFICIENT_STOCK,
                    f"Not enough stock for product {line.product_id}",
                )

        _, failure = self._step(uow, PlacementFailure.COMMIT_FAILED, uow.commit)
        if failure:
            return failure

        return OrderPlaced(order_id=order_id)

    def _step(
        self,
        uow: UnitOfWork,
        reason: PlacementFailure,
        operation: Callable[..., Any],
        *args,
    ) -> tuple[Any, OrderRejected | None]:
        if uow.expired:
            return None, OrderRejected(PlacementFailure.TIMEOUT, "Order placement exceeded its time limit")

        try:
            return operation(*args), None
        except (SQLAlchemyError, OverflowError) as exc:
            if uow.expired or is_timeout_error(exc):
                return None, OrderRejected(PlacementFailure.TIMEOUT, describe_error(exc))
            return None, OrderRejected(reason, describe_error(exc))
