"""Order intake validation.

``validate_order`` turns a loosely typed ``OrderRequest`` into an
``OrderCommand`` ready for the committer, or an ``OrderRejected``. It is a
pure function of its input: no storage access, no logging, no clock.

Checks run in a fixed order and the first failure wins:

1. the item list is empty                        → EmptyCart
2. a required customer field is missing or blank → IncompleteCustomerInfo
3. an item lacks or garbles id, quantity, price  → MalformedItem
4. the item total overflows, or a client total
   disagrees with it                             → TotalMismatch
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ordering.placement.results import OrderRejected, PlacementFailure
from shared.values import MAX_INTEGER, whole_number

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

_REQUIRED_CUSTOMER_FIELDS = ("customer_name", "customer_phone", "customer_address")


@dataclass(frozen=True)
class OrderRequest:
    """An order as submitted by the client, before validation."""

    customer_name: Any = None
    customer_phone: Any = None
    customer_address: Any = None
    items: Sequence[Any] = field(default_factory=tuple)
    customer_email: Any = None
    total_amount: Any = None


@dataclass(frozen=True)
class OrderLineCommand:
    product_id: int
    quantity: int
    price: int

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity


@dataclass(frozen=True)
class OrderCommand:
    """A validated order: trimmed customer fields, lines in client order."""

    customer_name: str
    customer_phone: str
    customer_address: str
    customer_email: str
    total_amount: int
    lines: tuple[OrderLineCommand, ...]


def _item_value(item, key: str):
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def _clean_text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def _clean_line(item) -> OrderLineCommand | None:
    product_id = whole_number(_item_value(item, "product_id"))
    quantity = whole_number(_item_value(item, "quantity"))
    price = whole_number(_item_value(item, "price"))

    if product_id is None or quantity is None or price is None:
        return None
    if quantity <= 0 or price < 0:
        return None
    return OrderLineCommand(product_id=product_id, quantity=quantity, price=price)


def validate_order(request: OrderRequest) -> OrderCommand | OrderRejected:
    items = request.items
    if items is None or isinstance(items, (str, bytes, Mapping)):
        items = ()
    items = list(items)
    if not items:
        return OrderRejected(PlacementFailure.EMPTY_CART, "Please select at least one product")

    customer = {name: _clean_text(getattr(request, name)) for name in _REQUIRED_CUSTOMER_FIELDS}
    missing = [name for name, value in customer.items() if not value]
    if missing:
        return OrderRejected(
            PlacementFailure.INCOMPLETE_CUSTOMER_INFO,
            f"Missing required fields: {', '.join(missing)}",
        )

    email = _clean_text(request.customer_email)
    if email and not _EMAIL_PATTERN.match(email):
        return OrderRejected(PlacementFailure.INCOMPLETE_CUSTOMER_INFO, "customer_email is not a valid address")

    lines = []
    for position, item in enumerate(items, start=1):
        line = _clean_line(item)
        if line is None:
            return OrderRejected(PlacementFailure.MALFORMED_ITEM, f"Invalid item data at position {position}")
        lines.append(line)

    total = sum(line.subtotal for line in lines)
    if total > MAX_INTEGER:
        return OrderRejected(PlacementFailure.TOTAL_MISMATCH, "Order total is too large")
    if request.total_amount is not None and whole_number(request.total_amount) != total:
        return OrderRejected(
            PlacementFailure.TOTAL_MISMATCH,
            f"Submitted total {request.total_amount} does not match item total {total}",
        )

    return OrderCommand(
        customer_name=customer["customer_name"],
        customer_phone=customer["customer_phone"],
        customer_address=customer["customer_address"],
        customer_email=email,
        total_amount=total,
        lines=tuple(lines),
    )
