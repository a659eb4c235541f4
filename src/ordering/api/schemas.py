"""Pydantic request/response schemas for the Ordering API.

These are external contracts. The order body stays loosely typed: whether
the cart, the customer fields or the total are acceptable is decided by order
intake validation, which reports ``EmptyCart``, ``IncompleteCustomerInfo``,
``MalformedItem`` or ``TotalMismatch`` rather than a schema error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    # The storefront page posts camelCase keys; snake_case is accepted too
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "customer_name": "Rahim Uddin",
                    "customer_phone": "01711-000000",
                    "customer_address": "12 Lake Road, Dhaka",
                    "customer_email": "rahim@example.com",
                    "total_amount": 360,
                    "items": [
                        {"product_id": 1, "quantity": 2, "price": 120},
                        {"product_id": 4, "quantity": 1, "price": 120},
                    ],
                }
            ]
        },
    )

    customer_name: Any = Field(default=None, alias="customerName")
    customer_phone: Any = Field(default=None, alias="customerPhone")
    customer_address: Any = Field(default=None, alias="customerAddress")
    customer_email: Any = Field(default=None, alias="customerEmail")
    total_amount: Any = Field(default=None, alias="totalAmount")
    items: list[Any] | None = None


class UpdateOrderStatusRequest(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: int


class OrderLineResponse(BaseModel):
    order_item_id: int
    product_id: int
    quantity: int
    price: int
    subtotal: int


class OrderResponse(BaseModel):
    order_id: int
    customer_name: str
    customer_phone: str
    customer_address: str
    customer_email: str
    total_amount: int
    status: str
    order_date: str | None = None
    items: list[OrderLineResponse] | None = None
