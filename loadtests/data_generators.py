"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the storefront's validation rules
and match the field names expected by the API's Pydantic request schemas.
Order payloads use the camelCase keys the storefront page sends.
"""

import random
import uuid

from faker import Faker

fake = Faker()

# ---------- Customers ----------


def valid_email() -> str:
    """Generate emails that pass order intake's email check: one @, a dotted domain, no spaces."""
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def valid_phone() -> str:
    """Generate mobile numbers like '01711-234567'."""
    operator = random.choice(["013", "015", "016", "017", "018", "019"])
    return f"{operator}{random.randint(10, 99)}-{random.randint(100000, 999999)}"


def customer_details(with_email: bool = True) -> dict:
    details = {
        "customerName": fake.name()[:255],
        "customerPhone": valid_phone(),
        "customerAddress": fake.address().replace("\n", ", ")[:500],
    }
    if with_email:
        details["customerEmail"] = valid_email()
    return details


# ---------- Catalogue ----------


def product_data(category: str | None = None) -> dict:
    """Generate ProductRequest payload matching schema field names."""
    word = fake.word().capitalize()
    return {
        "name": f"{word} {uuid.uuid4().hex[:6]}",
        "category": category or random.choice(["Grains", "Honey", "Dairy & Eggs", "Oils", "Vegetables", "Fruits"]),
        "price": random.randint(20, 900),
        "stock": random.randint(5, 200),
    }


# ---------- Ordering ----------


def cart_items(products: list[dict], max_lines: int = 3) -> list[dict]:
    """Pick in-stock products and quantities the way a shopper fills a cart.

    ``products`` are rows from ``GET /products``. Quantities never exceed the
    stock seen at browse time, but may still lose the race at checkout.
    """
    in_stock = [product for product in products if product["stock_quantity"] > 0]
    chosen = random.sample(in_stock, k=min(len(in_stock), random.randint(1, max_lines)))
    return [
        {
            "product_id": product["product_id"],
            "quantity": random.randint(1, min(3, product["stock_quantity"])),
            "price": product["price_per_unit"],
        }
        for product in chosen
    ]


def order_payload(items: list[dict], with_total: bool = True) -> dict:
    """Generate PlaceOrderRequest payload for ``items``."""
    payload = {**customer_details(with_email=random.random() < 0.7), "items": items}
    if with_total:
        payload["totalAmount"] = sum(item["price"] * item["quantity"] for item in items)
    return payload


def invalid_order_payload(items: list[dict]) -> dict:
    """Generate an order that order intake must reject without touching storage."""
    payload = order_payload(items)
    kind = random.choice(["empty", "customer", "item", "total"])
    if kind == "empty":
        payload["items"] = []
        payload.pop("totalAmount", None)
    elif kind == "customer":
        payload["customerAddress"] = "   "
    elif kind == "item":
        payload["items"] = [{**items[0], "quantity": 0}]
        payload.pop("totalAmount", None)
    else:
        payload["totalAmount"] = payload["totalAmount"] + 1
    return payload
