"""Ordering load test scenarios.

CheckoutJourney models a shopper browsing, filling a cart and placing an
order. HotProductUser makes many shoppers race for the same product so
concurrent placements contend on one stock row. OrderAdminUser works
through the recent transactions list.

A 409 ``InsufficientStock`` is a correct outcome under contention and is
counted as a success; any other rejection is a failure.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import cart_items, invalid_order_payload, order_payload
from loadtests.helpers.response import extract_error_detail, rejection_reason
from loadtests.helpers.state import CheckoutState


def _place_order(client, payload, name="POST /orders"):
    """POST an order; return its id, or None if it was rejected."""
    with client.post("/orders", json=payload, catch_response=True, name=name) as resp:
        if resp.status_code == 201:
            return resp.json()["order_id"]
        if resp.status_code == 409 and rejection_reason(resp) == "InsufficientStock":
            resp.success()
        else:
            resp.failure(f"Place order failed: {resp.status_code}: {extract_error_detail(resp)}")
        return None


class CheckoutJourney(SequentialTaskSet):
    """Browse Products -> Fill Cart -> Place Order -> View Order."""

    def on_start(self):
        self.state = CheckoutState()

    @task
    def browse_products(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            if resp.status_code == 200:
                self.state.products = resp.json()
            else:
                resp.failure(f"List products failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def fill_cart(self):
        self.state.items = cart_items(self.state.products)
        if not self.state.items:
            # Sold out; nothing to buy
            self.interrupt()

    @task
    def place_order(self):
        self.state.order_id = _place_order(self.client, order_payload(self.state.items))
        if self.state.order_id is None:
            self.interrupt()

    @task
    def view_order(self):
        with self.client.get(
            f"/orders/{self.state.order_id}",
            catch_response=True,
            name="GET /orders/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"View order failed: {resp.status_code}: {extract_error_detail(resp)}")
            elif resp.json()["status"] != "Pending":
                resp.failure(f"New order is {resp.json()['status']}, expected Pending")

    @task
    def done(self):
        self.interrupt()


class CheckoutUser(HttpUser):
    tasks = [CheckoutJourney]
    wait_time = between(1, 3)


class HotProductUser(HttpUser):
    """Every user orders the same product so placements queue on one stock row.

    Watch the remaining stock printed at test stop: it must never be negative
    and must equal the starting stock minus the units in placed orders.
    """

    wait_time = between(0.1, 0.5)

    def on_start(self):
        resp = self.client.get("/products", name="GET /products")
        products = resp.json() if resp.status_code == 200 else []
        self.hot_product = max(products, key=lambda product: product["stock_quantity"], default=None)

    def _hot_item(self):
        product = self.hot_product
        return {"product_id": product["product_id"], "quantity": 1, "price": product["price_per_unit"]}

    @task(10)
    def grab_hot_product(self):
        if self.hot_product is None:
            return
        _place_order(self.client, order_payload([self._hot_item()]), name="[HOT] POST /orders")

    @task(1)
    def submit_invalid_order(self):
        """Rejected by order intake; must never reach storage."""
        if self.hot_product is None:
            return
        with self.client.post(
            "/orders",
            json=invalid_order_payload([self._hot_item()]),
            catch_response=True,
            name="[INVALID] POST /orders",
        ) as resp:
            if resp.status_code == 422:
                resp.success()
            else:
                resp.failure(f"Expected 422, got {resp.status_code}: {extract_error_detail(resp)}")


class OrderAdminUser(HttpUser):
    """Reads the recent transactions list and settles pending orders."""

    wait_time = between(2, 5)

    @task(3)
    def recent_transactions(self):
        self.client.get("/orders", name="GET /orders")

    @task(1)
    def settle_order(self):
        resp = self.client.get("/orders", name="GET /orders")
        if resp.status_code != 200:
            return
        pending = [order for order in resp.json() if order["status"] == "Pending"]
        if not pending:
            return

        order = random.choice(pending)
        with self.client.put(
            f"/orders/{order['order_id']}/status",
            json={"status": random.choice(["Delivered", "Cancelled"])},
            catch_response=True,
            name="PUT /orders/{id}/status",
        ) as status_resp:
            # Another admin may have settled it first
            if status_resp.status_code in (200, 409):
                status_resp.success()
            else:
                status_resp.failure(
                    f"Update status failed: {status_resp.status_code}: {extract_error_detail(status_resp)}"
                )
