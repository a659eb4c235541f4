"""Catalogue load test scenarios.

ProductAdminJourney models the admin page: add a product, restock it,
then remove it. Steps execute in order; each depends on the previous step
succeeding. A product that shoppers managed to order cannot be deleted,
so that 409 is expected.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import product_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ProductState


class ProductAdminJourney(SequentialTaskSet):
    """Create Product -> Restock -> Delete."""

    def on_start(self):
        self.state = ProductState()

    @task
    def create_product(self):
        self.state.payload = product_data()
        with self.client.post(
            "/products",
            json=self.state.payload,
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["product_id"]
            else:
                resp.failure(f"Create product failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def restock(self):
        payload = {**self.state.payload, "stock": self.state.payload["stock"] + 50}
        with self.client.put(
            f"/products/{self.state.product_id}",
            json=payload,
            catch_response=True,
            name="PUT /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Restock failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def delete_product(self):
        with self.client.delete(
            f"/products/{self.state.product_id}",
            catch_response=True,
            name="DELETE /products/{id}",
        ) as resp:
            if resp.status_code in (200, 409):
                resp.success()
            else:
                resp.failure(f"Delete product failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class CatalogueAdminUser(HttpUser):
    tasks = [ProductAdminJourney]
    wait_time = between(2, 6)
