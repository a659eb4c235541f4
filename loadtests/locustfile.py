"""Storefront Load Testing: Locust entry point.

Discovers all user classes from the scenarios package.
Run specific scenarios with Locust's class selection.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:8000

    # Stock contention only:
    locust -f loadtests/locustfile.py HotProductUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py CheckoutUser HotProductUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.catalogue import CatalogueAdminUser  # noqa: F401
from loadtests.scenarios.ordering import CheckoutUser, HotProductUser, OrderAdminUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Extracts the API error body so you see "InsufficientStock: Not enough
    stock for product 4" instead of just "409".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker and the starting stock when the load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    _print_stock(environment.host, "Starting stock")


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the remaining stock; none of it may be negative."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    _print_stock(environment.host, "Remaining stock")


def _print_stock(host, title):
    try:
        resp = requests.get(f"{host}/products", timeout=5)
        resp.raise_for_status()
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not fetch products: {e}\n")
        return

    print(f"\n[LOADTEST] {title}:")
    for product in resp.json():
        marker = "  <-- NEGATIVE" if product["stock_quantity"] < 0 else ""
        print(f"  {product['product_id']:>5}  {product['stock_quantity']:>6}  {product['name']}{marker}")
    print()
