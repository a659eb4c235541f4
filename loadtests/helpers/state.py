"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state: no cross-user sharing.
State tracks ids and catalogue rows returned by earlier requests so
follow-up requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class CheckoutState:
    """Tracks state for a single simulated shopper."""

    products: list[dict] = field(default_factory=list)
    items: list[dict] = field(default_factory=list)
    order_id: int | None = None


@dataclass
class ProductState:
    """Tracks state for a single simulated catalogue edit."""

    product_id: int | None = None
    payload: dict = field(default_factory=dict)
