"""Ordering bounded context: order placement and the order lifecycle.

Handles the checkout flow that converts a cart into a durable order with
matching stock decrements, and the admin status updates that follow.
"""

from shared.logging import get_logger

logger = get_logger("ordering")
