"""Catalogue bounded context: products and their stock counters.

Products are administered here; their ``stock_quantity`` is also the
inventory that order placement decrements.
"""

from shared.logging import get_logger

logger = get_logger("catalogue")
