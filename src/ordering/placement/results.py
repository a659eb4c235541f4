"""Outcomes of an order placement attempt.

Placement never raises for an expected failure. It returns ``OrderPlaced``
or ``OrderRejected`` carrying exactly one ``PlacementFailure`` reason.
"""

from dataclasses import dataclass
from enum import Enum


class FailureCategory(Enum):
    VALIDATION = "validation"  # rejected before any storage access
    STORAGE = "storage"  # a step of the unit of work failed
    BUSINESS = "business"  # the store refused on a business rule


class PlacementFailure(Enum):
    EMPTY_CART = "EmptyCart"
    INCOMPLETE_CUSTOMER_INFO = "IncompleteCustomerInfo"
    MALFORMED_ITEM = "MalformedItem"
    TOTAL_MISMATCH = "TotalMismatch"
    ORDER_INSERT_FAILED = "OrderInsertFailed"
    ITEM_INSERT_FAILED = "ItemInsertFailed"
    STOCK_UPDATE_FAILED = "StockUpdateFailed"
    INSUFFICIENT_STOCK = "InsufficientStock"
    COMMIT_FAILED = "CommitFailed"
    STORE_UNAVAILABLE = "StoreUnavailable"
    TIMEOUT = "Timeout"

    @property
    def category(self) -> FailureCategory:
        return _CATEGORIES[self]

    @property
    def retryable(self) -> bool:
        """Only a timed out unit of work may succeed when submitted again unchanged."""
        return self is PlacementFailure.TIMEOUT


_CATEGORIES = {
    PlacementFailure.EMPTY_CART: FailureCategory.VALIDATION,
    PlacementFailure.INCOMPLETE_CUSTOMER_INFO: FailureCategory.VALIDATION,
    PlacementFailure.MALFORMED_ITEM: FailureCategory.VALIDATION,
    PlacementFailure.TOTAL_MISMATCH: FailureCategory.VALIDATION,
    PlacementFailure.ORDER_INSERT_FAILED: FailureCategory.STORAGE,
    PlacementFailure.ITEM_INSERT_FAILED: FailureCategory.STORAGE,
    PlacementFailure.STOCK_UPDATE_FAILED: FailureCategory.STORAGE,
    PlacementFailure.COMMIT_FAILED: FailureCategory.STORAGE,
    PlacementFailure.STORE_UNAVAILABLE: FailureCategory.STORAGE,
    PlacementFailure.TIMEOUT: FailureCategory.STORAGE,
    PlacementFailure.INSUFFICIENT_STOCK: FailureCategory.BUSINESS,
}


@dataclass(frozen=True)
class OrderPlaced:
    order_id: int

    ok = True


@dataclass(frozen=True)
class OrderRejected:
    reason: PlacementFailure
    detail: str = ""

    ok = False

    def to_dict(self) -> dict:
        return {"error": self.reason.value, "detail": self.detail}
