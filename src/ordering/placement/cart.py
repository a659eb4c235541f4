"""Shopping cart: a session-scoped value object.

A ``Cart`` is immutable: ``add`` and ``remove`` return a new cart. The caller
keeps it for the duration of a browsing session and hands it to checkout.
Each item remembers the unit price seen when it was first added.
"""

from dataclasses import dataclass, replace

from shared.errors import InvalidOperationError, ValidationError


@dataclass(frozen=True)
class CartItem:
    product_id: int
    price: int
    quantity: int = 1
    name: str | None = None

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity

    def as_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "price": self.price,
            "quantity": self.quantity,
            "name": self.name,
        }


@dataclass(frozen=True)
class Cart:
    items: tuple[CartItem, ...] = ()

    def find(self, product_id: int) -> CartItem | None:
        return next((item for item in self.items if item.product_id == product_id), None)

    def add(self, product_id: int, price: int, available: int, name: str | None = None, quantity: int = 1) -> "Cart":
        """Add ``quantity`` units, never exceeding the ``available`` stock."""
        if quantity < 1:
            raise ValidationError({"quantity": ["must be at least 1"]})
        if available <= 0:
            raise InvalidOperationError("This product is out of stock")

        existing = self.find(product_id)
        in_cart = existing.quantity if existing else 0
        if in_cart + quantity > available:
            raise InvalidOperationError(f"Sorry, only {available} items available in stock")

        if existing is None:
            return Cart(items=(*self.items, CartItem(product_id, price, quantity, name)))

        return Cart(
            items=tuple(
                replace(item, quantity=item.quantity + quantity) if item.product_id == product_id else item
                for item in self.items
            )
        )

    def remove(self, product_id: int) -> "Cart":
        return Cart(items=tuple(item for item in self.items if item.product_id != product_id))

    @property
    def total(self) -> int:
        return sum(item.subtotal for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def as_items(self) -> list[dict]:
        return [item.as_dict() for item in self.items]
