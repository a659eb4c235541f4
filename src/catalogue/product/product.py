"""Product record: the catalogue's unit of sale and the inventory counter.

Prices are whole currency units. ``stock_quantity`` is guarded by a CHECK
constraint so no write, from the admin surface or from order placement, can
leave it negative.
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from shared.db import Base
from shared.errors import ValidationError
from shared.values import whole_number


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint("price_per_unit >= 0", name="ck_products_price_non_negative"),
    )

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    category: Mapped[str] = mapped_column(String(100), index=True)
    price_per_unit: Mapped[int] = mapped_column(Integer)
    stock_quantity: Mapped[int] = mapped_column(Integer, default=0)

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "category": self.category,
            "price_per_unit": self.price_per_unit,
            "stock_quantity": self.stock_quantity,
        }

    def __repr__(self) -> str:
        return f"<Product {self.product_id} {self.name!r} stock={self.stock_quantity}>"


def clean_product_fields(*, name, category, price, stock) -> dict:
    """Validate admin input for a product and return normalized column values.

    Raises ``ValidationError`` listing every offending field.
    """
    errors: dict[str, list[str]] = {}

    name = name.strip() if isinstance(name, str) else ""
    if not name:
        errors["name"] = ["is required"]

    category = category.strip() if isinstance(category, str) else ""
    if not category:
        errors["category"] = ["is required"]

    price_value = whole_number(price)
    if price_value is None or price_value < 0:
        errors["price"] = ["must be a non-negative whole number"]

    stock_value = whole_number(stock)
    if stock_value is None or stock_value < 0:
        errors["stock"] = ["must be a non-negative whole number"]

    if errors:
        raise ValidationError(errors)

    return {
        "name": name,
        "category": category,
        "price_per_unit": price_value,
        "stock_quantity": stock_value,
    }
