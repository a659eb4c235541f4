"""Product detail updates from the admin surface.

Admin edits set ``stock_quantity`` absolutely. Order placement never goes
through here; it decrements stock relatively inside its own unit of work.
"""

from sqlalchemy.orm import Session

from catalogue.domain import logger
from catalogue.product.product import Product, clean_product_fields
from shared.errors import ObjectNotFoundError


def get_product(session: Session, product_id: int) -> Product:
    product = session.get(Product, product_id)
    if product is None:
        raise ObjectNotFoundError(f"Product {product_id} not found")
    return product


def update_product(session: Session, product_id: int, *, name, category, price, stock) -> Product:
    values = clean_product_fields(name=name, category=category, price=price, stock=stock)
    product = get_product(session, product_id)

    for column, value in values.items():
        setattr(product, column, value)
    session.flush()

    logger.info("product_updated", product_id=product_id, stock_quantity=product.stock_quantity)
    return product
