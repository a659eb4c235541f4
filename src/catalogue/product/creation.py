"""Product creation."""

from sqlalchemy.orm import Session

from catalogue.domain import logger
from catalogue.product.product import Product, clean_product_fields


def add_product(session: Session, *, name, category, price, stock) -> Product:
    values = clean_product_fields(name=name, category=category, price=price, stock=stock)
    product = Product(**values)
    session.add(product)
    session.flush()

    logger.info("product_added", product_id=product.product_id, name=product.name)
    return product
