"""Product removal.

A product that appears on any order line stays in the catalogue: the line
keeps a foreign key to it, and order history must remain readable.
"""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from catalogue.domain import logger
from catalogue.product.details import get_product
from ordering.order.order import OrderLine
from shared.errors import InvalidOperationError


def delete_product(session: Session, product_id: int) -> None:
    product = get_product(session, product_id)

    ordered = session.scalar(select(func.count()).select_from(OrderLine).where(OrderLine.product_id == product_id))
    if ordered:
        raise InvalidOperationError("Cannot delete product that has been ordered")

    session.delete(product)
    session.flush()

    logger.info("product_deleted", product_id=product_id)
