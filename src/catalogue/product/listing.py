"""Catalogue listing, grouped the way the storefront renders it."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalogue.product.product import Product


def list_products(session: Session) -> list[Product]:
    return list(session.scalars(select(Product).order_by(Product.category, Product.name)))
