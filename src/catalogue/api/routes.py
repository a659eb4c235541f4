"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, sessionmaker

from catalogue.api.schemas import ProductRequest, ProductResponse
from catalogue.product.creation import add_product
from catalogue.product.details import update_product
from catalogue.product.listing import list_products
from catalogue.product.removal import delete_product
from shared.db import get_session_factory

product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
def get_products(session_factory: sessionmaker[Session] = Depends(get_session_factory)):
    with session_factory() as session:
        return [product.to_dict() for product in list_products(session)]


@product_router.post("", status_code=201, response_model=ProductResponse)
def create_product(body: ProductRequest, session_factory: sessionmaker[Session] = Depends(get_session_factory)):
    with session_factory.begin() as session:
        product = add_product(session, name=body.name, category=body.category, price=body.price, stock=body.stock)
        return product.to_dict()


@product_router.put("/{product_id}", response_model=ProductResponse)
def edit_product(
    product_id: int,
    body: ProductRequest,
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
):
    with session_factory.begin() as session:
        product = update_product(
            session,
            product_id,
            name=body.name,
            category=body.category,
            price=body.price,
            stock=body.stock,
        )
        return product.to_dict()


@product_router.delete("/{product_id}")
def remove_product(product_id: int, session_factory: sessionmaker[Session] = Depends(get_session_factory)):
    with session_factory.begin() as session:
        delete_product(session, product_id)
    return {"status": "ok"}
