"""Tests for catalogue administration against a real database."""

import pytest
from catalogue.product.creation import add_product
from catalogue.product.details import get_product, update_product
from catalogue.product.listing import list_products
from catalogue.product.removal import delete_product
from catalogue.product.product import Product
from ordering.placement.checkout import place_order
from shared.errors import InvalidOperationError, ObjectNotFoundError, ValidationError
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError


class TestAddProduct:
    def test_add(self, session_factory):
        with session_factory.begin() as session:
            product_id = add_product(session, name="Ghee", category="Dairy & Eggs", price=780, stock=20).product_id

        with session_factory() as session:
            product = get_product(session, product_id)
            assert (product.name, product.price_per_unit, product.stock_quantity) == ("Ghee", 780, 20)

    def test_invalid_product_is_not_stored(self, session_factory):
        with pytest.raises(ValidationError):
            with session_factory.begin() as session:
                add_product(session, name="", category="Grains", price=10, stock=1)

        with session_factory() as session:
            assert list_products(session) == []


class TestListProducts:
    def test_grouped_by_category_then_name(self, session_factory, make_product):
        make_product(name="Mustard Honey", category="Honey")
        make_product(name="Red Lentils", category="Grains")
        make_product(name="Brown Atta", category="Grains")

        with session_factory() as session:
            names = [product.name for product in list_products(session)]
        assert names == ["Brown Atta", "Red Lentils", "Mustard Honey"]


class TestUpdateProduct:
    def test_sets_stock_absolutely(self, session_factory, make_product, stock_of):
        product_id = make_product(stock=10)
        with session_factory.begin() as session:
            update_product(session, product_id, name="Red Rice", category="Grains", price=130, stock=3)
        assert stock_of(product_id) == 3

    def test_missing_product(self, session_factory):
        with session_factory.begin() as session, pytest.raises(ObjectNotFoundError):
            update_product(session, 404, name="Red Rice", category="Grains", price=130, stock=3)

    def test_past_order_keeps_its_price(self, session_factory, make_product, committer, customer):
        from ordering.order.history import get_order

        product_id = make_product(price=120)
        order_id = place_order(
            committer, items=[{"product_id": product_id, "quantity": 1, "price": 120}], **customer
        ).order_id

        with session_factory.begin() as session:
            update_product(session, product_id, name="Red Rice", category="Grains", price=200, stock=5)

        with session_factory() as session:
            assert get_order(session, order_id).lines[0].price == 120


class TestDeleteProduct:
    def test_delete_unordered(self, session_factory, make_product):
        product_id = make_product()
        with session_factory.begin() as session:
            delete_product(session, product_id)

        with session_factory() as session, pytest.raises(ObjectNotFoundError):
            get_product(session, product_id)

    def test_cannot_delete_ordered_product(self, session_factory, make_product, committer, customer):
        product_id = make_product()
        place_order(committer, items=[{"product_id": product_id, "quantity": 1, "price": 120}], **customer)

        with session_factory.begin() as session, pytest.raises(InvalidOperationError, match="has been ordered"):
            delete_product(session, product_id)


class TestStockConstraint:
    def test_stock_cannot_go_negative(self, session_factory, make_product):
        product_id = make_product(stock=1)
        with pytest.raises(IntegrityError):
            with session_factory.begin() as session:
                session.execute(
                    update(Product).where(Product.product_id == product_id).values(stock_quantity=-1)
                )
