"""Integration tests for ProductRepository."""

from decimal import Decimal

import pytest

from src.core.result import Failure, Success
from src.infrastructure.persistence.repositories import ProductRepository
from tests.conftest import make_product


@pytest.mark.integration
class TestProductRepository:
    async def test_create_and_find(self, test_database):
        product = make_product(product_id="123", price="100")

        async with test_database.get_session() as session:
            await ProductRepository(session).create(product)

        async with test_database.get_session() as session:
            result = await ProductRepository(session).find("123")

        assert result == Success(value=product)
        assert result.value.price == Decimal("100")

    async def test_price_keeps_cents(self, test_database):
        async with test_database.get_session() as session:
            await ProductRepository(session).create(
                make_product(product_id="123", price="19.99")
            )

        async with test_database.get_session() as session:
            result = await ProductRepository(session).find("123")

        assert result.value.price == Decimal("19.99")

    async def test_update(self, test_database):
        product = make_product(product_id="123", price="100")
        async with test_database.get_session() as session:
            await ProductRepository(session).create(product)

        product.change_name("Product 2")
        product.change_price(Decimal("200"))
        async with test_database.get_session() as session:
            assert await ProductRepository(session).update(product) == Success(value=None)

        async with test_database.get_session() as session:
            result = await ProductRepository(session).find("123")

        assert result == Success(value=product)

    async def test_update_missing_product(self, test_database):
        async with test_database.get_session() as session:
            result = await ProductRepository(session).update(make_product(product_id="9"))

        assert isinstance(result, Failure)
        assert result.error.message == "Product with id 9 not found"

    async def test_find_missing_product(self, test_database):
        async with test_database.get_session() as session:
            result = await ProductRepository(session).find("456")

        assert isinstance(result, Failure)
        assert "456" in result.error.message

    async def test_find_all(self, test_database):
        first = make_product(product_id="1", name="Product 1", price="100")
        second = make_product(product_id="2", name="Product 2", price="200")

        async with test_database.get_session() as session:
            repo = ProductRepository(session)
            await repo.create(first)
            await repo.create(second)

        async with test_database.get_session() as session:
            products = await ProductRepository(session).find_all()

        assert products == [first, second]
