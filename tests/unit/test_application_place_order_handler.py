"""Unit tests for PlaceOrderHandler."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.application.commands import OrderLine, PlaceOrder
from src.application.commands.handlers.place_order_handler import PlaceOrderHandler
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.errors import OrderError
from src.domain.protocols import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)
from tests.conftest import make_customer, make_product


def create_handler(mock_logger):
    customer_repo = AsyncMock(spec=CustomerRepository)
    product_repo = AsyncMock(spec=ProductRepository)
    order_repo = AsyncMock(spec=OrderRepository)
    handler = PlaceOrderHandler(
        customer_repo=customer_repo,
        product_repo=product_repo,
        order_repo=order_repo,
        logger=mock_logger,
    )
    return handler, customer_repo, product_repo, order_repo


@pytest.mark.unit
class TestPlaceOrderHandler:
    async def test_places_order_and_awards_points(self, mock_logger):
        # Arrange
        handler, customer_repo, product_repo, order_repo = create_handler(mock_logger)
        customer = make_customer(customer_id="c1")
        customer_repo.find.return_value = Success(value=customer)
        customer_repo.update.return_value = Success(value=None)
        product_repo.find.return_value = Success(
            value=make_product(product_id="p1", price="10")
        )

        # Act
        result = await handler.handle(
            PlaceOrder(customer_id="c1", lines=[OrderLine(product_id="p1", quantity=3)])
        )

        # Assert
        assert isinstance(result, Success)
        order = order_repo.create.call_args[0][0]
        assert order.id == result.value
        assert order.customer_id == "c1"
        assert order.total() == Decimal("30")
        assert order.items[0].name == "Product 1"
        assert order.items[0].product_id == "p1"

        updated_customer = customer_repo.update.call_args[0][0]
        assert updated_customer.reward_points == 15

    async def test_missing_customer(self, mock_logger):
        handler, customer_repo, _, order_repo = create_handler(mock_logger)
        customer_repo.find.return_value = Failure(
            error=NotFoundError.for_resource(
                code=ErrorCode.CUSTOMER_NOT_FOUND,
                resource_type="Customer",
                resource_id="c9",
            )
        )

        result = await handler.handle(
            PlaceOrder(customer_id="c9", lines=[OrderLine(product_id="p1", quantity=1)])
        )

        assert result == Failure(error="Customer with id c9 not found")
        order_repo.create.assert_not_awaited()

    async def test_missing_product(self, mock_logger):
        handler, customer_repo, product_repo, order_repo = create_handler(mock_logger)
        customer_repo.find.return_value = Success(value=make_customer())
        product_repo.find.return_value = Failure(
            error=NotFoundError.for_resource(
                code=ErrorCode.PRODUCT_NOT_FOUND,
                resource_type="Product",
                resource_id="p9",
            )
        )

        result = await handler.handle(
            PlaceOrder(customer_id="123", lines=[OrderLine(product_id="p9", quantity=1)])
        )

        assert result == Failure(error="Product with id p9 not found")
        order_repo.create.assert_not_awaited()

    async def test_no_lines(self, mock_logger):
        handler, customer_repo, _, order_repo = create_handler(mock_logger)
        customer = make_customer()
        customer_repo.find.return_value = Success(value=customer)

        result = await handler.handle(PlaceOrder(customer_id="123"))

        assert result == Failure(error=OrderError.ITEMS_REQUIRED)
        order_repo.create.assert_not_awaited()
        customer_repo.update.assert_not_awaited()
        assert customer.reward_points == 0

    async def test_invalid_quantity(self, mock_logger):
        handler, customer_repo, product_repo, order_repo = create_handler(mock_logger)
        customer_repo.find.return_value = Success(value=make_customer())
        product_repo.find.return_value = Success(value=make_product())

        result = await handler.handle(
            PlaceOrder(customer_id="123", lines=[OrderLine(product_id="123", quantity=0)])
        )

        assert result == Failure(error=OrderError.ITEM_QUANTITY_INVALID)
        order_repo.create.assert_not_awaited()
