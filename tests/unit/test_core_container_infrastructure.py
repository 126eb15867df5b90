"""Unit tests for infrastructure, repository and handler factories."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.commands.handlers.change_customer_address_handler import (
    ChangeCustomerAddressHandler,
)
from src.application.commands.handlers.create_customer_handler import (
    CreateCustomerHandler,
)
from src.application.commands.handlers.place_order_handler import PlaceOrderHandler
from src.core.container import (
    get_change_customer_address_handler,
    get_create_customer_handler,
    get_customer_repository,
    get_database,
    get_db_session,
    get_logger,
    get_order_repository,
    get_place_order_handler,
    get_product_repository,
)
from src.infrastructure.logging import ConsoleAdapter
from src.infrastructure.persistence import Database
from src.infrastructure.persistence.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)


@pytest.mark.unit
class TestInfrastructureFactories:
    def test_get_database_is_cached(self):
        get_database.cache_clear()

        db = get_database()

        assert isinstance(db, Database)
        assert get_database() is db

    def test_get_logger_returns_console_adapter(self):
        get_logger.cache_clear()

        assert isinstance(get_logger(), ConsoleAdapter)
        assert get_logger() is get_logger()

    async def test_get_db_session_yields_session(self):
        async with get_db_session() as session:
            assert isinstance(session, AsyncSession)


@pytest.mark.unit
class TestRepositoryFactories:
    def test_repositories_share_session(self):
        session = MagicMock(spec=AsyncSession)

        customer_repo = get_customer_repository(session)
        product_repo = get_product_repository(session)
        order_repo = get_order_repository(session)

        assert isinstance(customer_repo, CustomerRepository)
        assert isinstance(product_repo, ProductRepository)
        assert isinstance(order_repo, OrderRepository)
        assert customer_repo._session is session
        assert order_repo._session is session


@pytest.mark.unit
class TestHandlerFactories:
    def test_handlers_are_built(self):
        session = MagicMock(spec=AsyncSession)

        assert isinstance(get_create_customer_handler(session), CreateCustomerHandler)
        assert isinstance(
            get_change_customer_address_handler(session), ChangeCustomerAddressHandler
        )
        assert isinstance(get_place_order_handler(session), PlaceOrderHandler)
