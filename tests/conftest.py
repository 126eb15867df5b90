"""Pytest configuration for async testing.

This configuration ensures:
1. Async tests are always marked for pytest-asyncio
2. Each integration test gets a fresh in-memory database
3. Shared helpers build valid domain objects with minimal noise
"""

import inspect
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from src.domain.entities.customer import Customer
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.domain.entities.product import Product
from src.domain.value_objects.address import Address

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Domain helpers
# =============================================================================


def make_address(number: int = 1) -> Address:
    """Build a valid address."""
    return Address("Street 1", number, "Zipcode 1", "City 1")


def make_customer(customer_id: str = "123", name: str = "Customer 1", **kwargs) -> Customer:
    """Build a valid customer (no address, inactive by default)."""
    return Customer(id=customer_id, name=name, **kwargs)


def make_product(
    product_id: str = "123", name: str = "Product 1", price: str = "10"
) -> Product:
    """Build a valid product."""
    return Product(id=product_id, name=name, price=Decimal(price))


def make_item(
    item_id: str = "1",
    product_id: str = "123",
    price: str = "10",
    quantity: int = 2,
    name: str = "Product 1",
) -> OrderItem:
    """Build a valid order item."""
    return OrderItem(
        id=item_id,
        name=name,
        price=Decimal(price),
        product_id=product_id,
        quantity=quantity,
    )


def make_order(
    order_id: str = "123",
    customer_id: str = "123",
    items: list[OrderItem] | None = None,
) -> Order:
    """Build a valid order (one item by default)."""
    return Order(id=order_id, customer_id=customer_id, items=items or [make_item()])


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """LoggerProtocol stand-in that records calls."""
    return MagicMock()


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database with the schema created.

    Returns the Database object (not a session), so tests can open
    separate sessions to verify what was actually committed.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                # write
            async with test_database.get_session() as session:
                # read back
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.close()
