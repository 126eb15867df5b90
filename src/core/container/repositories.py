"""Repository dependency factories.

Unit-of-work scoped repository instances. Repositories built from the same
session share its transaction.

Usage:
    async with get_db_session() as session:
        customer_repo = get_customer_repository(session)
        order_repo = get_order_repository(session)
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        CustomerRepository,
        OrderRepository,
        ProductRepository,
    )


def get_customer_repository(session: AsyncSession) -> "CustomerRepository":
    """Get customer repository bound to session."""
    from src.infrastructure.persistence.repositories import CustomerRepository

    return CustomerRepository(session=session)


def get_product_repository(session: AsyncSession) -> "ProductRepository":
    """Get product repository bound to session."""
    from src.infrastructure.persistence.repositories import ProductRepository

    return ProductRepository(session=session)


def get_order_repository(session: AsyncSession) -> "OrderRepository":
    """Get order repository bound to session."""
    from src.infrastructure.persistence.repositories import OrderRepository

    return OrderRepository(session=session)
