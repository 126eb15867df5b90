"""Repository implementations (SQLAlchemy adapters for domain protocols)."""

from src.infrastructure.persistence.repositories.customer_repository import (
    CustomerRepository,
)
from src.infrastructure.persistence.repositories.order_repository import (
    OrderRepository,
)
from src.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)

__all__ = [
    "CustomerRepository",
    "OrderRepository",
    "ProductRepository",
]
