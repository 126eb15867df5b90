"""Database models for persistence layer.

This package contains SQLAlchemy models that map to database tables. These
are infrastructure concerns and should not be imported by the domain layer.

Models Organization:
    - customer.py: customers (address flattened)
    - product.py: products
    - order.py: orders (items relationship)
    - order_item.py: order_items

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.customer import CustomerModel
from src.infrastructure.persistence.models.order import OrderModel
from src.infrastructure.persistence.models.order_item import OrderItemModel
from src.infrastructure.persistence.models.product import ProductModel

__all__ = [
    "CustomerModel",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
]
