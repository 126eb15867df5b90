"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.customer import Customer
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.domain.entities.product import Product

__all__ = [
    "Customer",
    "Order",
    "OrderItem",
    "Product",
]
