"""Domain services (stateless operations across entities)."""

from src.domain.services.order_service import OrderService
from src.domain.services.product_service import ProductService

__all__ = [
    "OrderService",
    "ProductService",
]
