"""Entity factories (creation with generated ids)."""

from src.domain.factories.customer_factory import CustomerFactory
from src.domain.factories.order_factory import OrderFactory
from src.domain.factories.product_factory import ProductFactory

__all__ = [
    "CustomerFactory",
    "OrderFactory",
    "ProductFactory",
]
