"""Domain errors package.

Exports all domain-level error constant classes for convenient importing.

Usage:
    from src.domain.errors import CustomerError, OrderError, ProductError
"""

from src.domain.errors.customer_error import CustomerError
from src.domain.errors.order_error import OrderError
from src.domain.errors.product_error import ProductError

__all__ = [
    "CustomerError",
    "OrderError",
    "ProductError",
]
