"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention.
Used with Result types for railway-oriented programming.

Construction-time validation failures are raised as ValueError and have no
code; codes only tag errors that travel inside a Failure.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Resource errors
    CUSTOMER_NOT_FOUND = "customer_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    ORDER_NOT_FOUND = "order_not_found"
