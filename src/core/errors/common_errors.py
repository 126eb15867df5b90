"""Common error classes used across all aggregates.

Error Types:
- NotFoundError: Resource not found

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError.for_resource(
        code=ErrorCode.ORDER_NOT_FOUND,
        resource_type="Order",
        resource_id=order_id,
    ))
"""

from dataclasses import dataclass
from typing import Self

from src.core.enums import ErrorCode
from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message (always contains resource_id).
        resource_type: Type of resource (Customer, Product, Order).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str

    @classmethod
    def for_resource(
        cls, *, code: ErrorCode, resource_type: str, resource_id: str
    ) -> Self:
        """Build the standard "<Type> with id <id> not found" error.

        Args:
            code: Resource-specific not-found code.
            resource_type: Entity name used in the message.
            resource_id: Identifier that was looked up.

        Returns:
            NotFoundError with a message naming the missing id.

        Example:
            >>> err = NotFoundError.for_resource(
            ...     code=ErrorCode.ORDER_NOT_FOUND,
            ...     resource_type="Order",
            ...     resource_id="456",
            ... )
            >>> err.message
            'Order with id 456 not found'
        """
        return cls(
            code=code,
            message=f"{resource_type} with id {resource_id} not found",
            resource_type=resource_type,
            resource_id=resource_id,
        )
