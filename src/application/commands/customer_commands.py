"""Customer commands (CQRS write operations).

Commands represent intent to change customer state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass

from src.domain.value_objects.address import Address


@dataclass(frozen=True, kw_only=True)
class CreateCustomer:
    """Register a new customer.

    Attributes:
        name: Customer display name.
        customer_id: Explicit id; a UUID4 string is generated when omitted.
        address: Optional initial address.

    Example:
        >>> result = await handler.handle(CreateCustomer(name="Customer 1"))
    """

    name: str
    customer_id: str | None = None
    address: Address | None = None


@dataclass(frozen=True, kw_only=True)
class ChangeCustomerAddress:
    """Move an existing customer to a new address.

    Attributes:
        customer_id: Customer to update.
        address: New address.
    """

    customer_id: str
    address: Address
