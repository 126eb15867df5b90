"""Order commands (CQRS write operations)."""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class OrderLine:
    """Requested product and quantity within a PlaceOrder command."""

    product_id: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class PlaceOrder:
    """Place an order for a customer.

    Item name and price are copied from the stored product at placement
    time.

    Attributes:
        customer_id: Customer placing the order.
        lines: Requested products (at least one).

    Example:
        >>> command = PlaceOrder(
        ...     customer_id="123",
        ...     lines=[OrderLine(product_id="p1", quantity=2)],
        ... )
        >>> result = await handler.handle(command)
    """

    customer_id: str
    lines: list[OrderLine] = field(default_factory=list)
