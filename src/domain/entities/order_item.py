"""OrderItem domain entity.

A line of an order. Items have identity but no lifecycle outside the order
that owns them; they are persisted and loaded together with their order.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.errors.order_error import OrderError


@dataclass
class OrderItem:
    """Single order line.

    Attributes:
        id: Unique item identifier.
        name: Product name at the time of ordering.
        price: Unit price at the time of ordering.
        product_id: Referenced product.
        quantity: Number of units (positive).

    Example:
        >>> item = OrderItem(
        ...     id="1", name="Product 1", price=Decimal("10"),
        ...     product_id="123", quantity=2,
        ... )
        >>> item.total()
        Decimal('20')
    """

    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        """Validate order item after initialization.

        Raises:
            ValueError: If a required field is empty, quantity is not
                positive or price is negative.
        """
        if not self.id or not self.id.strip():
            raise ValueError(OrderError.ITEM_ID_REQUIRED)
        if not self.name or not self.name.strip():
            raise ValueError(OrderError.ITEM_NAME_REQUIRED)
        if not self.product_id or not self.product_id.strip():
            raise ValueError(OrderError.ITEM_PRODUCT_ID_REQUIRED)
        if self.quantity <= 0:
            raise ValueError(OrderError.ITEM_QUANTITY_INVALID)
        self.price = Decimal(self.price)
        if self.price < 0:
            raise ValueError(OrderError.ITEM_PRICE_NEGATIVE)

    def total(self) -> Decimal:
        """Line total (price x quantity)."""
        return self.price * self.quantity
