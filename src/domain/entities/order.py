"""Order domain entity.

An order placed by a customer. The order is an aggregate: it owns its
items, and the repository persists the order and its items as a unit.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - References the customer by id only (separate aggregate)
    - Invariant: at least one item

Usage:
    from src.domain.entities import Order, OrderItem

    item = OrderItem(id="1", name="Product 1", price=Decimal("10"),
                     product_id="123", quantity=2)
    order = Order(id="123", customer_id="123", items=[item])
    order.total()  # Decimal('20')
"""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.entities.order_item import OrderItem
from src.domain.errors.order_error import OrderError


@dataclass
class Order:
    """Order aggregate root.

    Attributes:
        id: Unique order identifier.
        customer_id: Customer who placed the order.
        items: Ordered list of owned order items (at least one).

    Note:
        ``items`` is a plain list. Appending to it directly is allowed; the
        repository reconciles whatever the list holds on update.
    """

    id: str
    customer_id: str
    items: list[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate order after initialization.

        Raises:
            ValueError: If id or customer_id is empty, there are no items,
                or two items share an id.
        """
        if not self.id or not self.id.strip():
            raise ValueError(OrderError.ID_REQUIRED)
        if not self.customer_id or not self.customer_id.strip():
            raise ValueError(OrderError.CUSTOMER_ID_REQUIRED)
        if not self.items:
            raise ValueError(OrderError.ITEMS_REQUIRED)
        item_ids = [item.id for item in self.items]
        if len(item_ids) != len(set(item_ids)):
            raise ValueError(OrderError.DUPLICATE_ITEM_ID)

    def total(self) -> Decimal:
        """Sum of all item line totals."""
        return sum((item.total() for item in self.items), Decimal("0"))

    def add_item(self, item: OrderItem) -> None:
        """Append an item to the order.

        Raises:
            ValueError: If an item with the same id is already present.
        """
        if any(existing.id == item.id for existing in self.items):
            raise ValueError(OrderError.DUPLICATE_ITEM_ID)
        self.items.append(item)

    def remove_item(self, item_id: str) -> None:
        """Remove an item by id.

        Raises:
            ValueError: If the item is not part of the order, or removing it
                would leave the order empty.
        """
        remaining = [item for item in self.items if item.id != item_id]
        if len(remaining) == len(self.items):
            raise ValueError(OrderError.ITEM_NOT_IN_ORDER)
        if not remaining:
            raise ValueError(OrderError.ITEMS_REQUIRED)
        self.items = remaining
