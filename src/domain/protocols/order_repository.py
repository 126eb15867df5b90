"""Order repository protocol.

Defines the interface for order aggregate persistence. An order is stored
together with its items; implementations must keep both consistent.
"""

from typing import Protocol

from src.core.errors import NotFoundError
from src.core.result import Result
from src.domain.entities.order import Order


class OrderRepository(Protocol):
    """Protocol for order persistence operations.

    **Design Principles**:
    - The order and its items are written and read as one aggregate
    - update() reconciles items by id: upsert present items, delete
      stored items missing from the aggregate (never truncate-and-reinsert)
    - Missing orders are returned as Failure(NotFoundError)
    """

    async def create(self, order: Order) -> None:
        """Insert the order row and all of its items."""
        ...

    async def update(self, order: Order) -> Result[None, NotFoundError]:
        """Persist scalar fields and reconcile the item collection.

        Returns:
            Success(None) when updated, Failure(NotFoundError) if the order
            does not exist.
        """
        ...

    async def find(self, order_id: str) -> Result[Order, NotFoundError]:
        """Load an order with its items.

        Returns:
            Success(Order) or Failure(NotFoundError) with message
            "Order with id <order_id> not found".
        """
        ...

    async def find_all(self) -> list[Order]:
        """Load every order with items (no ordering guarantee)."""
        ...
