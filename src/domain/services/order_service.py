"""Order domain service.

Operations on orders that involve more than one aggregate (the order and
the customer who places it) or more than one order.
"""

from collections.abc import Iterable
from decimal import ROUND_DOWN, Decimal
from uuid import uuid4

from src.domain.entities.customer import Customer
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.domain.errors.order_error import OrderError

REWARD_POINTS_RATE = Decimal("0.5")
"""Reward points earned per currency unit spent."""


class OrderService:
    """Stateless order operations."""

    @staticmethod
    def total(orders: Iterable[Order]) -> Decimal:
        """Sum of the totals of the given orders."""
        return sum((order.total() for order in orders), Decimal("0"))

    @staticmethod
    def place_order(customer: Customer, items: list[OrderItem]) -> Order:
        """Create an order for a customer and credit reward points.

        The customer earns half of the order total as reward points,
        rounded down to a whole point.

        Args:
            customer: Customer placing the order (mutated: reward points).
            items: Order lines (at least one).

        Returns:
            New Order with a generated id.

        Raises:
            ValueError: If items is empty.

        Example:
            >>> order = OrderService.place_order(customer, [item])  # total 20
            >>> customer.reward_points
            10
        """
        if not items:
            raise ValueError(OrderError.ITEMS_REQUIRED)

        order = Order(id=str(uuid4()), customer_id=customer.id, items=list(items))
        points = (order.total() * REWARD_POINTS_RATE).to_integral_value(
            rounding=ROUND_DOWN
        )
        customer.add_reward_points(int(points))
        return order
