"""Order factory.

Builds an order and its items from plain data, generating ids for both.

Usage:
    order = OrderFactory.create(
        customer_id=customer.id,
        items=[
            {"name": "Product 1", "price": Decimal("10"),
             "product_id": product.id, "quantity": 2},
        ],
    )
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any
from uuid import uuid4

from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem


class OrderFactory:
    """Builds new Order aggregates."""

    @staticmethod
    def create(customer_id: str, items: Iterable[Mapping[str, Any]]) -> Order:
        """Create an order from item mappings.

        Args:
            customer_id: Customer placing the order.
            items: Mappings with ``name``, ``price``, ``product_id`` and
                ``quantity`` keys.

        Returns:
            New Order. Validation errors from Order/OrderItem propagate.

        Raises:
            KeyError: If an item mapping lacks a required key.
        """
        order_items = [
            OrderItem(
                id=str(uuid4()),
                name=item["name"],
                price=Decimal(item["price"]),
                product_id=item["product_id"],
                quantity=item["quantity"],
            )
            for item in items
        ]
        return Order(id=str(uuid4()), customer_id=customer_id, items=order_items)
