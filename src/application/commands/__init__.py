"""Commands (CQRS write side) and their handlers."""

from src.application.commands.customer_commands import (
    ChangeCustomerAddress,
    CreateCustomer,
)
from src.application.commands.order_commands import OrderLine, PlaceOrder

__all__ = [
    "ChangeCustomerAddress",
    "CreateCustomer",
    "OrderLine",
    "PlaceOrder",
]
