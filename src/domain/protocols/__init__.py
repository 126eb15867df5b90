"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import OrderRepository, EventDispatcherProtocol
"""

from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
    EventHandler,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.order_repository import OrderRepository
from src.domain.protocols.product_repository import ProductRepository

__all__ = [
    "CustomerRepository",
    "EventDispatcherProtocol",
    "EventHandler",
    "LoggerProtocol",
    "OrderRepository",
    "ProductRepository",
]
