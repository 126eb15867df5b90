"""Domain events module.

Usage:
    >>> from src.domain.events import CustomerCreated, EventKind
    >>>
    >>> event = CustomerCreated(customer_id="123", name="Customer 1")
    >>> dispatcher.notify(event)  # routed by event.kind
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from src.domain.events.event_kind import EventKind

__all__ = [
    "CustomerAddressChanged",
    "CustomerCreated",
    "DomainEvent",
    "EventKind",
]
