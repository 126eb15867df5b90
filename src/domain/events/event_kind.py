"""Closed set of domain event kinds.

The dispatcher routes events by kind. Each concrete DomainEvent subclass
declares exactly one kind as a class attribute, so adding an event means
adding a member here first.
"""

from enum import Enum


class EventKind(str, Enum):
    """Domain event kinds used as dispatcher registration keys."""

    CUSTOMER_CREATED = "customer_created"
    CUSTOMER_ADDRESS_CHANGED = "customer_address_changed"
