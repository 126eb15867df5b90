"""Base domain event class.

This module defines the DomainEvent base class used by all domain events.
Domain events represent "things that happened" in the business domain and
are named in past tense (CustomerCreated, CustomerAddressChanged).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - Class-level ``kind`` (EventKind) used as the dispatcher routing key

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class CustomerCreated(DomainEvent):
    ...     kind: ClassVar[EventKind] = EventKind.CUSTOMER_CREATED
    ...     customer_id: str
    ...     name: str
    >>>
    >>> event = CustomerCreated(customer_id="123", name="Customer 1")
    >>> event.kind
    <EventKind.CUSTOMER_CREATED: 'customer_created'>
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar
from uuid import UUID, uuid4

from src.domain.events.event_kind import EventKind


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (CustomerCreated, NOT CreateCustomer)
        3. Be frozen dataclasses with kw_only=True
        4. Declare ``kind`` as a ClassVar

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    kind: ClassVar[EventKind]

    event_id: UUID = field(default_factory=uuid4)
    """Unique identifier for this event instance."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """Timestamp when the event occurred (UTC timezone)."""

    @property
    def event_data(self) -> dict[str, Any]:
        """Event payload (business fields only, no event metadata).

        Subclasses return a plain dict with stable keys so the payload can
        be serialized if events are ever sent outside the process.
        """
        raise NotImplementedError
