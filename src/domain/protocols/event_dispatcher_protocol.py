"""Event dispatcher protocol (port) for domain events.

This module defines the EventHandler and EventDispatcherProtocol interfaces.
The domain defines the ports; infrastructure provides the adapter
(InMemoryEventDispatcher).

Architecture:
    - Protocols (structural typing, NOT ABC inheritance)
    - Handlers are keyed by EventKind, not by event class name
    - Dispatch is synchronous and ordered

Usage:
    >>> from src.core.container import get_event_dispatcher
    >>> from src.domain.events import CustomerCreated, EventKind
    >>>
    >>> dispatcher = get_event_dispatcher()
    >>> dispatcher.register(EventKind.CUSTOMER_CREATED, handler)
    >>> dispatcher.notify(CustomerCreated(customer_id="123", name="Customer 1"))
"""

from collections.abc import Mapping, Sequence
from typing import Protocol

from src.domain.events.base_event import DomainEvent
from src.domain.events.event_kind import EventKind


class EventHandler(Protocol):
    """Single-method event handler.

    Handlers are plain objects; the dispatcher calls ``handle`` once per
    notified event, on the caller's thread. Exceptions raised by ``handle``
    propagate to whoever called ``notify``.
    """

    def handle(self, event: DomainEvent) -> None:
        """React to a dispatched event."""
        ...


class EventDispatcherProtocol(Protocol):
    """Protocol for event dispatcher implementations.

    Contract:
        1. **Ordered**: handlers run in registration order.
        2. **Synchronous**: notify() returns after the last handler returns.
        3. **No isolation**: a handler exception aborts the remaining
           handlers and propagates out of notify().
        4. **No de-duplication**: registering a handler twice calls it twice.
    """

    @property
    def event_handlers(self) -> Mapping[EventKind, Sequence[EventHandler]]:
        """Snapshot of current registrations (kind -> handlers in order)."""
        ...

    def register(self, kind: EventKind, handler: EventHandler) -> None:
        """Append handler to the list for kind."""
        ...

    def unregister(self, kind: EventKind, handler: EventHandler) -> None:
        """Remove the first registration of handler for kind (no-op if absent)."""
        ...

    def unregister_all(self) -> None:
        """Remove every registration."""
        ...

    def notify(self, event: DomainEvent) -> None:
        """Invoke every handler registered for event.kind, in order."""
        ...
