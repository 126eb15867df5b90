"""In-memory event dispatcher implementation.

This module implements EventDispatcherProtocol using an in-memory
dictionary-based registry keyed by EventKind.

Architecture:
    - Implements EventDispatcherProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (EventKind -> ordered handler list)
    - Synchronous, ordered fan-out on the caller's thread
    - No error isolation: a failing handler aborts the rest of the dispatch

Usage:
    >>> dispatcher = InMemoryEventDispatcher(logger=get_logger())
    >>> dispatcher.register(EventKind.CUSTOMER_CREATED, first_handler)
    >>> dispatcher.register(EventKind.CUSTOMER_CREATED, second_handler)
    >>> dispatcher.notify(CustomerCreated(customer_id="123", name="Customer 1"))
    >>> # first_handler.handle(...) then second_handler.handle(...)
"""

from collections import defaultdict
from collections.abc import Mapping, Sequence

from src.domain.events.base_event import DomainEvent
from src.domain.events.event_kind import EventKind
from src.domain.protocols.event_dispatcher_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventDispatcher:
    """In-memory synchronous event dispatcher.

    Each instance owns its registrations; nothing is shared between
    instances or persisted.

    Thread Safety:
        - NOT thread-safe (single-threaded, synchronous design)

    Attributes:
        _handlers: EventKind -> handlers in registration order.
        _logger: Logger for dispatch tracing.

    Example:
        >>> dispatcher = InMemoryEventDispatcher(logger=logger)
        >>> dispatcher.register(EventKind.CUSTOMER_ADDRESS_CHANGED, handler)
        >>> dispatcher.notify(event)
        >>> dispatcher.unregister_all()
        >>> dispatcher.notify(event)  # no-op
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize dispatcher with logger.

        Args:
            logger: Logger used for debug-level dispatch tracing.
        """
        self._handlers: dict[EventKind, list[EventHandler]] = defaultdict(list)
        self._logger = logger

    @property
    def event_handlers(self) -> Mapping[EventKind, Sequence[EventHandler]]:
        """Snapshot of registrations.

        Returns copies, so callers cannot mutate the registry through it.
        Kinds whose handlers were all unregistered are omitted.
        """
        return {kind: list(handlers) for kind, handlers in self._handlers.items() if handlers}

    def register(self, kind: EventKind, handler: EventHandler) -> None:
        """Register handler for kind.

        The handler is appended after any existing ones. No duplicate
        detection: registering the same handler twice calls it twice.

        Args:
            kind: Event kind to handle.
            handler: Object with a ``handle(event)`` method.
        """
        self._handlers[kind].append(handler)

    def unregister(self, kind: EventKind, handler: EventHandler) -> None:
        """Remove the first registration of handler for kind.

        Matching is by identity, so two equal-but-distinct handler objects
        are never confused. Unknown kinds or handlers are a no-op.

        Args:
            kind: Event kind the handler was registered for.
            handler: The registered handler instance.
        """
        handlers = self._handlers.get(kind)
        if not handlers:
            return

        for idx, registered in enumerate(handlers):
            if registered is handler:
                del handlers[idx]
                return

    def unregister_all(self) -> None:
        """Remove every registration for every kind."""
        self._handlers.clear()

    def notify(self, event: DomainEvent) -> None:
        """Dispatch event to every handler registered for event.kind.

        Flow:
            1. Look up handlers for event.kind
            2. If none, return immediately (no-op)
            3. Call each handler.handle(event) in registration order

        Args:
            event: Domain event to dispatch.

        Raises:
            Exception: Whatever a handler raises. Remaining handlers are
                not called.
        """
        handlers = self._handlers.get(event.kind)

        if not handlers:
            return

        self._logger.debug(
            "event_dispatching",
            event_kind=event.kind.value,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        # Iterate over a copy so a handler may (un)register during dispatch
        for handler in list(handlers):
            handler.handle(event)
