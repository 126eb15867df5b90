"""Event dispatcher dependency factories.

Wires the console log handlers to their event kinds. ``build_event_dispatcher``
returns a fresh, fully wired dispatcher for callers that own its lifetime
(tests, scripts); ``get_event_dispatcher`` is the app-scoped instance used by
the handler factories.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


def build_event_dispatcher(logger: "LoggerProtocol") -> "EventDispatcherProtocol":
    """Create a dispatcher with the standard subscriptions.

    Subscriptions:
        CUSTOMER_CREATED -> FirstConsoleLogHandler, SecondConsoleLogHandler
        CUSTOMER_ADDRESS_CHANGED -> AddressChangedConsoleLogHandler

    Args:
        logger: Logger shared by the dispatcher and its handlers.

    Returns:
        Wired dispatcher implementing EventDispatcherProtocol.
    """
    from src.domain.events.event_kind import EventKind
    from src.infrastructure.events.handlers.console_log_handlers import (
        AddressChangedConsoleLogHandler,
        FirstConsoleLogHandler,
        SecondConsoleLogHandler,
    )
    from src.infrastructure.events.in_memory_event_dispatcher import (
        InMemoryEventDispatcher,
    )

    dispatcher = InMemoryEventDispatcher(logger=logger)

    # Registration order is notification order
    dispatcher.register(EventKind.CUSTOMER_CREATED, FirstConsoleLogHandler(logger))
    dispatcher.register(EventKind.CUSTOMER_CREATED, SecondConsoleLogHandler(logger))
    dispatcher.register(
        EventKind.CUSTOMER_ADDRESS_CHANGED,
        AddressChangedConsoleLogHandler(logger),
    )

    return dispatcher


@lru_cache()
def get_event_dispatcher() -> "EventDispatcherProtocol":
    """Get event dispatcher singleton (app-scoped).

    Returns:
        Dispatcher implementing EventDispatcherProtocol.

    Usage:
        dispatcher = get_event_dispatcher()
        dispatcher.notify(CustomerCreated(customer_id="1", name="John"))
    """
    from src.core.container.infrastructure import get_logger

    return build_event_dispatcher(get_logger())
