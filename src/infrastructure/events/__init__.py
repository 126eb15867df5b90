"""Infrastructure event implementations.

Event Dispatcher:
    - InMemoryEventDispatcher: synchronous, ordered, kind-keyed registry

Event Handlers:
    - FirstConsoleLogHandler / SecondConsoleLogHandler: CustomerCreated
    - AddressChangedConsoleLogHandler: CustomerAddressChanged
"""

from src.infrastructure.events.in_memory_event_dispatcher import (
    InMemoryEventDispatcher,
)

__all__ = ["InMemoryEventDispatcher"]
