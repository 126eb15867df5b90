"""Console log event handlers for customer events.

Each handler writes one line per event through the injected logger.

Handlers:
    - FirstConsoleLogHandler: CustomerCreated (first line)
    - SecondConsoleLogHandler: CustomerCreated (second line)
    - AddressChangedConsoleLogHandler: CustomerAddressChanged

Usage:
    >>> dispatcher.register(
    ...     EventKind.CUSTOMER_CREATED, FirstConsoleLogHandler(logger=logger)
    ... )
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.customer_events import CustomerAddressChanged
from src.domain.protocols.logger_protocol import LoggerProtocol

FIRST_CREATED_MESSAGE = "This is the first console.log of event: CustomerCreated"
SECOND_CREATED_MESSAGE = "This is the second console.log of event: CustomerCreated"


class FirstConsoleLogHandler:
    """Logs the first CustomerCreated line."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: DomainEvent) -> None:
        self._logger.info(
            FIRST_CREATED_MESSAGE,
            event_kind=event.kind.value,
            event_id=str(event.event_id),
        )


class SecondConsoleLogHandler:
    """Logs the second CustomerCreated line."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: DomainEvent) -> None:
        self._logger.info(
            SECOND_CREATED_MESSAGE,
            event_kind=event.kind.value,
            event_id=str(event.event_id),
        )


class AddressChangedConsoleLogHandler:
    """Logs the new address of a customer.

    Only CustomerAddressChanged carries an address; other events are
    rejected with TypeError so a wrong registration fails loudly.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: DomainEvent) -> None:
        if not isinstance(event, CustomerAddressChanged):
            raise TypeError(
                f"{type(self).__name__} cannot handle {type(event).__name__}"
            )

        data = event.event_data
        self._logger.info(
            f"Customer address: {data['id']}, {data['name']} changed to: {data['address']}",
            event_kind=event.kind.value,
            event_id=str(event.event_id),
            customer_id=data["id"],
        )
