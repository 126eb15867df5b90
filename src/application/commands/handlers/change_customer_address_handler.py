"""ChangeCustomerAddress command handler.

Finds the customer, replaces the address, stores the change and publishes
CustomerAddressChanged.
"""

from src.application.commands.customer_commands import ChangeCustomerAddress
from src.core.result import Failure, Result, Success
from src.domain.events.customer_events import CustomerAddressChanged
from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class ChangeCustomerAddressHandler:
    """Handler for ChangeCustomerAddress command."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        event_dispatcher: EventDispatcherProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._event_dispatcher = event_dispatcher
        self._logger = logger

    async def handle(self, cmd: ChangeCustomerAddress) -> Result[None, str]:
        """Handle ChangeCustomerAddress command.

        Returns:
            Success(None): Address changed and event published.
            Failure(error): Customer not found (message contains the id).
        """
        match await self._customer_repo.find(cmd.customer_id):
            case Failure(error=error):
                return Failure(error=error.message)
            case Success(value=customer):
                pass

        customer.change_address(cmd.address)

        match await self._customer_repo.update(customer):
            case Failure(error=error):
                return Failure(error=error.message)

        self._event_dispatcher.notify(
            CustomerAddressChanged(
                customer_id=customer.id,
                name=customer.name,
                address=cmd.address,
            )
        )

        self._logger.info("customer_address_changed", customer_id=customer.id)
        return Success(value=None)
