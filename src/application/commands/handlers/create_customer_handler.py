"""CreateCustomer command handler.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, events)
- Uses Result types for expected failures
- Publishes CustomerCreated after the customer is stored
"""

from uuid import uuid4

from src.application.commands.customer_commands import CreateCustomer
from src.core.result import Failure, Result, Success
from src.domain.entities.customer import Customer
from src.domain.events.customer_events import CustomerCreated
from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class CreateCustomerHandler:
    """Handler for CreateCustomer command.

    Dependencies (injected via constructor):
        - CustomerRepository: For persistence
        - EventDispatcherProtocol: For domain events
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        event_dispatcher: EventDispatcherProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._event_dispatcher = event_dispatcher
        self._logger = logger

    async def handle(self, cmd: CreateCustomer) -> Result[str, str]:
        """Handle CreateCustomer command.

        Args:
            cmd: CreateCustomer command.

        Returns:
            Success(customer_id): Customer stored and event published.
            Failure(error): Customer data failed validation.

        Side Effects:
            - Inserts the customer row
            - Notifies CustomerCreated (synchronously, in handler order)
        """
        customer_id = cmd.customer_id or str(uuid4())

        try:
            customer = Customer(id=customer_id, name=cmd.name, address=cmd.address)
        except ValueError as e:
            self._logger.warning(
                "customer_create_rejected",
                customer_id=customer_id,
                reason=str(e),
            )
            return Failure(error=str(e))

        await self._customer_repo.create(customer)

        self._event_dispatcher.notify(
            CustomerCreated(customer_id=customer.id, name=customer.name)
        )

        self._logger.info("customer_created", customer_id=customer.id)
        return Success(value=customer.id)
