"""Customer repository protocol.

Defines the interface for customer persistence operations.
"""

from typing import Protocol

from src.core.errors import NotFoundError
from src.core.result import Result
from src.domain.entities.customer import Customer


class CustomerRepository(Protocol):
    """Protocol for customer persistence operations.

    **Design Principles**:
    - Read methods return domain entities (Customer), not database models
    - Missing records are returned as Failure(NotFoundError), not raised
    - Writes flush; the session owner commits
    """

    async def create(self, customer: Customer) -> None:
        """Insert a new customer."""
        ...

    async def update(self, customer: Customer) -> Result[None, NotFoundError]:
        """Overwrite all stored fields of an existing customer.

        Returns:
            Success(None) when updated, Failure(NotFoundError) if the
            customer does not exist.
        """
        ...

    async def find(self, customer_id: str) -> Result[Customer, NotFoundError]:
        """Load a customer by id.

        Returns:
            Success(Customer) or Failure(NotFoundError) whose message
            contains customer_id.
        """
        ...

    async def find_all(self) -> list[Customer]:
        """Load every customer."""
        ...
