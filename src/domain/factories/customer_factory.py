"""Customer factory.

Creates customers with generated identifiers.
"""

from uuid import uuid4

from src.domain.entities.customer import Customer
from src.domain.value_objects.address import Address


class CustomerFactory:
    """Builds new Customer entities."""

    @staticmethod
    def create(name: str) -> Customer:
        """Create a customer without an address."""
        return Customer(id=str(uuid4()), name=name)

    @staticmethod
    def create_with_address(name: str, address: Address) -> Customer:
        """Create a customer that already has an address."""
        return Customer(id=str(uuid4()), name=name, address=address)
