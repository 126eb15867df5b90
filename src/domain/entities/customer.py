"""Customer domain entity.

A customer who places orders. Customers own their address exclusively and
accumulate reward points from placed orders.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Construction and mutation are side-effect free
    - Domain events (CustomerCreated, CustomerAddressChanged) are published
      by the application layer after the change is persisted

Usage:
    from src.domain.entities import Customer
    from src.domain.value_objects import Address

    customer = Customer(id="123", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    customer.activate()
"""

from dataclasses import dataclass

from src.domain.errors.customer_error import CustomerError
from src.domain.value_objects.address import Address


@dataclass
class Customer:
    """Customer aggregate root.

    Attributes:
        id: Unique customer identifier.
        name: Display name.
        address: Postal address, None until assigned.
        active: Whether the customer is active. Requires an address.
        reward_points: Points earned from placed orders.

    Example:
        >>> customer = Customer(id="123", name="Customer 1")
        >>> customer.is_active()
        False
        >>> customer.add_reward_points(10)
        >>> customer.reward_points
        10
    """

    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self) -> None:
        """Validate customer after initialization.

        Raises:
            ValueError: If id or name is empty, an active customer has no
                address, or reward points are negative.
        """
        if not self.id or not self.id.strip():
            raise ValueError(CustomerError.ID_REQUIRED)
        if not self.name or not self.name.strip():
            raise ValueError(CustomerError.NAME_REQUIRED)
        if self.active and self.address is None:
            raise ValueError(CustomerError.ADDRESS_REQUIRED_TO_ACTIVATE)
        if self.reward_points < 0:
            raise ValueError(CustomerError.INVALID_REWARD_POINTS)

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_active(self) -> bool:
        """Check whether the customer is active."""
        return self.active

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def change_name(self, name: str) -> None:
        """Rename the customer.

        Args:
            name: New display name.

        Raises:
            ValueError: If name is empty.
        """
        if not name or not name.strip():
            raise ValueError(CustomerError.NAME_REQUIRED)
        self.name = name

    def change_address(self, address: Address) -> None:
        """Replace the customer's address.

        The caller is responsible for publishing CustomerAddressChanged
        once the change is stored.

        Args:
            address: New address value.
        """
        self.address = address

    def activate(self) -> None:
        """Activate the customer.

        Raises:
            ValueError: If the customer has no address.
        """
        if self.address is None:
            raise ValueError(CustomerError.ADDRESS_REQUIRED_TO_ACTIVATE)
        self.active = True

    def deactivate(self) -> None:
        """Deactivate the customer."""
        self.active = False

    def add_reward_points(self, points: int) -> None:
        """Credit reward points.

        Args:
            points: Points to add (non-negative).

        Raises:
            ValueError: If points is negative.
        """
        if points < 0:
            raise ValueError(CustomerError.INVALID_REWARD_POINTS)
        self.reward_points += points
