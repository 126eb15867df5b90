"""Customer domain events.

Published by the application layer after a customer change is stored:

    - CustomerCreated: a new customer was persisted
    - CustomerAddressChanged: a customer's address was replaced

Payload shapes (``event_data``):

    CustomerCreated          {"id", "name"}
    CustomerAddressChanged   {"id", "name", "address"}  (address rendered)
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from src.domain.events.base_event import DomainEvent
from src.domain.events.event_kind import EventKind
from src.domain.value_objects.address import Address


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerCreated(DomainEvent):
    """A customer was created.

    Attributes:
        customer_id: New customer's id.
        name: Customer name at creation.
    """

    kind: ClassVar[EventKind] = EventKind.CUSTOMER_CREATED

    customer_id: str
    name: str

    @property
    def event_data(self) -> dict[str, Any]:
        return {"id": self.customer_id, "name": self.name}


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerAddressChanged(DomainEvent):
    """A customer's address was changed.

    Attributes:
        customer_id: Customer whose address changed.
        name: Customer name at the time of the change.
        address: The new address.
    """

    kind: ClassVar[EventKind] = EventKind.CUSTOMER_ADDRESS_CHANGED

    customer_id: str
    name: str
    address: Address

    @property
    def event_data(self) -> dict[str, Any]:
        return {
            "id": self.customer_id,
            "name": self.name,
            "address": str(self.address),
        }
