"""Unit tests for customer domain events."""

from dataclasses import FrozenInstanceError
from datetime import UTC
from uuid import UUID

import pytest

from src.domain.events import (
    CustomerAddressChanged,
    CustomerCreated,
    DomainEvent,
    EventKind,
)
from tests.conftest import make_address


@pytest.mark.unit
class TestCustomerEvents:
    """Test event kinds, payloads and metadata."""

    def test_customer_created_kind_and_payload(self):
        event = CustomerCreated(customer_id="123", name="Customer 1")

        assert event.kind is EventKind.CUSTOMER_CREATED
        assert event.event_data == {"id": "123", "name": "Customer 1"}

    def test_address_changed_kind_and_payload(self):
        address = make_address()
        event = CustomerAddressChanged(customer_id="123", name="John", address=address)

        assert event.kind is EventKind.CUSTOMER_ADDRESS_CHANGED
        assert event.event_data == {
            "id": "123",
            "name": "John",
            "address": "Street 1, 1, Zipcode 1 City 1",
        }

    def test_metadata_is_generated(self):
        event = CustomerCreated(customer_id="123", name="Customer 1")

        assert isinstance(event.event_id, UUID)
        assert event.occurred_at.tzinfo is UTC

    def test_each_event_gets_a_unique_id(self):
        first = CustomerCreated(customer_id="123", name="Customer 1")
        second = CustomerCreated(customer_id="123", name="Customer 1")

        assert first.event_id != second.event_id

    def test_events_are_immutable(self):
        event = CustomerCreated(customer_id="123", name="Customer 1")

        with pytest.raises(FrozenInstanceError):
            event.name = "Other"  # type: ignore[misc]

    def test_kind_is_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            CustomerCreated(kind=EventKind.CUSTOMER_ADDRESS_CHANGED, customer_id="1", name="x")  # type: ignore[call-arg]

    def test_base_event_has_no_payload(self):
        with pytest.raises(NotImplementedError):
            DomainEvent().event_data
