"""Unit tests for CreateCustomerHandler and ChangeCustomerAddressHandler.

Uses mocked repository and dispatcher for isolation.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.commands import ChangeCustomerAddress, CreateCustomer
from src.application.commands.handlers.change_customer_address_handler import (
    ChangeCustomerAddressHandler,
)
from src.application.commands.handlers.create_customer_handler import (
    CreateCustomerHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.errors import CustomerError
from src.domain.events import CustomerAddressChanged, CustomerCreated
from src.domain.protocols import CustomerRepository, EventDispatcherProtocol
from tests.conftest import make_address, make_customer


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def customer_repo():
    return AsyncMock(spec=CustomerRepository)


@pytest.fixture
def dispatcher():
    return MagicMock(spec=EventDispatcherProtocol)


def not_found(customer_id: str) -> Failure:
    return Failure(
        error=NotFoundError.for_resource(
            code=ErrorCode.CUSTOMER_NOT_FOUND,
            resource_type="Customer",
            resource_id=customer_id,
        )
    )


# =============================================================================
# CreateCustomer
# =============================================================================


@pytest.mark.unit
class TestCreateCustomerHandler:
    async def test_creates_customer_and_notifies(
        self, customer_repo, dispatcher, mock_logger
    ):
        # Arrange
        handler = CreateCustomerHandler(customer_repo, dispatcher, mock_logger)

        # Act
        result = await handler.handle(CreateCustomer(name="John", customer_id="123"))

        # Assert
        assert result == Success(value="123")
        customer_repo.create.assert_awaited_once()
        stored = customer_repo.create.call_args[0][0]
        assert stored.id == "123"
        assert stored.name == "John"

        dispatcher.notify.assert_called_once()
        event = dispatcher.notify.call_args[0][0]
        assert isinstance(event, CustomerCreated)
        assert event.event_data == {"id": "123", "name": "John"}

    async def test_generates_id_when_missing(self, customer_repo, dispatcher, mock_logger):
        handler = CreateCustomerHandler(customer_repo, dispatcher, mock_logger)

        result = await handler.handle(CreateCustomer(name="John"))

        assert isinstance(result, Success)
        assert result.value == customer_repo.create.call_args[0][0].id

    async def test_invalid_name_fails_without_side_effects(
        self, customer_repo, dispatcher, mock_logger
    ):
        handler = CreateCustomerHandler(customer_repo, dispatcher, mock_logger)

        result = await handler.handle(CreateCustomer(name=""))

        assert result == Failure(error=CustomerError.NAME_REQUIRED)
        customer_repo.create.assert_not_awaited()
        dispatcher.notify.assert_not_called()

    async def test_persistence_error_propagates_and_skips_event(
        self, customer_repo, dispatcher, mock_logger
    ):
        customer_repo.create.side_effect = RuntimeError("database down")
        handler = CreateCustomerHandler(customer_repo, dispatcher, mock_logger)

        with pytest.raises(RuntimeError, match="database down"):
            await handler.handle(CreateCustomer(name="John"))
        dispatcher.notify.assert_not_called()


# =============================================================================
# ChangeCustomerAddress
# =============================================================================


@pytest.mark.unit
class TestChangeCustomerAddressHandler:
    async def test_changes_address_and_notifies(
        self, customer_repo, dispatcher, mock_logger
    ):
        # Arrange
        customer = make_customer(customer_id="123", name="John")
        address = make_address()
        customer_repo.find.return_value = Success(value=customer)
        customer_repo.update.return_value = Success(value=None)
        handler = ChangeCustomerAddressHandler(customer_repo, dispatcher, mock_logger)

        # Act
        result = await handler.handle(
            ChangeCustomerAddress(customer_id="123", address=address)
        )

        # Assert
        assert result == Success(value=None)
        customer_repo.find.assert_awaited_once_with("123")
        updated = customer_repo.update.call_args[0][0]
        assert updated.address == address

        event = dispatcher.notify.call_args[0][0]
        assert isinstance(event, CustomerAddressChanged)
        assert event.event_data == {
            "id": "123",
            "name": "John",
            "address": "Street 1, 1, Zipcode 1 City 1",
        }

    async def test_missing_customer_fails_with_id_in_message(
        self, customer_repo, dispatcher, mock_logger
    ):
        customer_repo.find.return_value = not_found("999")
        handler = ChangeCustomerAddressHandler(customer_repo, dispatcher, mock_logger)

        result = await handler.handle(
            ChangeCustomerAddress(customer_id="999", address=make_address())
        )

        assert isinstance(result, Failure)
        assert "999" in result.error
        customer_repo.update.assert_not_awaited()
        dispatcher.notify.assert_not_called()

    async def test_handler_exception_propagates_after_update(
        self, customer_repo, dispatcher, mock_logger
    ):
        customer_repo.find.return_value = Success(value=make_customer())
        customer_repo.update.return_value = Success(value=None)
        dispatcher.notify.side_effect = RuntimeError("handler failed")
        handler = ChangeCustomerAddressHandler(customer_repo, dispatcher, mock_logger)

        with pytest.raises(RuntimeError, match="handler failed"):
            await handler.handle(
                ChangeCustomerAddress(customer_id="123", address=make_address())
            )
        customer_repo.update.assert_awaited_once()
