"""Application handler factories.

Each factory assembles a command handler from repositories bound to the
caller's session, the app-scoped event dispatcher and the logger.

Usage:
    async with get_db_session() as session:
        handler = get_create_customer_handler(session)
        result = await handler.handle(CreateCustomer(name="John"))
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.events import get_event_dispatcher
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_customer_repository,
    get_order_repository,
    get_product_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.change_customer_address_handler import (
        ChangeCustomerAddressHandler,
    )
    from src.application.commands.handlers.create_customer_handler import (
        CreateCustomerHandler,
    )
    from src.application.commands.handlers.place_order_handler import (
        PlaceOrderHandler,
    )


def get_create_customer_handler(session: AsyncSession) -> "CreateCustomerHandler":
    from src.application.commands.handlers.create_customer_handler import (
        CreateCustomerHandler,
    )

    return CreateCustomerHandler(
        customer_repo=get_customer_repository(session),
        event_dispatcher=get_event_dispatcher(),
        logger=get_logger(),
    )


def get_change_customer_address_handler(
    session: AsyncSession,
) -> "ChangeCustomerAddressHandler":
    from src.application.commands.handlers.change_customer_address_handler import (
        ChangeCustomerAddressHandler,
    )

    return ChangeCustomerAddressHandler(
        customer_repo=get_customer_repository(session),
        event_dispatcher=get_event_dispatcher(),
        logger=get_logger(),
    )


def get_place_order_handler(session: AsyncSession) -> "PlaceOrderHandler":
    from src.application.commands.handlers.place_order_handler import (
        PlaceOrderHandler,
    )

    return PlaceOrderHandler(
        customer_repo=get_customer_repository(session),
        product_repo=get_product_repository(session),
        order_repo=get_order_repository(session),
        logger=get_logger(),
    )
