"""PlaceOrder command handler.

Builds an order from stored products, credits the customer's reward points
and stores both the order and the customer in the caller's transaction.
"""

from uuid import uuid4

from src.application.commands.order_commands import PlaceOrder
from src.core.result import Failure, Result, Success
from src.domain.entities.order_item import OrderItem
from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.order_repository import OrderRepository
from src.domain.protocols.product_repository import ProductRepository
from src.domain.services.order_service import OrderService


class PlaceOrderHandler:
    """Handler for PlaceOrder command.

    Dependencies (injected via constructor):
        - CustomerRepository: Load and update the ordering customer
        - ProductRepository: Resolve item name and price
        - OrderRepository: Persist the new order
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._logger = logger

    async def handle(self, cmd: PlaceOrder) -> Result[str, str]:
        """Handle PlaceOrder command.

        Args:
            cmd: PlaceOrder command with customer id and order lines.

        Returns:
            Success(order_id): Order stored, reward points credited.
            Failure(error): Customer or product not found, or the lines are
                invalid (empty, non-positive quantity).
        """
        match await self._customer_repo.find(cmd.customer_id):
            case Failure(error=error):
                return Failure(error=error.message)
            case Success(value=customer):
                pass

        items: list[OrderItem] = []
        for line in cmd.lines:
            match await self._product_repo.find(line.product_id):
                case Failure(error=error):
                    return Failure(error=error.message)
                case Success(value=product):
                    pass

            try:
                items.append(
                    OrderItem(
                        id=str(uuid4()),
                        name=product.name,
                        price=product.price,
                        product_id=product.id,
                        quantity=line.quantity,
                    )
                )
            except ValueError as e:
                return Failure(error=str(e))

        try:
            order = OrderService.place_order(customer, items)
        except ValueError as e:
            return Failure(error=str(e))

        await self._order_repo.create(order)
        await self._customer_repo.update(customer)

        self._logger.info(
            "order_placed",
            order_id=order.id,
            customer_id=customer.id,
            total=str(order.total()),
            reward_points=customer.reward_points,
        )
        return Success(value=order.id)
