"""OrderRepository - SQLAlchemy implementation of OrderRepository protocol.

Persists the Order aggregate: one ``orders`` row plus its ``order_items``
rows. Every write happens inside the caller's session; the caller's
transaction boundary makes an order and its items atomic.

Item reconciliation on update:
    stored ids  - incoming ids  -> DELETE
    stored ids  & incoming ids  -> UPDATE in place
    incoming ids - stored ids   -> INSERT

Reference:
    - src/domain/protocols/order_repository.py
    - src/domain/entities/order.py
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.order import Order
from src.domain.entities.order_item import OrderItem
from src.infrastructure.persistence.models.order import OrderModel
from src.infrastructure.persistence.models.order_item import OrderItemModel


class OrderRepository:
    """SQLAlchemy implementation of OrderRepository protocol.

    Items are always loaded with their order (selectin) and returned in
    item id order.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = OrderRepository(session)
        ...     await repo.create(order)
        ...     match await repo.find(order.id):
        ...         case Success(value=stored):
        ...             print(stored.total())
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, order: Order) -> None:
        """Insert the order row and all item rows.

        Args:
            order: Order entity to persist.

        Raises:
            sqlalchemy.exc.IntegrityError: If the order or an item id already
                exists, or a referenced customer/product is missing.
        """
        self._session.add(self._to_model(order))
        await self._session.flush()

    async def update(self, order: Order) -> Result[None, NotFoundError]:
        """Update the order row and reconcile its items.

        Items present on the entity are upserted by id; stored items no
        longer on the entity are deleted.

        Args:
            order: Order entity with updated state.

        Returns:
            Success(None) if updated, Failure(NotFoundError) if no order row
            has the entity's id.
        """
        model = await self._load(order.id)
        if model is None:
            return Failure(error=self._not_found(order.id))

        model.customer_id = order.customer_id
        model.total = order.total()

        stored = {item_model.id: item_model for item_model in model.items}
        incoming_ids = {item.id for item in order.items}

        for item_id, item_model in stored.items():
            if item_id not in incoming_ids:
                # delete-orphan cascade issues the DELETE on flush
                model.items.remove(item_model)

        for item in order.items:
            existing = stored.get(item.id)
            if existing is None:
                model.items.append(self._to_item_model(item))
            else:
                self._update_item_model(existing, item)

        await self._session.flush()
        return Success(value=None)

    async def find(self, order_id: str) -> Result[Order, NotFoundError]:
        """Find order by ID, items included.

        Args:
            order_id: Order identifier.

        Returns:
            Success(Order) if found, Failure(NotFoundError) otherwise.
        """
        model = await self._load(order_id)
        if model is None:
            return Failure(error=self._not_found(order_id))

        return Success(value=self._to_domain(model))

    async def find_all(self) -> list[Order]:
        """Return every stored order with its items, ordered by order id."""
        stmt = select(OrderModel).order_by(OrderModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def _load(self, order_id: str) -> OrderModel | None:
        stmt = select(OrderModel).where(OrderModel.id == order_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _not_found(order_id: str) -> NotFoundError:
        return NotFoundError.for_resource(
            code=ErrorCode.ORDER_NOT_FOUND,
            resource_type="Order",
            resource_id=order_id,
        )

    # =========================================================================
    # Entity ↔ Model Conversion
    # =========================================================================

    def _to_domain(self, model: OrderModel) -> Order:
        """Convert database model (with loaded items) to domain entity."""
        items = sorted(
            (
                OrderItem(
                    id=item_model.id,
                    name=item_model.name,
                    price=item_model.price,
                    product_id=item_model.product_id,
                    quantity=item_model.quantity,
                )
                for item_model in model.items
            ),
            key=lambda item: item.id,
        )
        return Order(id=model.id, customer_id=model.customer_id, items=items)

    def _to_model(self, entity: Order) -> OrderModel:
        """Convert domain entity to database model, items included."""
        return OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
            items=[self._to_item_model(item) for item in entity.items],
        )

    def _to_item_model(self, item: OrderItem) -> OrderItemModel:
        model = OrderItemModel(id=item.id)
        self._update_item_model(model, item)
        return model

    def _update_item_model(self, model: OrderItemModel, item: OrderItem) -> None:
        model.name = item.name
        model.price = item.price
        model.product_id = item.product_id
        model.quantity = item.quantity
