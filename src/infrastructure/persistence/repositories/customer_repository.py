"""CustomerRepository - SQLAlchemy implementation of CustomerRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Customer entities and database CustomerModel. The
Address value object is flattened into four nullable columns.

Reference:
    - src/domain/protocols/customer_repository.py
    - src/domain/entities/customer.py
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.customer import Customer
from src.domain.value_objects.address import Address
from src.infrastructure.persistence.models.customer import CustomerModel


class CustomerRepository:
    """SQLAlchemy implementation of CustomerRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CustomerRepository(session)
        ...     await repo.create(customer)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, customer: Customer) -> None:
        """Insert a new customer.

        Args:
            customer: Customer entity to persist.

        Raises:
            sqlalchemy.exc.IntegrityError: If the id already exists.
        """
        self._session.add(self._to_model(customer))
        await self._session.flush()

    async def update(self, customer: Customer) -> Result[None, NotFoundError]:
        """Overwrite all stored fields of an existing customer.

        Args:
            customer: Customer entity with updated state.

        Returns:
            Success(None) if updated, Failure(NotFoundError) if no row has
            the customer's id.
        """
        model = await self._session.get(CustomerModel, customer.id)
        if model is None:
            return Failure(error=self._not_found(customer.id))

        self._update_model(model, customer)
        await self._session.flush()
        return Success(value=None)

    async def find(self, customer_id: str) -> Result[Customer, NotFoundError]:
        """Find customer by ID.

        Args:
            customer_id: Customer identifier.

        Returns:
            Success(Customer) if found, Failure(NotFoundError) otherwise.
        """
        stmt = select(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return Failure(error=self._not_found(customer_id))

        return Success(value=self._to_domain(model))

    async def find_all(self) -> list[Customer]:
        """Return every stored customer, ordered by id."""
        stmt = select(CustomerModel).order_by(CustomerModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    # =========================================================================
    # Entity ↔ Model Conversion
    # =========================================================================

    @staticmethod
    def _not_found(customer_id: str) -> NotFoundError:
        return NotFoundError.for_resource(
            code=ErrorCode.CUSTOMER_NOT_FOUND,
            resource_type="Customer",
            resource_id=customer_id,
        )

    def _to_domain(self, model: CustomerModel) -> Customer:
        """Convert database model to domain entity.

        A row with any NULL address column maps to a customer without address.
        """
        address = None
        if (
            model.street is not None
            and model.number is not None
            and model.zipcode is not None
            and model.city is not None
        ):
            address = Address(
                street=model.street,
                number=model.number,
                zip=model.zipcode,
                city=model.city,
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )

    def _to_model(self, entity: Customer) -> CustomerModel:
        """Convert domain entity to database model."""
        model = CustomerModel(id=entity.id)
        self._update_model(model, entity)
        return model

    def _update_model(self, model: CustomerModel, entity: Customer) -> None:
        """Copy every mutable field from entity onto model."""
        model.name = entity.name
        model.active = entity.active
        model.reward_points = entity.reward_points

        if entity.address is None:
            model.street = None
            model.number = None
            model.zipcode = None
            model.city = None
        else:
            model.street = entity.address.street
            model.number = entity.address.number
            model.zipcode = entity.address.zip
            model.city = entity.address.city
