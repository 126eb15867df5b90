"""ProductRepository - SQLAlchemy implementation of ProductRepository protocol.

Reference:
    - src/domain/protocols/product_repository.py
    - src/domain/entities/product.py
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.product import Product
from src.infrastructure.persistence.models.product import ProductModel


class ProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, product: Product) -> None:
        """Insert a new product.

        Raises:
            sqlalchemy.exc.IntegrityError: If the id already exists.
        """
        self._session.add(
            ProductModel(id=product.id, name=product.name, price=product.price)
        )
        await self._session.flush()

    async def update(self, product: Product) -> Result[None, NotFoundError]:
        """Overwrite name and price of an existing product."""
        model = await self._session.get(ProductModel, product.id)
        if model is None:
            return Failure(error=self._not_found(product.id))

        model.name = product.name
        model.price = product.price
        await self._session.flush()
        return Success(value=None)

    async def find(self, product_id: str) -> Result[Product, NotFoundError]:
        """Find product by ID.

        Returns:
            Success(Product) if found, Failure(NotFoundError) otherwise.
        """
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return Failure(error=self._not_found(product_id))

        return Success(value=self._to_domain(model))

    async def find_all(self) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _not_found(product_id: str) -> NotFoundError:
        return NotFoundError.for_resource(
            code=ErrorCode.PRODUCT_NOT_FOUND,
            resource_type="Product",
            resource_id=product_id,
        )

    def _to_domain(self, model: ProductModel) -> Product:
        return Product(id=model.id, name=model.name, price=model.price)
