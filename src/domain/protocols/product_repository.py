"""Product repository protocol.

Defines the interface for product persistence operations.
"""

from typing import Protocol

from src.core.errors import NotFoundError
from src.core.result import Result
from src.domain.entities.product import Product


class ProductRepository(Protocol):
    """Protocol for product persistence operations."""

    async def create(self, product: Product) -> None:
        """Insert a new product."""
        ...

    async def update(self, product: Product) -> Result[None, NotFoundError]:
        """Overwrite name and price of an existing product."""
        ...

    async def find(self, product_id: str) -> Result[Product, NotFoundError]:
        """Load a product by id (Failure(NotFoundError) if missing)."""
        ...

    async def find_all(self) -> list[Product]:
        """Load every product."""
        ...
