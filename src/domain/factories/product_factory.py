"""Product factory."""

from decimal import Decimal
from uuid import uuid4

from src.domain.entities.product import Product


class ProductFactory:
    """Builds new Product entities."""

    @staticmethod
    def create(name: str, price: Decimal) -> Product:
        """Create a product with a generated id."""
        return Product(id=str(uuid4()), name=name, price=price)
