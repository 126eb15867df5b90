"""Product domain entity.

A sellable product. Order items copy the product's name and price at the
time the order is placed, so later price changes do not alter existing
orders.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.errors.product_error import ProductError


@dataclass
class Product:
    """Product in the catalog.

    Attributes:
        id: Unique product identifier.
        name: Product name.
        price: Unit price (non-negative, Decimal precision).

    Example:
        >>> product = Product(id="123", name="Product 1", price=Decimal("10"))
        >>> product.change_price(Decimal("12.50"))
        >>> product.price
        Decimal('12.50')
    """

    id: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        """Validate product after initialization.

        Raises:
            ValueError: If id or name is empty or price is negative.
        """
        if not self.id or not self.id.strip():
            raise ValueError(ProductError.ID_REQUIRED)
        if not self.name or not self.name.strip():
            raise ValueError(ProductError.NAME_REQUIRED)
        self.price = Decimal(self.price)
        if self.price < 0:
            raise ValueError(ProductError.PRICE_NEGATIVE)

    def change_name(self, name: str) -> None:
        """Rename the product.

        Raises:
            ValueError: If name is empty.
        """
        if not name or not name.strip():
            raise ValueError(ProductError.NAME_REQUIRED)
        self.name = name

    def change_price(self, price: Decimal) -> None:
        """Set a new unit price.

        Raises:
            ValueError: If price is negative.
        """
        price = Decimal(price)
        if price < 0:
            raise ValueError(ProductError.PRICE_NEGATIVE)
        self.price = price
