"""Product domain service."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from src.domain.entities.product import Product

CENTS = Decimal("0.01")


class ProductService:
    """Stateless product operations."""

    @staticmethod
    def increase_price(products: Iterable[Product], percentage: Decimal) -> None:
        """Raise every product price by a percentage, in place.

        Prices are rounded half-up to cents. A negative percentage lowers
        prices; the result is still validated by Product.change_price.

        Args:
            products: Products to reprice.
            percentage: Increase in percent (e.g. Decimal("10") for +10%).

        Example:
            >>> ProductService.increase_price([product], Decimal("100"))
            >>> product.price  # was 10
            Decimal('20.00')
        """
        factor = Decimal(1) + Decimal(percentage) / Decimal(100)
        for product in products:
            new_price = (product.price * factor).quantize(CENTS, rounding=ROUND_HALF_UP)
            product.change_price(new_price)
