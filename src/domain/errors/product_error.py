"""Product domain errors.

Error constants used as ValueError messages by the Product entity.
"""


class ProductError:
    """Product error constants."""

    ID_REQUIRED = "Product id is required"
    NAME_REQUIRED = "Product name is required"
    PRICE_NEGATIVE = "Product price must be non-negative"
    """Free products (price 0) are allowed; negative prices are not."""
