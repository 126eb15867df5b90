"""Immutable Address value object.

A customer's postal address. Addresses have no identity: two addresses with
the same street, number, zip and city are the same address. Changing a
customer's address means replacing the whole value.

Usage:
    from src.domain.value_objects import Address

    address = Address("Street 1", 123, "13330-250", "Sao Paulo")
    str(address)  # "Street 1, 123, 13330-250 Sao Paulo"
"""

from dataclasses import dataclass

from src.domain.errors.customer_error import CustomerError


@dataclass(frozen=True)
class Address:
    """Immutable postal address.

    Attributes:
        street: Street name.
        number: Street number (positive integer).
        zip: Postal code, kept as text (leading zeros, dashes).
        city: City name.

    Raises:
        ValueError: If any field is empty or number is not positive.

    Example:
        >>> address = Address("Street 1", 1, "Zipcode 1", "City 1")
        >>> str(address)
        'Street 1, 1, Zipcode 1 City 1'
    """

    street: str
    number: int
    zip: str
    city: str

    def __post_init__(self) -> None:
        """Validate address fields.

        Raises:
            ValueError: If a field is missing or number is not positive.
        """
        if not self.street or not self.street.strip():
            raise ValueError(CustomerError.STREET_REQUIRED)
        if self.number <= 0:
            raise ValueError(CustomerError.NUMBER_INVALID)
        if not self.zip or not self.zip.strip():
            raise ValueError(CustomerError.ZIP_REQUIRED)
        if not self.city or not self.city.strip():
            raise ValueError(CustomerError.CITY_REQUIRED)

    def __str__(self) -> str:
        """Render as "street, number, zip city"."""
        return f"{self.street}, {self.number}, {self.zip} {self.city}"
