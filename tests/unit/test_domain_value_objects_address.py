"""Unit tests for the Address value object."""

from dataclasses import FrozenInstanceError

import pytest

from src.domain.errors import CustomerError
from src.domain.value_objects import Address


@pytest.mark.unit
class TestAddress:
    """Test Address construction, equality and rendering."""

    def test_renders_street_number_zip_city(self):
        address = Address("Street 1", 123, "13330-250", "Sao Paulo")

        assert str(address) == "Street 1, 123, 13330-250 Sao Paulo"

    def test_equal_by_value(self):
        assert Address("Street 1", 1, "Zipcode 1", "City 1") == Address(
            "Street 1", 1, "Zipcode 1", "City 1"
        )

    def test_is_immutable(self):
        address = Address("Street 1", 1, "Zipcode 1", "City 1")

        with pytest.raises(FrozenInstanceError):
            address.city = "City 2"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("street", "number", "zip_code", "city", "message"),
        [
            ("", 1, "Zipcode 1", "City 1", CustomerError.STREET_REQUIRED),
            ("Street 1", 0, "Zipcode 1", "City 1", CustomerError.NUMBER_INVALID),
            ("Street 1", 1, " ", "City 1", CustomerError.ZIP_REQUIRED),
            ("Street 1", 1, "Zipcode 1", "", CustomerError.CITY_REQUIRED),
        ],
    )
    def test_rejects_incomplete_address(self, street, number, zip_code, city, message):
        with pytest.raises(ValueError, match=message):
            Address(street, number, zip_code, city)
