"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.address import Address

__all__ = [
    "Address",
]
