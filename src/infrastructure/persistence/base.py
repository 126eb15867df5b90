"""Base model for all database entities.

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Domain entities are mapped to/from database models by repositories

Usage:
    class ProductModel(BaseModel):
        __tablename__ = "products"
        name: Mapped[str]
        # Has: id (string primary key)

Note: Identifiers are application-assigned strings (not generated by the
database), so every table uses a String primary key.
"""

from typing import Any

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides the field every table needs:
    - id: String primary key assigned by the application

    This is an infrastructure concern - domain entities should not
    inherit from or depend on this class.
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert the row's columns to a dictionary (debugging/tests).

        Keys are database column names, so the result mirrors the stored
        row (e.g. ``rewardPoints``, ``zipcode``). Relationships are not
        included.

        Returns:
            dict: Column name -> value.
        """
        return {
            column.name: getattr(self, attr.key)
            for attr in self.__mapper__.column_attrs
            for column in attr.columns
        }
