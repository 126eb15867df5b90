"""Product database model."""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class ProductModel(BaseModel):
    """Product model.

    Fields:
        id: String primary key (from BaseModel)
        name: Product name
        price: Unit price, Numeric(19, 4)
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(precision=19, scale=4), nullable=False)
