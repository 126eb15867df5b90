"""Order item database model."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order import OrderModel


class OrderItemModel(BaseModel):
    """Order item model.

    Fields:
        id: String primary key (from BaseModel)
        name: Product name at ordering time
        price: Unit price, Numeric(19, 4)
        quantity: Units ordered
        order_id: FK to orders table
        product_id: FK to products table
    """

    __tablename__ = "order_items"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(precision=19, scale=4), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    order_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("orders.id"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("products.id"),
        nullable=False,
    )

    order: Mapped["OrderModel"] = relationship(back_populates="items")
