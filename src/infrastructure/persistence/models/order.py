"""Order database model.

Architecture:
    - Orders belong to customers (FK customer_id)
    - Items are loaded eagerly with selectin loading, ordered by item id
    - total is denormalized from the domain Order.total() on every write

Reference:
    - src/domain/entities/order.py
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order_item import OrderItemModel


class OrderModel(BaseModel):
    """Order model.

    Fields:
        id: String primary key (from BaseModel)
        customer_id: FK to customers table
        total: Order total, Numeric(19, 4)
        items: OrderItemModel rows (relationship, not a column)
    """

    __tablename__ = "orders"

    customer_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("customers.id"),
        nullable=False,
        index=True,
    )
    total: Mapped[Decimal] = mapped_column(Numeric(precision=19, scale=4), nullable=False)

    items: Mapped[list["OrderItemModel"]] = relationship(
        back_populates="order",
        lazy="selectin",
        order_by="OrderItemModel.id",
        cascade="all, delete-orphan",
    )
