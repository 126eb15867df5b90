"""Customer database model.

Address fields are flattened onto the customer row and are nullable:
a customer may exist before an address is assigned.

Reference:
    - src/domain/entities/customer.py
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class CustomerModel(BaseModel):
    """Customer model.

    Fields:
        id: String primary key (from BaseModel)
        name: Customer name
        street, number, zipcode, city: Flattened Address (nullable)
        active: Whether the customer is active
        reward_points: Stored in column ``rewardPoints``
    """

    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Address value object (all four set, or all NULL)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(50), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reward_points: Mapped[int] = mapped_column(
        "rewardPoints",
        Integer,
        nullable=False,
        default=0,
    )
