"""
Credit Domain SQLAlchemy Models

Database models for credit domain persistence.
Uses SQLAlchemy 2.0 style with Mapped[] type annotations for Pyright compatibility.
"""

from datetime import date
from decimal import Decimal
from typing import List
from uuid import UUID, uuid4

from sqlalchemy import (
    Date,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domains.credit.domain.value_objects.credit_status import CreditStatus
from app.models.db.base import Base, TimestampMixin

# Integer primary keys are 32-bit signed on PostgreSQL
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """Whether an id fits the primary key columns. Larger ids can never match a row."""
    return MIN_ID <= value <= MAX_ID


class CustomerModel(Base, TimestampMixin):
    """SQLAlchemy model for Customer entity."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Identity
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    cpf: Mapped[str] = mapped_column(String(14), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    # Financial
    income: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False, default=0)

    # Stored as received
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    # Address (embedded)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships - never loaded implicitly, credits are queried through CreditModel
    credits: Mapped[List["CreditModel"]] = relationship(
        "CreditModel",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CreditModel.id",
        lazy="raise",
    )


class CreditModel(Base, TimestampMixin):
    """SQLAlchemy model for Credit entity."""

    __tablename__ = "credits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    credit_code: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False, index=True, default=uuid4)
    credit_value: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    day_first_installment: Mapped[date] = mapped_column(Date, nullable=False)
    number_of_installments: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[CreditStatus] = mapped_column(
        SQLEnum(CreditStatus, name="credit_status"),
        default=CreditStatus.IN_PROGRESS,
        nullable=False,
    )

    # References
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    customer: Mapped["CustomerModel"] = relationship("CustomerModel", back_populates="credits", lazy="joined")

