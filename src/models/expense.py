"""Expense ORM model for costs recorded against a property."""

from sqlalchemy import BigInteger, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models import Base, BaseModel

# Largest amount a BigInteger column holds (signed 64-bit)
MAX_AMOUNT = 2**63 - 1


class Expense(Base, BaseModel):
    """Model representing a cost incurred against a property.

    Created once per (property_id, expense_id). The only mutation is flipping
    ``distributed`` to True, which is never reverted.
    """

    __tablename__ = "expenses"

    property_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    expense_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    description: Mapped[str] = mapped_column(String(256), nullable=False)
    amount: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Amount in the smallest currency unit",
    )
    date: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Block height at which the expense was recorded",
    )
    category: Mapped[str] = mapped_column(String(64), nullable=False)
    paid_by: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        comment="Identity that recorded the expense",
    )

    # One-way gate: allocation is permitted only once this is set
    distributed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Expense(property_id={self.property_id}, expense_id={self.expense_id}, "
            f"amount={self.amount}, category={self.category!r}, "
            f"paid_by={self.paid_by!r}, distributed={self.distributed})>"
        )


__all__ = ["Expense", "MAX_AMOUNT"]
