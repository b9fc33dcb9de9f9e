"""Payment allocation ORM model: one owner's liability for a distributed expense."""

from sqlalchemy import BigInteger, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models import Base, BaseModel


class PaymentAllocation(Base, BaseModel):
    """Per-owner amount due for an expense, with its paid/unpaid state.

    Re-allocating the same (property, expense, owner) triple overwrites the
    row and resets ``paid`` to False.
    """

    __tablename__ = "payment_allocations"

    property_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    expense_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    owner: Mapped[str] = mapped_column(String(128), primary_key=True)

    amount_due: Mapped[int] = mapped_column(BigInteger, nullable=False)
    paid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    payment_date: Mapped[int | None] = mapped_column(
        BigInteger,
        nullable=True,
        comment="Block height at which the owner paid",
    )

    def __repr__(self) -> str:
        return (
            f"<PaymentAllocation(property_id={self.property_id}, "
            f"expense_id={self.expense_id}, owner={self.owner!r}, "
            f"amount_due={self.amount_due}, paid={self.paid}, "
            f"payment_date={self.payment_date})>"
        )


__all__ = ["PaymentAllocation"]
