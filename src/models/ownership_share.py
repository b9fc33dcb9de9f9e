"""Ownership share ORM model: an owner's percentage stake in a property."""

from sqlalchemy import BigInteger, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models import Base, BaseModel


class OwnershipShare(Base, BaseModel):
    """Percentage stake held by one owner identity in one property.

    Re-registration overwrites percentage and last_updated in place; no
    history is kept. Percentages of a property are not required to sum to 100.
    """

    __tablename__ = "ownership_shares"

    property_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    owner: Mapped[str] = mapped_column(String(128), primary_key=True)

    percentage: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Stake in the property, 0-100 inclusive",
    )
    last_updated: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Block height of the last registration",
    )

    __table_args__ = (
        CheckConstraint("percentage >= 0 AND percentage <= 100", name="ck_share_percentage"),
    )

    def __repr__(self) -> str:
        return (
            f"<OwnershipShare(property_id={self.property_id}, owner={self.owner!r}, "
            f"percentage={self.percentage}, last_updated={self.last_updated})>"
        )


__all__ = ["OwnershipShare"]
