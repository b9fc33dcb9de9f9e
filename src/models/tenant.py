"""Tenant ORM model used for tenant identity lookups."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models import Base, BaseModel

INITIAL_TENANT_RATING = 5


class Tenant(Base, BaseModel):
    """Directory entry mapping a tenant id to the identity that registered it."""

    __tablename__ = "tenants"

    tenant_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    identity: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    contact: Mapped[str] = mapped_column(String(100), nullable=False)
    rating: Mapped[int] = mapped_column(
        Integer,
        default=INITIAL_TENANT_RATING,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<Tenant(tenant_id={self.tenant_id}, identity={self.identity!r}, "
            f"name={self.name!r}, rating={self.rating})>"
        )


__all__ = ["INITIAL_TENANT_RATING", "Tenant"]
