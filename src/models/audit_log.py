"""Audit log model for tracking ledger mutations."""

from typing import Any

from sqlalchemy import JSON, BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models import Base, BaseModel


class AuditLog(Base, BaseModel):
    """Audit log entry for tracking changes to ledger records.

    Records who (actor) did what (action) to which record (entity_type,
    entity_key) at which block height, with an optional field snapshot.
    """

    __tablename__ = "audit_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    entity_type: Mapped[str] = mapped_column(String(50))
    """Entity type being audited: "share", "expense", "allocation", etc."""

    entity_key: Mapped[str] = mapped_column(String(300))
    """Composite key of the audited record rendered as text, e.g. "1:7"."""

    action: Mapped[str] = mapped_column(String(50))
    """Action performed: "register", "distribute", "pay", etc."""

    actor: Mapped[str] = mapped_column(String(128))
    """Identity that invoked the operation."""

    block_height: Mapped[int] = mapped_column(BigInteger)

    changes: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    """Optional JSON snapshot of changed fields: {"paid": true}."""

    def __repr__(self) -> str:
        return (
            f"<AuditLog(id={self.id}, entity_type={self.entity_type}, "
            f"entity_key={self.entity_key}, action={self.action}, actor={self.actor}, "
            f"block_height={self.block_height})>"
        )


__all__ = ["AuditLog"]
