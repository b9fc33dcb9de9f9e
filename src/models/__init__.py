"""SQLAlchemy base model with common fields and model exports."""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

# Base class for all models
Base = declarative_base()


class BaseModel:
    """Base model with common timestamp fields.

    Ledger records are keyed by composite identifiers, so primary keys are
    declared on each model rather than here.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


# Import models to register them with Base (after Base is defined)
# This must be after Base declaration to avoid circular imports
from src.models.audit_log import AuditLog  # noqa: E402
from src.models.expense import Expense  # noqa: E402
from src.models.ledger_state import LedgerState  # noqa: E402
from src.models.ownership_share import OwnershipShare  # noqa: E402
from src.models.payment_allocation import PaymentAllocation  # noqa: E402
from src.models.tenant import Tenant  # noqa: E402

__all__ = [
    "Base",
    "BaseModel",
    "AuditLog",
    "Expense",
    "LedgerState",
    "OwnershipShare",
    "PaymentAllocation",
    "Tenant",
]
