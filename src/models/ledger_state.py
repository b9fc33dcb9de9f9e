"""Singleton ledger state: contract owner identity and block height."""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models import Base, BaseModel

LEDGER_STATE_ID = 1


class LedgerState(Base, BaseModel):
    """Process-wide ledger configuration held in a single row (id=1)."""

    __tablename__ = "ledger_state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=LEDGER_STATE_ID)

    contract_owner: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        comment="Identity allowed to perform administrative operations",
    )
    block_height: Mapped[int] = mapped_column(
        BigInteger,
        default=0,
        nullable=False,
        comment="Monotonic clock, advanced once per committed mutation",
    )

    def __repr__(self) -> str:
        return (
            f"<LedgerState(contract_owner={self.contract_owner!r}, "
            f"block_height={self.block_height})>"
        )


__all__ = ["LEDGER_STATE_ID", "LedgerState"]
