"""Authorization checks for owner-gated and self-gated ledger operations.

Two policies exist:
- contract owner only (administrative operations)
- contract owner or the identity the record belongs to (share registration)
"""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from src.models.ledger_state import LEDGER_STATE_ID, LedgerState
from src.services.errors import LedgerNotInitializedError, UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass
class AuthorizedCaller:
    """Encapsulates authorization context for an operation."""

    identity: str
    """The identity invoking the operation."""

    is_contract_owner: bool
    """True if identity is the current contract owner."""

    acting_for_self: bool
    """True if identity is the subject of the record being written."""


def is_contract_owner(db: Session, caller: str) -> bool:
    state = db.get(LedgerState, LEDGER_STATE_ID)
    if state is None:
        raise LedgerNotInitializedError("Ledger state not initialized; call initialize() first")
    return caller == state.contract_owner


def authorize_owner_or_self(db: Session, caller: str, subject: str) -> AuthorizedCaller:
    """Allow the contract owner, or the caller acting on its own record.

    Args:
        db: Database session
        caller: Identity invoking the operation
        subject: Identity the record is keyed by

    Returns:
        AuthorizedCaller context

    Raises:
        UnauthorizedError: If caller is neither the contract owner nor subject
    """
    context = AuthorizedCaller(
        identity=caller,
        is_contract_owner=is_contract_owner(db, caller),
        acting_for_self=caller == subject,
    )
    if not (context.is_contract_owner or context.acting_for_self):
        raise UnauthorizedError(f"{caller} may not act for {subject}")
    return context


def authorize_contract_owner(db: Session, caller: str) -> AuthorizedCaller:
    """Allow only the contract owner.

    Raises:
        UnauthorizedError: If caller is not the contract owner
    """
    if not is_contract_owner(db, caller):
        raise UnauthorizedError(f"{caller} is not the contract owner")
    return AuthorizedCaller(identity=caller, is_contract_owner=True, acting_for_self=False)


__all__ = [
    "AuthorizedCaller",
    "authorize_contract_owner",
    "authorize_owner_or_self",
    "is_contract_owner",
]
