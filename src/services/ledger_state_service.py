"""Ledger state service: contract owner and block height.

The contract owner is set once at startup from the deployer identity and
can afterwards only be changed by the current owner. The block height is
the ledger clock: every committed mutation advances it by one.
"""

import logging

from sqlalchemy.orm import Session

from src.models.ledger_state import LEDGER_STATE_ID, LedgerState
from src.services.audit_service import AuditService
from src.services.auth_service import authorize_contract_owner
from src.services.errors import LedgerNotInitializedError

logger = logging.getLogger(__name__)


class LedgerStateService:
    """Access to the singleton ledger_state row."""

    def __init__(self, db: Session):
        self.db = db

    def initialize(self, deployer: str) -> LedgerState:
        """Create the state row with the deployer as contract owner.

        An existing row is left untouched, so restarting with a different
        deployer does not change ownership.

        Args:
            deployer: Identity that deployed the ledger

        Returns:
            The current LedgerState
        """
        state = self.db.get(LedgerState, LEDGER_STATE_ID)
        if state is not None:
            logger.info(f"Ledger already initialized (owner={state.contract_owner})")
            return state

        if not deployer:
            raise ValueError("deployer identity must not be empty")

        state = LedgerState(id=LEDGER_STATE_ID, contract_owner=deployer, block_height=0)
        self.db.add(state)
        self.db.flush()
        logger.info(f"Ledger initialized with contract owner {deployer}")
        return state

    def get_state(self) -> LedgerState:
        state = self.db.get(LedgerState, LEDGER_STATE_ID)
        if state is None:
            raise LedgerNotInitializedError("Ledger state not initialized; call initialize() first")
        return state

    @property
    def contract_owner(self) -> str:
        return self.get_state().contract_owner

    @property
    def block_height(self) -> int:
        return self.get_state().block_height

    def advance_block(self) -> int:
        """Advance the ledger clock and return the new height."""
        state = self.get_state()
        state.block_height += 1
        self.db.flush()
        return state.block_height

    def transfer_ownership(self, caller: str, new_owner: str) -> None:
        """Hand contract ownership to another identity.

        Args:
            caller: Identity invoking the transfer
            new_owner: Identity receiving ownership

        Raises:
            UnauthorizedError: If caller is not the current contract owner
        """
        authorize_contract_owner(self.db, caller)
        if not new_owner:
            raise ValueError("new owner identity must not be empty")

        state = self.get_state()
        height = self.advance_block()
        previous = state.contract_owner
        state.contract_owner = new_owner
        self.db.flush()

        AuditService.log(
            self.db,
            entity_type="ledger",
            entity_key=str(LEDGER_STATE_ID),
            action="transfer_ownership",
            actor=caller,
            block_height=height,
            changes={"previous_owner": previous, "contract_owner": new_owner},
        )
        logger.info(f"Contract ownership transferred from {previous} to {new_owner}")


__all__ = ["LedgerStateService"]
