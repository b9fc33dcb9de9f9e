"""Ownership share registry.

Stores each owner's percentage stake in a property. Registration is
insert-or-replace; percentages across owners of one property are not
required to sum to 100.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from src.models import OwnershipShare
from src.services.audit_service import AuditService
from src.services.auth_service import authorize_owner_or_self
from src.services.errors import InvalidPercentageError
from src.services.ledger_state_service import LedgerStateService
from src.services.store import KeyedStore

logger = logging.getLogger(__name__)

MAX_PERCENTAGE = 100


class ShareService:
    """Registration and lookup of ownership shares."""

    def __init__(self, db: Session):
        """Initialize share service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.shares = KeyedStore(db, OwnershipShare, ("property_id", "owner"))

    def register_share(
        self,
        caller: str,
        property_id: int,
        owner: str,
        percentage: int,
    ) -> OwnershipShare:
        """Register (or overwrite) an owner's stake in a property.

        Args:
            caller: Identity invoking the operation
            property_id: Property identifier
            owner: Owner identity the share belongs to
            percentage: Stake, 0-100 inclusive

        Returns:
            The stored OwnershipShare

        Raises:
            UnauthorizedError: If caller is neither contract owner nor owner
            InvalidPercentageError: If percentage is outside [0, 100]
        """
        authorize_owner_or_self(self.db, caller, owner)

        if percentage < 0 or percentage > MAX_PERCENTAGE:
            raise InvalidPercentageError(f"Percentage {percentage} is outside 0-{MAX_PERCENTAGE}")

        height = LedgerStateService(self.db).advance_block()
        key = (property_id, owner)
        share = self.shares.upsert(key, percentage=percentage, last_updated=height)

        AuditService.log(
            self.db,
            entity_type="share",
            entity_key=self.shares.describe(key),
            action="register",
            actor=caller,
            block_height=height,
            changes={"percentage": percentage},
        )
        logger.info(f"Registered share: property={property_id} owner={owner} pct={percentage}")
        return share

    def get_share(self, property_id: int, owner: str) -> Optional[OwnershipShare]:
        """Get ownership share or None if not registered."""
        return self.shares.get((property_id, owner))


__all__ = ["MAX_PERCENTAGE", "ShareService"]
