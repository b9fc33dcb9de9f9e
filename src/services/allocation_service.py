"""Allocation service for splitting distributed expenses across owners.

Each owner's liability is derived from the expense amount and the owner's
registered percentage:

    amount_due = floor(amount * percentage / 100)

Integer arithmetic throughout; truncation, never rounding. Amounts are
capped at MAX_AMOUNT, so amount_due never exceeds the stored amount.

Allocation lifecycle per (property, expense, owner):
- allocated (paid=False), re-allocation overwrites and resets paid
- paid (paid=True), set only by the owner, once
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from src.models import Expense, OwnershipShare, PaymentAllocation
from src.services.audit_service import AuditService
from src.services.errors import AlreadyPaidError, NotFoundError, NotYetDistributedError
from src.services.ledger_state_service import LedgerStateService
from src.services.share_service import MAX_PERCENTAGE
from src.services.store import KeyedStore

logger = logging.getLogger(__name__)


def calculate_amount_due(amount: int, percentage: int) -> int:
    """Owner's share of an expense amount, truncated toward zero.

    Args:
        amount: Expense amount in the smallest currency unit (non-negative)
        percentage: Ownership percentage (0-100)

    Returns:
        floor(amount * percentage / 100)
    """
    return (amount * percentage) // MAX_PERCENTAGE


class AllocationService:
    """Expense allocation engine with per-owner payment tracking."""

    def __init__(self, db: Session):
        """Initialize allocation service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.expenses = KeyedStore(db, Expense, ("property_id", "expense_id"))
        self.shares = KeyedStore(db, OwnershipShare, ("property_id", "owner"))
        self.allocations = KeyedStore(
            db, PaymentAllocation, ("property_id", "expense_id", "owner")
        )

    def allocate_expense(
        self,
        caller: str,
        property_id: int,
        expense_id: int,
        owner: str,
    ) -> int:
        """Allocate a distributed expense to one owner by ownership share.

        Overwrites any earlier allocation for the same triple, which resets
        its paid flag and payment date.

        Args:
            caller: Identity invoking the allocation
            property_id: Property identifier
            expense_id: Expense identifier
            owner: Owner identity to allocate to

        Returns:
            The amount due from the owner

        Raises:
            NotFoundError: If the expense or the owner's share does not exist
            NotYetDistributedError: If the expense has not been distributed
        """
        expense = self.expenses.get((property_id, expense_id))
        if expense is None:
            raise NotFoundError(f"Expense {property_id}:{expense_id} not found")

        share = self.shares.get((property_id, owner))
        if share is None:
            raise NotFoundError(f"No ownership share for {owner} in property {property_id}")

        if not expense.distributed:
            raise NotYetDistributedError(
                f"Expense {property_id}:{expense_id} must be distributed before allocation"
            )

        amount_due = calculate_amount_due(expense.amount, share.percentage)

        height = LedgerStateService(self.db).advance_block()
        key = (property_id, expense_id, owner)
        self.allocations.upsert(key, amount_due=amount_due, paid=False, payment_date=None)

        AuditService.log(
            self.db,
            entity_type="allocation",
            entity_key=self.allocations.describe(key),
            action="allocate",
            actor=caller,
            block_height=height,
            changes={"amount_due": amount_due, "percentage": share.percentage},
        )
        logger.info(
            f"Allocated expense {property_id}:{expense_id} to {owner}: "
            f"{expense.amount} x {share.percentage}% = {amount_due}"
        )
        return amount_due

    def record_payment(self, caller: str, property_id: int, expense_id: int) -> PaymentAllocation:
        """Mark the caller's own allocation for an expense as paid.

        Args:
            caller: Owner identity paying its allocation
            property_id: Property identifier
            expense_id: Expense identifier

        Returns:
            Updated PaymentAllocation

        Raises:
            NotFoundError: If the caller has no allocation for the expense
            AlreadyPaidError: If the allocation is already paid
        """
        key = (property_id, expense_id, caller)
        allocation = self.allocations.get(key)
        if allocation is None:
            raise NotFoundError(f"Allocation {self.allocations.describe(key)} not found")
        if allocation.paid:
            raise AlreadyPaidError(f"Allocation {self.allocations.describe(key)} already paid")

        height = LedgerStateService(self.db).advance_block()
        allocation = self.allocations.update(key, paid=True, payment_date=height)

        AuditService.log(
            self.db,
            entity_type="allocation",
            entity_key=self.allocations.describe(key),
            action="pay",
            actor=caller,
            block_height=height,
            changes={"paid": True, "amount_due": allocation.amount_due},
        )
        logger.info(
            f"Payment recorded: {caller} paid {allocation.amount_due} "
            f"for expense {property_id}:{expense_id}"
        )
        return allocation

    def get_allocation(
        self,
        property_id: int,
        expense_id: int,
        owner: str,
    ) -> Optional[PaymentAllocation]:
        """Get allocation or None if the owner was never allocated this expense."""
        return self.allocations.get((property_id, expense_id, owner))


__all__ = ["AllocationService", "calculate_amount_due"]
