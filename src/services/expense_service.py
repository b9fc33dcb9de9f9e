"""Expense ledger: records property expenses and opens them for distribution.

Expense lifecycle:
- recorded (distributed=False), first writer wins per (property, expense)
- distributed (distributed=True), one-way, allocation becomes possible
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from src.models import Expense
from src.models.expense import MAX_AMOUNT
from src.services.audit_service import AuditService
from src.services.errors import AlreadyDistributedError, AlreadyExistsError, NotFoundError
from src.services.ledger_state_service import LedgerStateService
from src.services.store import KeyedStore

logger = logging.getLogger(__name__)


class ExpenseService:
    """Recording and distribution of property expenses."""

    def __init__(self, db: Session):
        """Initialize expense service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.expenses = KeyedStore(db, Expense, ("property_id", "expense_id"))

    def record_expense(
        self,
        caller: str,
        property_id: int,
        expense_id: int,
        description: str,
        amount: int,
        category: str,
    ) -> Expense:
        """Record a new expense against a property.

        Args:
            caller: Identity recording the expense (stored as paid_by)
            property_id: Property identifier
            expense_id: Expense identifier, unique within the property
            description: Free-form description ("Roof repair")
            amount: Amount in the smallest currency unit
            category: Expense category ("Maintenance")

        Returns:
            Created Expense object

        Raises:
            AlreadyExistsError: If the expense key is already taken
            ValueError: If amount is negative or above MAX_AMOUNT
        """
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        if amount > MAX_AMOUNT:
            raise ValueError(f"amount must not exceed {MAX_AMOUNT}, got {amount}")

        key = (property_id, expense_id)
        if self.expenses.exists(key):
            raise AlreadyExistsError(f"Expense {self.expenses.describe(key)} already exists")

        height = LedgerStateService(self.db).advance_block()

        expense = self.expenses.insert(
            key,
            description=description,
            amount=amount,
            date=height,
            category=category,
            paid_by=caller,
            distributed=False,
        )

        AuditService.log(
            self.db,
            entity_type="expense",
            entity_key=self.expenses.describe(key),
            action="record",
            actor=caller,
            block_height=height,
            changes={"amount": amount, "category": category},
        )
        logger.info(
            f"Recorded expense: property={property_id} expense={expense_id} "
            f"amount={amount} category={category} by {caller}"
        )
        return expense

    def distribute_expense(self, caller: str, property_id: int, expense_id: int) -> Expense:
        """Open an expense for per-owner allocation.

        Any caller may distribute any expense.

        Raises:
            NotFoundError: If the expense does not exist
            AlreadyDistributedError: If the expense was already distributed
        """
        key = (property_id, expense_id)
        expense = self.expenses.get(key)
        if expense is None:
            raise NotFoundError(f"Expense {self.expenses.describe(key)} not found")
        if expense.distributed:
            raise AlreadyDistributedError(
                f"Expense {self.expenses.describe(key)} already distributed"
            )

        height = LedgerStateService(self.db).advance_block()
        expense = self.expenses.update(key, distributed=True)

        AuditService.log(
            self.db,
            entity_type="expense",
            entity_key=self.expenses.describe(key),
            action="distribute",
            actor=caller,
            block_height=height,
            changes={"distributed": True},
        )
        logger.info(f"Distributed expense: property={property_id} expense={expense_id}")
        return expense

    def get_expense(self, property_id: int, expense_id: int) -> Optional[Expense]:
        """Get expense or None if not recorded."""
        return self.expenses.get((property_id, expense_id))


__all__ = ["ExpenseService"]
