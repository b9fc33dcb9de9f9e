"""Ledger facade: the public operation surface of the expense ledger.

Every operation runs under one process-wide lock inside one database
transaction. A successful mutation commits and returns Ok(value); a typed
failure rolls back and returns Err(error), leaving the store exactly as it
was. Queries return the stored record (as an immutable snapshot) or None.

Typical flow:

    ledger.register_share(owner, 1, owner, 50)
    ledger.record_expense(manager, 1, 1, "Roof repair", 5000, "Maintenance")
    ledger.distribute_expense(manager, 1, 1)
    ledger.allocate_expense(manager, 1, 1, owner)   # Ok(2500)
    ledger.record_payment(owner, 1, 1)
"""

import logging
import threading
from typing import Callable, Optional, TypeVar

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.models import Base
from src.services import create_ledger_engine, create_session_factory
from src.services.allocation_service import AllocationService
from src.services.errors import LedgerError
from src.services.expense_service import ExpenseService
from src.services.ledger_state_service import LedgerStateService
from src.services.records import AllocationRecord, ExpenseRecord, ShareRecord, TenantRecord
from src.services.result import Err, Ok, Result
from src.services.share_service import ShareService
from src.services.tenant_service import TenantService

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Ledger:
    """Serialized, transactional access to shares, expenses and allocations."""

    def __init__(self, session_factory: sessionmaker):
        """Initialize ledger.

        Args:
            session_factory: Factory producing sessions bound to the ledger store
        """
        self._session_factory = session_factory
        self._lock = threading.RLock()

    @classmethod
    def from_engine(cls, engine: Engine, create_schema: bool = True) -> "Ledger":
        """Build a ledger over an engine, optionally creating missing tables."""
        if create_schema:
            Base.metadata.create_all(engine)
        return cls(create_session_factory(engine))

    @classmethod
    def from_url(cls, database_url: str, create_schema: bool = True) -> "Ledger":
        return cls.from_engine(create_ledger_engine(database_url), create_schema=create_schema)

    # ------------------------------------------------------------------
    # Transaction boundaries
    # ------------------------------------------------------------------

    def _execute(self, operation: str, work: Callable[[Session], T]) -> Result[T]:
        """Run one mutating operation atomically."""
        with self._lock:
            db = self._session_factory()
            try:
                value = work(db)
                db.commit()
                return Ok(value)
            except LedgerError as e:
                db.rollback()
                logger.warning(f"{operation} rejected ({e.kind.value}): {e.message}")
                return Err(e)
            except Exception:
                db.rollback()
                logger.error(f"{operation} failed", exc_info=True)
                raise
            finally:
                db.close()

    def _query(self, work: Callable[[Session], T]) -> T:
        """Run one read-only lookup."""
        with self._lock:
            db = self._session_factory()
            try:
                return work(db)
            finally:
                db.close()

    # ------------------------------------------------------------------
    # Contract owner
    # ------------------------------------------------------------------

    def initialize(self, deployer: str) -> str:
        """Set the contract owner on first start; returns the current owner."""
        with self._lock:
            db = self._session_factory()
            try:
                state = LedgerStateService(db).initialize(deployer)
                owner = state.contract_owner
                db.commit()
                return owner
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def transfer_ownership(self, caller: str, new_owner: str) -> Result[bool]:
        def work(db: Session) -> bool:
            LedgerStateService(db).transfer_ownership(caller, new_owner)
            return True

        return self._execute("transfer_ownership", work)

    def get_contract_owner(self) -> str:
        return self._query(lambda db: LedgerStateService(db).contract_owner)

    def get_block_height(self) -> int:
        return self._query(lambda db: LedgerStateService(db).block_height)

    # ------------------------------------------------------------------
    # Ownership shares
    # ------------------------------------------------------------------

    def register_share(
        self,
        caller: str,
        property_id: int,
        owner: str,
        percentage: int,
    ) -> Result[bool]:
        """Register or overwrite an owner's percentage in a property.

        Failure kinds: UNAUTHORIZED, INVALID_PERCENTAGE.
        """

        def work(db: Session) -> bool:
            ShareService(db).register_share(caller, property_id, owner, percentage)
            return True

        return self._execute("register_share", work)

    def get_share(self, property_id: int, owner: str) -> Optional[ShareRecord]:
        def work(db: Session) -> Optional[ShareRecord]:
            share = ShareService(db).get_share(property_id, owner)
            return ShareRecord.from_model(share) if share else None

        return self._query(work)

    # ------------------------------------------------------------------
    # Expenses
    # ------------------------------------------------------------------

    def record_expense(
        self,
        caller: str,
        property_id: int,
        expense_id: int,
        description: str,
        amount: int,
        category: str,
    ) -> Result[bool]:
        """Record a new expense. Failure kinds: ALREADY_EXISTS."""

        def work(db: Session) -> bool:
            ExpenseService(db).record_expense(
                caller, property_id, expense_id, description, amount, category
            )
            return True

        return self._execute("record_expense", work)

    def distribute_expense(self, caller: str, property_id: int, expense_id: int) -> Result[bool]:
        """Open an expense for allocation. Failure kinds: NOT_FOUND, ALREADY_DISTRIBUTED."""

        def work(db: Session) -> bool:
            ExpenseService(db).distribute_expense(caller, property_id, expense_id)
            return True

        return self._execute("distribute_expense", work)

    def get_expense(self, property_id: int, expense_id: int) -> Optional[ExpenseRecord]:
        def work(db: Session) -> Optional[ExpenseRecord]:
            expense = ExpenseService(db).get_expense(property_id, expense_id)
            return ExpenseRecord.from_model(expense) if expense else None

        return self._query(work)

    # ------------------------------------------------------------------
    # Allocations
    # ------------------------------------------------------------------

    def allocate_expense(
        self,
        caller: str,
        property_id: int,
        expense_id: int,
        owner: str,
    ) -> Result[int]:
        """Allocate an expense to an owner; success value is the amount due.

        Failure kinds: NOT_FOUND, NOT_YET_DISTRIBUTED.
        """
        return self._execute(
            "allocate_expense",
            lambda db: AllocationService(db).allocate_expense(caller, property_id, expense_id, owner),
        )

    def record_payment(self, caller: str, property_id: int, expense_id: int) -> Result[bool]:
        """Mark the caller's allocation paid. Failure kinds: NOT_FOUND, ALREADY_PAID."""

        def work(db: Session) -> bool:
            AllocationService(db).record_payment(caller, property_id, expense_id)
            return True

        return self._execute("record_payment", work)

    def get_allocation(
        self,
        property_id: int,
        expense_id: int,
        owner: str,
    ) -> Optional[AllocationRecord]:
        def work(db: Session) -> Optional[AllocationRecord]:
            allocation = AllocationService(db).get_allocation(property_id, expense_id, owner)
            return AllocationRecord.from_model(allocation) if allocation else None

        return self._query(work)

    # ------------------------------------------------------------------
    # Tenant directory
    # ------------------------------------------------------------------

    def register_tenant(self, caller: str, tenant_id: int, name: str, contact: str) -> Result[bool]:
        def work(db: Session) -> bool:
            TenantService(db).register_tenant(caller, tenant_id, name, contact)
            return True

        return self._execute("register_tenant", work)

    def get_tenant(self, tenant_id: int) -> Optional[TenantRecord]:
        def work(db: Session) -> Optional[TenantRecord]:
            tenant = TenantService(db).get_tenant(tenant_id)
            return TenantRecord.from_model(tenant) if tenant else None

        return self._query(work)

    def resolve_tenant_identity(self, tenant_id: int) -> Result[str]:
        """Identity behind a tenant id. Failure kinds: NOT_FOUND."""
        with self._lock:
            db = self._session_factory()
            try:
                return Ok(TenantService(db).resolve_tenant_identity(tenant_id))
            except LedgerError as e:
                return Err(e)
            finally:
                db.close()


__all__ = ["Ledger"]
