"""Immutable snapshots of ledger records returned by query operations.

ORM instances stay inside the session that loaded them; callers of the
Ledger facade receive these dataclasses instead.
"""

from dataclasses import dataclass
from typing import Optional

from src.models import Expense, OwnershipShare, PaymentAllocation, Tenant


@dataclass(frozen=True)
class ShareRecord:
    """Ownership share of one owner in one property."""

    property_id: int
    owner: str
    percentage: int
    last_updated: int

    @classmethod
    def from_model(cls, share: OwnershipShare) -> "ShareRecord":
        return cls(
            property_id=share.property_id,
            owner=share.owner,
            percentage=share.percentage,
            last_updated=share.last_updated,
        )


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense recorded against a property."""

    property_id: int
    expense_id: int
    description: str
    amount: int
    date: int
    category: str
    paid_by: str
    distributed: bool

    @classmethod
    def from_model(cls, expense: Expense) -> "ExpenseRecord":
        return cls(
            property_id=expense.property_id,
            expense_id=expense.expense_id,
            description=expense.description,
            amount=expense.amount,
            date=expense.date,
            category=expense.category,
            paid_by=expense.paid_by,
            distributed=expense.distributed,
        )


@dataclass(frozen=True)
class AllocationRecord:
    """Per-owner allocation of an expense."""

    property_id: int
    expense_id: int
    owner: str
    amount_due: int
    paid: bool
    payment_date: Optional[int]

    @classmethod
    def from_model(cls, allocation: PaymentAllocation) -> "AllocationRecord":
        return cls(
            property_id=allocation.property_id,
            expense_id=allocation.expense_id,
            owner=allocation.owner,
            amount_due=allocation.amount_due,
            paid=allocation.paid,
            payment_date=allocation.payment_date,
        )


@dataclass(frozen=True)
class TenantRecord:
    tenant_id: int
    identity: str
    name: str
    contact: str
    rating: int

    @classmethod
    def from_model(cls, tenant: Tenant) -> "TenantRecord":
        return cls(
            tenant_id=tenant.tenant_id,
            identity=tenant.identity,
            name=tenant.name,
            contact=tenant.contact,
            rating=tenant.rating,
        )


__all__ = ["ShareRecord", "ExpenseRecord", "AllocationRecord", "TenantRecord"]
