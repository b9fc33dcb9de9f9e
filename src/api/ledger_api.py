"""Ledger API endpoints.

Exposes the ledger operation surface over HTTP. The calling identity is
taken from the X-Caller header; every write returns either its success
value or a typed error body:

    {"detail": {"error": {"code": "already_paid", "kind_code": 6, "message": "..."}}}
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Header, Request
from pydantic import BaseModel, ConfigDict, Field

from src.api.errors import raise_ledger_error
from src.models.expense import MAX_AMOUNT
from src.services.ledger import Ledger
from src.services.result import Result

logger = logging.getLogger(__name__)

# Create router for ledger endpoints
router = APIRouter(prefix="/api/ledger", tags=["ledger"])


def get_ledger(request: Request) -> Ledger:
    """Ledger instance attached to the application at startup."""
    return request.app.state.ledger


def _unwrap(result: Result[Any]) -> Any:
    if not result.ok:
        raise_ledger_error(result)
    return result.value


# Request schemas
class RegisterShareRequest(BaseModel):
    property_id: int = Field(ge=0)
    owner: str = Field(min_length=1)
    percentage: int = Field(ge=0)


class RecordExpenseRequest(BaseModel):
    property_id: int = Field(ge=0)
    expense_id: int = Field(ge=0)
    description: str
    amount: int = Field(ge=0, le=MAX_AMOUNT, description="Amount in the smallest currency unit")
    category: str


class AllocateExpenseRequest(BaseModel):
    owner: str = Field(min_length=1)


class TransferOwnershipRequest(BaseModel):
    new_owner: str = Field(min_length=1)


class RegisterTenantRequest(BaseModel):
    tenant_id: int = Field(ge=0)
    name: str
    contact: str


# Response schemas
class OkResponse(BaseModel):
    """Acknowledgement of a successful write."""

    ok: bool = True


class AllocationAmountResponse(BaseModel):
    amount_due: int


class ShareResponse(BaseModel):
    property_id: int
    owner: str
    percentage: int
    last_updated: int

    model_config = ConfigDict(from_attributes=True)


class ExpenseResponse(BaseModel):
    property_id: int
    expense_id: int
    description: str
    amount: int
    date: int
    category: str
    paid_by: str
    distributed: bool

    model_config = ConfigDict(from_attributes=True)


class AllocationResponse(BaseModel):
    property_id: int
    expense_id: int
    owner: str
    amount_due: int
    paid: bool
    payment_date: int | None = None

    model_config = ConfigDict(from_attributes=True)


class TenantResponse(BaseModel):
    tenant_id: int
    identity: str
    name: str
    contact: str
    rating: int

    model_config = ConfigDict(from_attributes=True)


class LedgerInfoResponse(BaseModel):
    contract_owner: str
    block_height: int


class TenantIdentityResponse(BaseModel):
    tenant_id: int
    identity: str


# Contract owner


@router.get("/info", response_model=LedgerInfoResponse)
def ledger_info(ledger: Ledger = Depends(get_ledger)) -> LedgerInfoResponse:  # noqa: B008
    return LedgerInfoResponse(
        contract_owner=ledger.get_contract_owner(),
        block_height=ledger.get_block_height(),
    )


@router.post("/owner/transfer", response_model=OkResponse)
def transfer_ownership(
    request: TransferOwnershipRequest,
    caller: str = Header(..., alias="X-Caller"),  # noqa: B008
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> OkResponse:
    _unwrap(ledger.transfer_ownership(caller, request.new_owner))
    return OkResponse()


# Ownership shares


@router.post("/shares", response_model=OkResponse)
def register_share(
    request: RegisterShareRequest,
    caller: str = Header(..., alias="X-Caller"),  # noqa: B008
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> OkResponse:
    """Register or overwrite an ownership share.

    Raises:
        403: Caller is neither the contract owner nor the share owner
        400: Percentage above 100
    """
    _unwrap(ledger.register_share(caller, request.property_id, request.owner, request.percentage))
    return OkResponse()


@router.get("/shares/{property_id}/{owner}", response_model=ShareResponse | None)
def get_share(
    property_id: int,
    owner: str,
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> ShareResponse | None:
    share = ledger.get_share(property_id, owner)
    return ShareResponse.model_validate(share) if share else None


# Expenses


@router.post("/expenses", response_model=OkResponse)
def record_expense(
    request: RecordExpenseRequest,
    caller: str = Header(..., alias="X-Caller"),  # noqa: B008
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> OkResponse:
    """Record a new expense.

    Raises:
        409: Expense id already used for this property
    """
    _unwrap(
        ledger.record_expense(
            caller,
            request.property_id,
            request.expense_id,
            request.description,
            request.amount,
            request.category,
        )
    )
    return OkResponse()


@router.get("/expenses/{property_id}/{expense_id}", response_model=ExpenseResponse | None)
def get_expense(
    property_id: int,
    expense_id: int,
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> ExpenseResponse | None:
    expense = ledger.get_expense(property_id, expense_id)
    return ExpenseResponse.model_validate(expense) if expense else None


@router.post("/expenses/{property_id}/{expense_id}/distribute", response_model=OkResponse)
def distribute_expense(
    property_id: int,
    expense_id: int,
    caller: str = Header(..., alias="X-Caller"),  # noqa: B008
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> OkResponse:
    """Open an expense for allocation.

    Raises:
        404: Expense not found
        409: Expense already distributed
    """
    _unwrap(ledger.distribute_expense(caller, property_id, expense_id))
    return OkResponse()


# Allocations


@router.post(
    "/expenses/{property_id}/{expense_id}/allocations",
    response_model=AllocationAmountResponse,
)
def allocate_expense(
    property_id: int,
    expense_id: int,
    request: AllocateExpenseRequest,
    caller: str = Header(..., alias="X-Caller"),  # noqa: B008
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> AllocationAmountResponse:
    """Allocate an expense to one owner.

    Raises:
        404: Expense or ownership share not found
        409: Expense not yet distributed
    """
    amount_due = _unwrap(ledger.allocate_expense(caller, property_id, expense_id, request.owner))
    return AllocationAmountResponse(amount_due=amount_due)


@router.post("/expenses/{property_id}/{expense_id}/payment", response_model=OkResponse)
def record_payment(
    property_id: int,
    expense_id: int,
    caller: str = Header(..., alias="X-Caller"),  # noqa: B008
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> OkResponse:
    """Mark the caller's own allocation as paid.

    Raises:
        404: Caller has no allocation for this expense
        409: Allocation already paid
    """
    _unwrap(ledger.record_payment(caller, property_id, expense_id))
    return OkResponse()


@router.get(
    "/allocations/{property_id}/{expense_id}/{owner}",
    response_model=AllocationResponse | None,
)
def get_allocation(
    property_id: int,
    expense_id: int,
    owner: str,
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> AllocationResponse | None:
    allocation = ledger.get_allocation(property_id, expense_id, owner)
    return AllocationResponse.model_validate(allocation) if allocation else None


# Tenant directory


@router.post("/tenants", response_model=OkResponse)
def register_tenant(
    request: RegisterTenantRequest,
    caller: str = Header(..., alias="X-Caller"),  # noqa: B008
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> OkResponse:
    _unwrap(ledger.register_tenant(caller, request.tenant_id, request.name, request.contact))
    return OkResponse()


@router.get("/tenants/{tenant_id}", response_model=TenantResponse | None)
def get_tenant(
    tenant_id: int,
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> TenantResponse | None:
    tenant = ledger.get_tenant(tenant_id)
    return TenantResponse.model_validate(tenant) if tenant else None


@router.get("/tenants/{tenant_id}/identity", response_model=TenantIdentityResponse)
def resolve_tenant_identity(
    tenant_id: int,
    ledger: Ledger = Depends(get_ledger),  # noqa: B008
) -> TenantIdentityResponse:
    """Resolve a tenant id to its identity.

    Raises:
        404: Tenant not registered
    """
    identity = _unwrap(ledger.resolve_tenant_identity(tenant_id))
    return TenantIdentityResponse(tenant_id=tenant_id, identity=identity)
