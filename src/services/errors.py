"""Typed ledger errors.

Each error carries an ErrorKind with a stable numeric code. Services raise
these; the Ledger facade turns them into Err results.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds exposed on the public operation surface."""

    UNAUTHORIZED = "unauthorized"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    INVALID_PERCENTAGE = "invalid_percentage"
    ALREADY_DISTRIBUTED = "already_distributed"
    ALREADY_PAID = "already_paid"
    NOT_YET_DISTRIBUTED = "not_yet_distributed"

    @property
    def code(self) -> int:
        return ERROR_CODES[self]


ERROR_CODES = {
    ErrorKind.UNAUTHORIZED: 1,
    ErrorKind.ALREADY_EXISTS: 2,
    ErrorKind.NOT_FOUND: 3,
    ErrorKind.INVALID_PERCENTAGE: 4,
    ErrorKind.ALREADY_DISTRIBUTED: 5,
    ErrorKind.ALREADY_PAID: 6,
    ErrorKind.NOT_YET_DISTRIBUTED: 7,
}


class LedgerError(Exception):
    """Base exception for ledger operation failures."""

    kind: ErrorKind
    default_message = "Ledger operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(LedgerError):
    """Caller lacks the identity required for the operation."""

    kind = ErrorKind.UNAUTHORIZED
    default_message = "Caller is not authorized"


class AlreadyExistsError(LedgerError):
    """Record already present at the composite key."""

    kind = ErrorKind.ALREADY_EXISTS
    default_message = "Record already exists"


class NotFoundError(LedgerError):
    """Referenced record is absent."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Record not found"


class InvalidPercentageError(LedgerError):
    """Percentage outside [0, 100]."""

    kind = ErrorKind.INVALID_PERCENTAGE
    default_message = "Percentage must be between 0 and 100"


class AlreadyDistributedError(LedgerError):
    """Expense distribution gate was already opened."""

    kind = ErrorKind.ALREADY_DISTRIBUTED
    default_message = "Expense already distributed"


class NotYetDistributedError(LedgerError):
    """Expense must be distributed before it can be allocated."""

    kind = ErrorKind.NOT_YET_DISTRIBUTED
    default_message = "Expense not yet distributed"


class AlreadyPaidError(LedgerError):
    """Allocation was already marked paid."""

    kind = ErrorKind.ALREADY_PAID
    default_message = "Allocation already paid"


class LedgerNotInitializedError(RuntimeError):
    """Ledger used before its state row was initialized (precondition, not an Err)."""


__all__ = [
    "ERROR_CODES",
    "ErrorKind",
    "LedgerError",
    "UnauthorizedError",
    "AlreadyExistsError",
    "NotFoundError",
    "InvalidPercentageError",
    "AlreadyDistributedError",
    "NotYetDistributedError",
    "AlreadyPaidError",
    "LedgerNotInitializedError",
]
