"""Discriminated result values returned by the Ledger facade."""

from dataclasses import dataclass
from typing import ClassVar, Generic, NoReturn, TypeVar, Union

from src.services.errors import ErrorKind, LedgerError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful operation carrying its success value."""

    value: T
    ok: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed operation carrying the typed error. The store was left unchanged."""

    error: LedgerError
    ok: ClassVar[bool] = False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> NoReturn:
        """Re-raise the underlying typed error."""
        raise self.error


Result = Union[Ok[T], Err]

__all__ = ["Ok", "Err", "Result"]
