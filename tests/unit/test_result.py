"""Unit tests for typed errors and result values."""

import pytest

from src.services.errors import (
    AlreadyDistributedError,
    AlreadyPaidError,
    ErrorKind,
    NotYetDistributedError,
    UnauthorizedError,
)
from src.services.result import Err, Ok


class TestErrorKind:
    def test_codes_follow_contract_numbering(self):
        assert ErrorKind.UNAUTHORIZED.code == 1
        assert ErrorKind.ALREADY_EXISTS.code == 2
        assert ErrorKind.NOT_FOUND.code == 3
        assert ErrorKind.INVALID_PERCENTAGE.code == 4
        assert ErrorKind.ALREADY_DISTRIBUTED.code == 5
        assert ErrorKind.ALREADY_PAID.code == 6

    def test_distribution_gate_kinds_are_distinct(self):
        """Already-distributed and not-yet-distributed never share a code."""
        assert AlreadyDistributedError.kind != NotYetDistributedError.kind
        assert ErrorKind.NOT_YET_DISTRIBUTED.code == 7

    def test_every_kind_has_unique_code(self):
        codes = [kind.code for kind in ErrorKind]
        assert len(codes) == len(set(codes))

    def test_default_and_custom_messages(self):
        assert AlreadyPaidError().message == "Allocation already paid"
        assert str(UnauthorizedError("nope")) == "nope"


class TestResult:
    def test_ok_unwraps_value(self):
        result = Ok(1250)

        assert result.ok is True
        assert result.unwrap() == 1250

    def test_err_exposes_kind_and_reraises(self):
        result = Err(AlreadyPaidError("paid at height 4"))

        assert result.ok is False
        assert result.kind is ErrorKind.ALREADY_PAID
        assert result.message == "paid at height 4"
        with pytest.raises(AlreadyPaidError):
            result.unwrap()
