"""Unit tests for the expense ledger."""

import pytest

from src.models.expense import MAX_AMOUNT
from src.services.errors import AlreadyDistributedError, AlreadyExistsError, NotFoundError
from src.services.expense_service import ExpenseService
from tests.identities import ALICE, BOB


class TestExpenseService:
    """Test expense recording and distribution."""

    @pytest.fixture
    def service(self, db_session):
        return ExpenseService(db_session)

    def test_record_expense(self, service):
        expense = service.record_expense(ALICE, 1, 1, "Roof repair", 5000, "Maintenance")

        assert expense.description == "Roof repair"
        assert expense.amount == 5000
        assert expense.category == "Maintenance"
        assert expense.paid_by == ALICE
        assert expense.distributed is False
        assert expense.date == 1

    def test_duplicate_key_fails_regardless_of_fields(self, service):
        service.record_expense(ALICE, 1, 1, "Roof repair", 5000, "Maintenance")

        with pytest.raises(AlreadyExistsError):
            service.record_expense(BOB, 1, 1, "Other", 1, "Utilities")

        expense = service.get_expense(1, 1)
        assert expense.paid_by == ALICE
        assert expense.amount == 5000

    def test_same_expense_id_on_other_property(self, service):
        service.record_expense(ALICE, 1, 1, "Roof repair", 5000, "Maintenance")
        service.record_expense(ALICE, 2, 1, "Gutter", 300, "Maintenance")

        assert service.get_expense(2, 1).amount == 300

    def test_negative_amount_is_precondition_violation(self, service):
        with pytest.raises(ValueError):
            service.record_expense(ALICE, 1, 1, "Refund", -5, "Other")

    def test_amount_above_storage_limit_is_precondition_violation(self, service):
        with pytest.raises(ValueError):
            service.record_expense(ALICE, 1, 1, "Capex", MAX_AMOUNT + 1, "Capex")

    def test_zero_amount_allowed(self, service):
        service.record_expense(ALICE, 1, 1, "Inspection", 0, "Other")

        assert service.get_expense(1, 1).amount == 0

    def test_distribute_expense(self, service):
        service.record_expense(ALICE, 1, 1, "Roof repair", 5000, "Maintenance")

        service.distribute_expense(ALICE, 1, 1)

        assert service.get_expense(1, 1).distributed is True

    def test_any_caller_may_distribute(self, service):
        service.record_expense(ALICE, 1, 1, "Roof repair", 5000, "Maintenance")

        service.distribute_expense(BOB, 1, 1)

        assert service.get_expense(1, 1).distributed is True

    def test_distribute_missing_expense(self, service):
        with pytest.raises(NotFoundError):
            service.distribute_expense(ALICE, 1, 99)

    def test_distribute_twice_fails(self, service):
        service.record_expense(ALICE, 1, 1, "Roof repair", 5000, "Maintenance")
        service.distribute_expense(ALICE, 1, 1)

        with pytest.raises(AlreadyDistributedError):
            service.distribute_expense(ALICE, 1, 1)

        assert service.get_expense(1, 1).distributed is True

    def test_get_missing_expense(self, service):
        assert service.get_expense(5, 5) is None
