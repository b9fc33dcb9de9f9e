"""Unit tests for contract owner and block height management."""

import pytest

from src.models import AuditLog, Base
from src.services import create_ledger_engine, create_session_factory
from src.services.auth_service import authorize_contract_owner, authorize_owner_or_self
from src.services.errors import LedgerNotInitializedError, UnauthorizedError
from src.services.ledger_state_service import LedgerStateService
from tests.identities import ALICE, BOB, DEPLOYER


class TestInitialize:
    def test_initialize_sets_deployer_as_owner(self, db_session):
        service = LedgerStateService(db_session)

        assert service.contract_owner == DEPLOYER
        assert service.block_height == 0

    def test_initialize_is_set_once(self, db_session):
        service = LedgerStateService(db_session)

        state = service.initialize(ALICE)

        assert state.contract_owner == DEPLOYER

    def test_uninitialized_ledger_raises(self):
        engine = create_ledger_engine("sqlite:///:memory:")
        Base.metadata.create_all(engine)
        session = create_session_factory(engine)()
        try:
            with pytest.raises(LedgerNotInitializedError):
                LedgerStateService(session).advance_block()
        finally:
            session.close()
            engine.dispose()

    def test_empty_deployer_rejected(self):
        engine = create_ledger_engine("sqlite:///:memory:")
        Base.metadata.create_all(engine)
        session = create_session_factory(engine)()
        try:
            with pytest.raises(ValueError):
                LedgerStateService(session).initialize("")
        finally:
            session.close()
            engine.dispose()


class TestBlockHeight:
    def test_advance_block_is_monotonic(self, db_session):
        service = LedgerStateService(db_session)

        heights = [service.advance_block() for _ in range(3)]

        assert heights == [1, 2, 3]
        assert service.block_height == 3


class TestTransferOwnership:
    def test_owner_can_transfer(self, db_session):
        service = LedgerStateService(db_session)

        service.transfer_ownership(DEPLOYER, ALICE)

        assert service.contract_owner == ALICE
        assert service.block_height == 1
        db_session.flush()
        audit = db_session.query(AuditLog).filter_by(action="transfer_ownership").one()
        assert audit.changes == {"previous_owner": DEPLOYER, "contract_owner": ALICE}

    def test_non_owner_cannot_transfer(self, db_session):
        service = LedgerStateService(db_session)

        with pytest.raises(UnauthorizedError):
            service.transfer_ownership(ALICE, ALICE)

        assert service.contract_owner == DEPLOYER
        assert service.block_height == 0

    def test_previous_owner_loses_privilege(self, db_session):
        service = LedgerStateService(db_session)
        service.transfer_ownership(DEPLOYER, ALICE)

        with pytest.raises(UnauthorizedError):
            service.transfer_ownership(DEPLOYER, BOB)


class TestAuthorization:
    def test_contract_owner_may_act_for_anyone(self, db_session):
        context = authorize_owner_or_self(db_session, DEPLOYER, ALICE)

        assert context.is_contract_owner is True
        assert context.acting_for_self is False

    def test_self_may_act_for_self(self, db_session):
        context = authorize_owner_or_self(db_session, ALICE, ALICE)

        assert context.is_contract_owner is False
        assert context.acting_for_self is True

    def test_third_party_rejected(self, db_session):
        with pytest.raises(UnauthorizedError):
            authorize_owner_or_self(db_session, BOB, ALICE)

    def test_contract_owner_only(self, db_session):
        assert authorize_contract_owner(db_session, DEPLOYER).identity == DEPLOYER
        with pytest.raises(UnauthorizedError):
            authorize_contract_owner(db_session, ALICE)
