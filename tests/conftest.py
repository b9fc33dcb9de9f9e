"""Pytest configuration: in-memory ledger stores."""

import pytest

from src.models import Base
from src.services import create_ledger_engine, create_session_factory
from src.services.ledger import Ledger
from src.services.ledger_state_service import LedgerStateService
from tests.identities import DEPLOYER


@pytest.fixture
def engine():
    """Fresh in-memory database with all tables."""
    engine = create_ledger_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Session on an initialized ledger (DEPLOYER is contract owner)."""
    SessionLocal = create_session_factory(engine)
    session = SessionLocal()
    LedgerStateService(session).initialize(DEPLOYER)
    session.commit()
    yield session
    session.close()


@pytest.fixture
def ledger(engine):
    """Ledger facade initialized with DEPLOYER as contract owner."""
    ledger = Ledger.from_engine(engine)
    ledger.initialize(DEPLOYER)
    return ledger
