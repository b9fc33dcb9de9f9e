"""Database connection and session management."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

DEFAULT_DATABASE_URL = "sqlite:///./propledger.db"


def create_ledger_engine(database_url: str) -> Engine:
    """Create an engine for the ledger store.

    SQLite uses StaticPool: one shared connection, which also keeps
    in-memory databases alive between sessions.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=False, bind=engine)


__all__ = [
    "DEFAULT_DATABASE_URL",
    "create_ledger_engine",
    "create_session_factory",
]
