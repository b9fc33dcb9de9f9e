"""FastAPI application for the expense ledger."""

import logging

from fastapi import FastAPI

from src.api.ledger_api import router as ledger_router
from src.services.ledger import Ledger

logger = logging.getLogger(__name__)


def create_app(ledger: Ledger) -> FastAPI:
    """Create the API application bound to an initialized ledger.

    Args:
        ledger: Ledger whose contract owner has already been initialized

    Returns:
        FastAPI instance serving /api/ledger
    """
    app = FastAPI(
        title="PropLedger",
        description="Property expense allocation ledger",
        version="0.1.0",
    )
    app.state.ledger = ledger
    app.include_router(ledger_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    logger.info("Ledger API application created")
    return app
