"""Main application entry point."""

import argparse
import logging

import uvicorn
from dotenv import load_dotenv

from src.api.app import create_app
from src.services.config import load_config
from src.services.ledger import Ledger
from src.services.logging import setup_server_logging

logger = logging.getLogger(__name__)


def build_ledger(database_url: str, deployer: str) -> Ledger:
    """Open the ledger store and make sure the contract owner is set."""
    ledger = Ledger.from_url(database_url)
    owner = ledger.initialize(deployer)
    if owner != deployer:
        logger.warning(f"Contract owner is {owner}; CONTRACT_OWNER={deployer} ignored")
    return ledger


def main():
    """Main entry point."""
    # Load environment variables
    load_dotenv()

    config = load_config()
    setup_server_logging(config.log_file)

    parser = argparse.ArgumentParser(description="PropLedger API server")
    parser.add_argument("--host", default=config.api_host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.api_port, help="Port to bind to")
    args = parser.parse_args()

    ledger = build_ledger(config.database_url, config.contract_owner)
    app = create_app(ledger)

    logger.info(f"Starting Uvicorn server on {args.host}:{args.port}...")
    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
