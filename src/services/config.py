"""Configuration loading for the ledger server.

Loads settings from .env file and environment variables with sensible defaults.
Validates required configuration and provides clear error messages.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from src.services import DEFAULT_DATABASE_URL
from src.services.logging import DEFAULT_LOG_FILE


@dataclass
class LedgerConfig:
    """Configuration for the ledger server process."""

    contract_owner: str
    """Deployer identity, becomes contract owner on first start (required)"""

    database_url: str = DEFAULT_DATABASE_URL
    """SQLAlchemy database URL (default: local SQLite)"""

    log_file: str = DEFAULT_LOG_FILE
    """Path to log file (default: logs/server.log)"""

    api_host: str = "0.0.0.0"
    """Interface the HTTP API binds to"""

    api_port: int = 8000
    """Port the HTTP API listens on"""


def load_config(env_file: str = ".env") -> LedgerConfig:
    """
    Load configuration from .env file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (CONTRACT_OWNER, DATABASE_URL, LOG_FILE, API_HOST, API_PORT)
    2. .env file in project root
    3. Default values

    Returns:
        LedgerConfig with all required settings

    Raises:
        ValueError: If required configuration is missing or invalid

    Example:
        Create .env file:
        ```
        CONTRACT_OWNER=ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM
        DATABASE_URL=sqlite:///./propledger.db
        ```

        Then call:
        ```
        config = load_config()
        ```
    """
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path)

    contract_owner = os.getenv("CONTRACT_OWNER", "").strip()
    database_url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)
    api_host = os.getenv("API_HOST", "0.0.0.0")
    api_port_raw = os.getenv("API_PORT", "8000")

    if not contract_owner:
        raise ValueError(
            "CONTRACT_OWNER not configured. "
            "Set CONTRACT_OWNER environment variable or in .env file"
        )

    try:
        api_port = int(api_port_raw)
    except ValueError as e:
        raise ValueError(f"API_PORT must be an integer, got {api_port_raw!r}") from e

    if not 1 <= api_port <= 65535:
        raise ValueError(f"API_PORT must be between 1 and 65535, got {api_port}")

    return LedgerConfig(
        contract_owner=contract_owner,
        database_url=database_url,
        log_file=log_file,
        api_host=api_host,
        api_port=api_port,
    )
