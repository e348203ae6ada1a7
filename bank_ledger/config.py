"""
Application configuration.

All configuration is loaded from environment variables.
The ledger limits set here are only the starting values —
they can be changed at runtime through the Ledger.
"""

import os
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = os.getenv("APP_NAME", "Bank Ledger Simulator")
    APP_VERSION: str = os.getenv("APP_VERSION", "0.1.0")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Ledger limits (single transaction ceilings)
    MAX_DEPOSIT: str = os.getenv("MAX_DEPOSIT", "10000")
    MAX_WITHDRAW: str = os.getenv("MAX_WITHDRAW", "6000")
    MAX_OUTSTANDING: str = os.getenv("MAX_OUTSTANDING", "20000")

    # Capital injected into the operating funds at startup
    INITIAL_OPERATING_FUNDS: str = os.getenv("INITIAL_OPERATING_FUNDS", "0")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    def ledger_limits(self) -> tuple[Decimal, Decimal, Decimal]:
        """Return (max_deposit, max_withdraw, max_outstanding)."""
        return (
            Decimal(self.MAX_DEPOSIT),
            Decimal(self.MAX_WITHDRAW),
            Decimal(self.MAX_OUTSTANDING),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused, so
    environment variables are only read at first use.
    """
    return Settings()
