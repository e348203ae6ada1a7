"""
Bank Ledger Simulator — FastAPI Application.

This is the entry point for the application.
All routers are registered here, and each app owns exactly
one Ledger on app.state.
"""

from decimal import Decimal

import uvicorn
from fastapi import FastAPI

from bank_ledger.config import Settings, get_settings
from bank_ledger.logging_config import configure_logging, get_logger
from bank_ledger.services.ledger_service import Ledger
from bank_ledger.api.health import router as health_router
from bank_ledger.api.accounts import router as accounts_router
from bank_ledger.api.loans import router as loans_router
from bank_ledger.api.ledger import router as ledger_router

logger = get_logger(__name__)


def create_ledger(settings: Settings) -> Ledger:
    """Build a Ledger from the configured limits and starting capital."""
    ledger = Ledger(*settings.ledger_limits())
    initial_funds = Decimal(settings.INITIAL_OPERATING_FUNDS)
    if initial_funds > 0:
        ledger.inject_operating_funds(initial_funds)
    return ledger


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="A learning project implementing a bank ledger with loans",
    )
    application.state.ledger = create_ledger(settings)

    # Register routers
    application.include_router(health_router)
    application.include_router(accounts_router)
    application.include_router(loans_router)
    application.include_router(ledger_router)

    logger.info(
        "app_created",
        environment=settings.ENVIRONMENT,
        operating_funds=str(application.state.ledger.operating_funds),
    )
    return application


_settings = get_settings()
configure_logging(_settings.LOG_LEVEL, json_output=not _settings.DEBUG)

app = create_app(_settings)


def run_server() -> None:
    """Run the FastAPI server"""
    uvicorn.run(
        "bank_ledger.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=_settings.DEBUG,
        log_level=_settings.LOG_LEVEL.lower(),
    )
