"""
Shared test fixtures.

Every test gets its own Ledger, so no state leaks between
tests. The API client talks to an app whose get_ledger
dependency is overridden to return that same Ledger.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from bank_ledger.main import app
from bank_ledger.api.dependencies import get_ledger
from bank_ledger.services.ledger_service import Ledger


MAX_DEPOSIT = Decimal("10000")
MAX_WITHDRAW = Decimal("6000")
MAX_OUTSTANDING = Decimal("20000")
STARTING_CAPITAL = Decimal("100000")


@pytest.fixture
def ledger():
    """A fresh ledger with no accounts and no operating funds."""
    return Ledger(MAX_DEPOSIT, MAX_WITHDRAW, MAX_OUTSTANDING)


@pytest.fixture
def funded_ledger(ledger):
    """A ledger with starting capital in the operating funds."""
    ledger.inject_operating_funds(STARTING_CAPITAL)
    return ledger


@pytest.fixture
def client(funded_ledger):
    """
    Provide a test client backed by the funded test ledger.

    We override the get_ledger dependency so the app uses
    our ledger instead of the one it built at startup.
    """
    app.dependency_overrides[get_ledger] = lambda: funded_ledger
    yield TestClient(app)
    app.dependency_overrides.clear()
