"""
Tests for the bank-wide ledger endpoints.
"""

from decimal import Decimal


def as_decimal(value):
    return Decimal(str(value))


class TestSummary:

    def test_summary(self, client):
        client.post("/accounts", json={"owner": "Alice", "starting_deposit": "5000"})

        response = client.get("/ledger")

        assert response.status_code == 200
        data = response.json()
        assert as_decimal(data["operating_funds"]) == Decimal("105000")
        assert as_decimal(data["max_deposit"]) == Decimal("10000")
        assert as_decimal(data["max_withdraw"]) == Decimal("6000")
        assert as_decimal(data["max_outstanding"]) == Decimal("20000")
        assert data["account_count"] == 1


class TestLimits:

    def test_update_one_limit(self, client, funded_ledger):
        response = client.patch("/ledger/limits", json={"max_deposit": "500"})

        assert response.status_code == 200
        assert as_decimal(response.json()["max_deposit"]) == Decimal("500")
        assert funded_ledger.max_deposit == Decimal("500")
        assert funded_ledger.max_withdraw == Decimal("6000")

    def test_new_limit_applies_to_deposits(self, client):
        client.patch("/ledger/limits", json={"max_deposit": "500"})

        response = client.post(
            "/accounts", json={"owner": "Alice", "starting_deposit": "501"}
        )

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "LimitExceeded"

    def test_non_positive_limit_returns_400(self, client, funded_ledger):
        response = client.patch(
            "/ledger/limits",
            json={"max_withdraw": "100", "max_outstanding": "0"},
        )

        assert response.status_code == 400
        assert funded_ledger.max_withdraw == Decimal("6000")

    def test_empty_update_returns_422(self, client):
        response = client.patch("/ledger/limits", json={})

        assert response.status_code == 422


class TestFunds:

    def test_inject_funds(self, client, funded_ledger):
        response = client.post("/ledger/funds", json={"amount": "2500"})

        assert response.status_code == 200
        assert as_decimal(response.json()["operating_funds"]) == Decimal("102500")
        assert funded_ledger.operating_funds == Decimal("102500")

    def test_inject_negative_returns_400(self, client):
        response = client.post("/ledger/funds", json={"amount": "-1"})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "InvalidAmount"
        assert detail["kind"] == "CAPITAL"
