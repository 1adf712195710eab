"""
API tests for portfolio and holding endpoints.

Tests cover:
- Portfolio CRUD (success + validation errors)
- Holding CRUD with symbol validation
- Price refresh
- Error responses (400, 404, 409, 422)
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def portfolio_id(client: TestClient) -> str:
    response = client.post("/portfolios", json={"name": "Growth"})
    return response.json()["portfolio_id"]


def add_holding(client: TestClient, portfolio_id: str, symbol: str = "AAPL", **overrides):
    body = {
        "symbol": symbol,
        "shares": "10",
        "cost_basis": "150",
        "purchase_date": "2024-01-02",
    }
    body.update(overrides)
    return client.post(f"/portfolios/{portfolio_id}/holdings", json=body)


# =============================================================================
# PORTFOLIO TESTS
# =============================================================================


class TestPortfolioAPI:
    """Tests for /portfolios endpoints."""

    def test_create_portfolio(self, client: TestClient):
        """
        GIVEN no portfolios exist
        WHEN I POST /portfolios with a name
        THEN response is 201 with the PERSONAL type by default
        """
        response = client.post("/portfolios", json={"name": "Growth"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Growth"
        assert data["portfolio_type"] == "PERSONAL"
        assert data["portfolio_id"]

    def test_create_with_empty_name_returns_422(self, client: TestClient):
        response = client.post("/portfolios", json={"name": ""})

        assert response.status_code == 422

    def test_create_with_blank_name_returns_400(self, client: TestClient):
        response = client.post("/portfolios", json={"name": "   "})

        assert response.status_code == 400
        assert response.json() == {
            "error": "VALIDATION_ERROR",
            "message": "Portfolio name is required",
        }

    def test_list_portfolios(self, client: TestClient, portfolio_id: str):
        response = client.get("/portfolios")

        assert response.status_code == 200
        assert [p["portfolio_id"] for p in response.json()] == [portfolio_id]

    def test_get_portfolio_detail(self, client: TestClient, portfolio_id: str):
        add_holding(client, portfolio_id, "AAPL", shares="10", cost_basis="150")

        response = client.get(f"/portfolios/{portfolio_id}")

        assert response.status_code == 200
        data = response.json()
        assert len(data["holdings"]) == 1
        assert Decimal(data["total_value"]) == Decimal("1752.50")
        assert Decimal(data["total_cost"]) == Decimal("1500")
        assert Decimal(data["gain_loss"]) == Decimal("252.50")

    def test_get_missing_portfolio_returns_404(self, client: TestClient):
        response = client.get("/portfolios/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_update_portfolio(self, client: TestClient, portfolio_id: str):
        response = client.put(
            f"/portfolios/{portfolio_id}",
            json={"name": "Renamed", "portfolio_type": "RETIREMENT"},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["portfolio_type"] == "RETIREMENT"

    def test_delete_portfolio(self, client: TestClient, portfolio_id: str):
        response = client.delete(f"/portfolios/{portfolio_id}")

        assert response.status_code == 204
        assert client.get(f"/portfolios/{portfolio_id}").status_code == 404


# =============================================================================
# HOLDING TESTS
# =============================================================================


class TestHoldingAPI:
    """Tests for /portfolios/{id}/holdings endpoints."""

    def test_add_holding(self, client: TestClient, portfolio_id: str):
        response = add_holding(client, portfolio_id, "tsla")

        assert response.status_code == 201
        data = response.json()
        assert data["symbol"] == "TSLA"
        assert Decimal(data["current_price"]) == Decimal("245.80")
        assert data["sector"] == "Consumer Discretionary"

    def test_invalid_symbol_returns_400(self, client: TestClient, portfolio_id: str):
        response = add_holding(client, portfolio_id, "ZZZZ")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid stock symbol"

    def test_non_positive_shares_returns_400(self, client: TestClient, portfolio_id: str):
        response = add_holding(client, portfolio_id, shares="0")

        assert response.status_code == 400
        assert response.json()["message"] == "Shares must be a positive number"

    def test_duplicate_symbol_returns_409(self, client: TestClient, portfolio_id: str):
        add_holding(client, portfolio_id, "AAPL")

        response = add_holding(client, portfolio_id, "AAPL")

        assert response.status_code == 409
        assert response.json()["error"] == "CONFLICT"

    def test_list_holdings(self, client: TestClient, portfolio_id: str):
        add_holding(client, portfolio_id, "MSFT")
        add_holding(client, portfolio_id, "AAPL")

        response = client.get(f"/portfolios/{portfolio_id}/holdings")

        assert [h["symbol"] for h in response.json()] == ["AAPL", "MSFT"]

    def test_update_holding(self, client: TestClient, portfolio_id: str):
        holding_id = add_holding(client, portfolio_id).json()["holding_id"]

        response = client.put(
            f"/portfolios/{portfolio_id}/holdings/{holding_id}",
            json={"shares": "20"},
        )

        assert response.status_code == 200
        assert Decimal(response.json()["shares"]) == Decimal("20")

    def test_delete_holding(self, client: TestClient, portfolio_id: str):
        holding_id = add_holding(client, portfolio_id).json()["holding_id"]

        response = client.delete(f"/portfolios/{portfolio_id}/holdings/{holding_id}")

        assert response.status_code == 204
        assert client.get(f"/portfolios/{portfolio_id}/holdings/{holding_id}").status_code == 404


# =============================================================================
# PRICE REFRESH TESTS
# =============================================================================


class TestUpdatePricesAPI:
    """Tests for POST /portfolios/{id}/update-prices."""

    def test_refresh(self, client: TestClient, portfolio_id: str):
        add_holding(client, portfolio_id, "AAPL")
        add_holding(client, portfolio_id, "GM")

        response = client.post(f"/portfolios/{portfolio_id}/update-prices")

        assert response.status_code == 200
        data = response.json()
        assert data["updated"] == 2
        assert data["total"] == 2
        assert data["errors"] == []
        assert data["message"] == "Updated prices for 2 symbols"

    def test_refresh_empty_portfolio(self, client: TestClient, portfolio_id: str):
        response = client.post(f"/portfolios/{portfolio_id}/update-prices")

        assert response.status_code == 200
        assert response.json()["message"] == "No holdings to update"
