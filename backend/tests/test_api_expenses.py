"""Tests for expenses API endpoints."""

import pytest
from datetime import date
from decimal import Decimal

from pennywise.api.expenses import build_filters
from pennywise.exceptions import ValidationError


class TestBuildFilters:
    """Test default filter construction."""

    def test_defaults_to_calendar_year(self):
        filters = build_filters(today=date(2025, 6, 15))
        assert filters.from_date == date(2025, 1, 1)
        assert filters.to_date == date(2025, 12, 31)

    def test_explicit_range_kept(self):
        filters = build_filters(date(2024, 3, 1), date(2024, 3, 31), today=date(2025, 6, 15))
        assert filters.to_params() == {"from": "2024-03-01", "to": "2024-03-31"}

    def test_inverted_range(self):
        with pytest.raises(ValidationError):
            build_filters(date(2025, 3, 1), date(2025, 2, 1))

    def test_inverted_amounts(self):
        with pytest.raises(ValidationError):
            build_filters(min_amount=Decimal("50"), max_amount=Decimal("10"))


class TestExpensesAPI:
    """Test expenses endpoints."""

    def test_list_expenses_empty(self, client):
        """Should return an empty list."""
        response = client.get("/api/v1/expenses")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_uses_current_year(self, client, remote):
        client.get("/api/v1/expenses")
        params = remote.requests[-1].url.params
        assert params["from"] == f"{date.today().year}-01-01"
        assert params["to"] == f"{date.today().year}-12-31"

    def test_list_with_filters(self, client, remote, sample_category):
        remote.add_expense("2025-02-01", 40, "Market", sample_category["id"])
        remote.add_expense("2025-02-02", 400, "Laptop")
        response = client.get("/api/v1/expenses", params={
            "from": "2025-01-01",
            "to": "2025-12-31",
            "min_amount": "10",
            "max_amount": "100",
        })
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["description"] == "Market"
        assert data[0]["category"]["name"] == "Groceries"

    def test_negative_filter_rejected(self, client):
        response = client.get("/api/v1/expenses", params={"min_amount": "-1"})
        assert response.status_code == 422

    def test_create_expense(self, client, remote):
        response = client.post("/api/v1/expenses", json={
            "description": "Debug Expense",
            "amount": "123.45",
            "date": "2025-12-13"
        })
        assert response.status_code == 201
        data = response.json()
        assert data["description"] == "Debug Expense"
        assert Decimal(data["amount"]) == Decimal("123.45")
        assert len(remote.expenses) == 1

    def test_create_negative_expense(self, client, remote):
        response = client.post("/api/v1/expenses", json={
            "description": "Refund",
            "amount": "-5",
            "date": "2025-12-13"
        })
        assert response.status_code == 422
        assert remote.mutations() == []

    def test_create_expense_too_many_places(self, client, remote):
        response = client.post("/api/v1/expenses", json={
            "description": "Lunch",
            "amount": "1.999",
            "date": "2025-12-13"
        })
        assert response.status_code == 422
        assert remote.requests == []

    def test_create_expense_with_category(self, client, remote, sample_category):
        response = client.post("/api/v1/expenses", json={
            "description": "Bread",
            "amount": "4.20",
            "date": "2025-12-13",
            "category_id": sample_category["id"]
        })
        assert response.status_code == 201
        assert response.json()["category"]["name"] == "Groceries"
        assert remote.mutations()[0].url.params["categoryId"] == str(sample_category["id"])

    def test_create_bad_date(self, client, remote):
        response = client.post("/api/v1/expenses", json={
            "description": "Lunch",
            "amount": "5",
            "date": "2025-13-45"
        })
        assert response.status_code == 422
        assert remote.requests == []

    def test_delete_expense(self, client, remote):
        expense = remote.add_expense("2025-02-01", 40)
        response = client.delete(f"/api/v1/expenses/{expense['id']}")
        assert response.status_code == 204
        assert remote.expenses == {}

    def test_delete_missing_expense(self, client):
        response = client.delete("/api/v1/expenses/999")
        assert response.status_code == 404
