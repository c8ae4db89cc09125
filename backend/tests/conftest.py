"""Shared test fixtures."""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from pennywise.client import FinanceClient
from pennywise.dependencies import get_transport
from pennywise.main import app

REMOTE_URL = "http://remote.test/api/v1"


class FakeRemote:
    """In-memory stand-in for the remote finance API."""

    def __init__(self):
        self.users: Dict[str, str] = {}
        self.categories: Dict[int, Dict[str, Any]] = {}
        self.expenses: Dict[int, Dict[str, Any]] = {}
        self.budgets: Dict[int, Dict[str, Any]] = {}
        self.summary: Dict[str, Any] = {"total": 0, "byCategory": {}, "monthOverMonthChange": 0}
        self.forecast: Dict[str, Any] = {"predictedTotal": 0, "confidence": 0}
        self.alerts: List[str] = []
        self.requests: List[httpx.Request] = []
        self.fail_with: Optional[int] = None
        self.unreachable = False
        self._next_id = 1

    def _id(self) -> int:
        next_id = self._next_id
        self._next_id += 1
        return next_id

    def add_category(self, name: str) -> Dict[str, Any]:
        category = {"id": self._id(), "name": name}
        self.categories[category["id"]] = category
        return category

    def add_expense(self, date: str, amount: Any, description: str = "Expense",
                    category_id: Optional[int] = None) -> Dict[str, Any]:
        expense = {
            "id": self._id(),
            "description": description,
            "amount": amount,
            "date": date,
            "category": self.categories.get(category_id) if category_id else None,
        }
        self.expenses[expense["id"]] = expense
        return expense

    def add_budget(self, month: str, amount: Any, category_id: Optional[int] = None,
                   budget_id: Optional[int] = None) -> Dict[str, Any]:
        budget = {
            "id": budget_id or self._id(),
            "amount": amount,
            "month": month,
            "category": self.categories.get(category_id) if category_id else None,
        }
        self.budgets[budget["id"]] = budget
        return budget

    def mutations(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method != "GET"]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_with:
            return httpx.Response(self.fail_with, json={"error": "remote failure"})

        path = request.url.path.removeprefix("/api/v1")
        parts = [p for p in path.split("/") if p]
        body = json.loads(request.content) if request.content else None
        method = request.method

        if parts == ["auth", "register"]:
            if body["username"] in self.users:
                return httpx.Response(409, json={"error": "exists"})
            self.users[body["username"]] = body["password"]
            return httpx.Response(200, json={"message": "registered"})
        if parts == ["auth", "login"]:
            if self.users.get(body["username"]) != body["password"]:
                return httpx.Response(401, json={"error": "bad credentials"})
            return httpx.Response(200, json={"token": f"token-{body['username']}"})

        if parts == ["expenses"] and method == "GET":
            return httpx.Response(200, json=self._filter_expenses(request.url.params))
        if parts == ["expenses"] and method == "POST":
            category_id = request.url.params.get("categoryId")
            expense = self.add_expense(body["date"], body["amount"], body["description"],
                                       int(category_id) if category_id else None)
            return httpx.Response(201, json=expense)
        if parts[:1] == ["expenses"] and method == "DELETE":
            if self.expenses.pop(int(parts[1]), None) is None:
                return httpx.Response(404, json={"error": "not found"})
            return httpx.Response(204)

        if parts == ["categories"] and method == "GET":
            return httpx.Response(200, json=list(self.categories.values()))
        if parts == ["categories"] and method == "POST":
            return httpx.Response(201, json=self.add_category(body["name"]))

        if parts == ["budgets"] and method == "GET":
            return httpx.Response(200, json=list(self.budgets.values()))
        if parts == ["budgets"] and method == "POST":
            budget = self.add_budget(body["month"], body["amount"], body["categoryId"])
            return httpx.Response(201, json=budget)
        if parts[:1] == ["budgets"] and method == "PUT":
            budget_id = int(parts[1])
            if budget_id not in self.budgets:
                return httpx.Response(404, json={"error": "not found"})
            budget = self.add_budget(body["month"], body["amount"], body["categoryId"], budget_id)
            return httpx.Response(200, json=budget)
        if parts[:1] == ["budgets"] and method == "DELETE":
            if self.budgets.pop(int(parts[1]), None) is None:
                return httpx.Response(404, json={"error": "not found"})
            return httpx.Response(204)

        if parts == ["analytics", "summary"]:
            return httpx.Response(200, json=self.summary)
        if parts == ["analytics", "forecast"]:
            return httpx.Response(200, json=self.forecast)
        if parts == ["alerts"]:
            return httpx.Response(200, json=self.alerts)

        return httpx.Response(404, json={"error": f"no route for {method} {path}"})

    def _filter_expenses(self, params) -> List[Dict[str, Any]]:
        items = list(self.expenses.values())
        if "from" in params:
            items = [e for e in items if e["date"] >= params["from"]]
        if "to" in params:
            items = [e for e in items if e["date"] <= params["to"]]
        if "category" in params:
            category_id = int(params["category"])
            items = [e for e in items if e["category"] and e["category"]["id"] == category_id]
        if "minAmount" in params:
            items = [e for e in items if float(e["amount"]) >= float(params["minAmount"])]
        if "maxAmount" in params:
            items = [e for e in items if float(e["amount"]) <= float(params["maxAmount"])]
        return items


@pytest.fixture
def remote():
    """A fresh fake remote service for each test."""
    return FakeRemote()


@pytest.fixture
def transport(remote):
    return httpx.MockTransport(remote.handle)


@pytest.fixture
def finance_client(transport):
    """A remote API client wired to the fake remote service."""
    with FinanceClient(token="test-token", base_url=REMOTE_URL, transport=transport) as client:
        yield client


@pytest.fixture
def client(transport):
    """Create a test client whose outbound calls hit the fake remote service."""
    app.dependency_overrides[get_transport] = lambda: transport
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_category(remote):
    """Create a sample category."""
    return remote.add_category("Groceries")


@pytest.fixture
def overall_budget(remote):
    """An overall budget for June 2025."""
    return remote.add_budget("2025-06", 500)
