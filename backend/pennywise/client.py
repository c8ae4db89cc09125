import json
import logging
from decimal import Decimal
from typing import Optional, Dict, Any, List, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError as PydanticValidationError

from pennywise.config import settings
from pennywise.exceptions import TransportError
from pennywise.schemas.analytics import AnalyticsSummary, Forecast
from pennywise.schemas.budget import BudgetRecord
from pennywise.schemas.category import CategoryResponse
from pennywise.schemas.expense import ExpenseCreate, ExpenseFilters, ExpenseResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _wire_amount(amount: Decimal) -> str:
    # Plain decimal string, never a binary float
    return format(amount, "f")


class FinanceClient:
    """Client for the remote finance REST API."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.base_url = base_url or settings.remote_api_url
        self.token = token
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._http = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout if timeout is not None else settings.remote_timeout,
            transport=transport,
        )

    def close(self):
        self._http.close()

    def __enter__(self) -> "FinanceClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None
    ) -> Any:
        try:
            response = self._http.request(method, path, params=params, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(f"Remote service unreachable: {e}") from e

        if response.is_error:
            logger.error(f"{method} {path} returned {response.status_code}")
            raise TransportError(
                f"Remote service returned {response.status_code} for {method} {path}",
                status_code=response.status_code
            )

        if not response.content:
            return None

        try:
            # Decimal parsing keeps monetary values out of binary floating point
            return json.loads(response.text, parse_float=Decimal)
        except ValueError as e:
            logger.error(f"{method} {path} returned a non-JSON body")
            raise TransportError(f"Remote service returned invalid JSON for {method} {path}") from e

    def _parse(self, model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Unexpected {model.__name__} payload: {e}")
            raise TransportError(f"Remote service returned a malformed {model.__name__}") from e

    def _parse_list(self, model: Type[ModelT], data: Any) -> List[ModelT]:
        if not isinstance(data, list):
            raise TransportError(f"Remote service returned a malformed {model.__name__} list")
        return [self._parse(model, item) for item in data]

    # Auth

    def login(self, username: str, password: str) -> str:
        data = self._request("POST", "/auth/login", payload={"username": username, "password": password})
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise TransportError("Remote service returned no token")
        return token

    def register(self, username: str, password: str) -> None:
        self._request("POST", "/auth/register", payload={"username": username, "password": password})

    # Expenses

    def list_expenses(self, filters: Optional[ExpenseFilters] = None) -> List[ExpenseResponse]:
        params = filters.to_params() if filters else None
        return self._parse_list(ExpenseResponse, self._request("GET", "/expenses", params=params))

    def create_expense(self, expense: ExpenseCreate) -> ExpenseResponse:
        payload: Dict[str, Any] = {
            "description": expense.description,
            "amount": _wire_amount(expense.amount),
            "date": expense.date.isoformat(),
        }
        # The remote takes the category on the query string, not in the body
        params = {"categoryId": expense.category_id} if expense.category_id is not None else None
        return self._parse(
            ExpenseResponse,
            self._request("POST", "/expenses", params=params, payload=payload)
        )

    def delete_expense(self, expense_id: int) -> None:
        self._request("DELETE", f"/expenses/{expense_id}")

    # Categories

    def list_categories(self) -> List[CategoryResponse]:
        return self._parse_list(CategoryResponse, self._request("GET", "/categories"))

    def create_category(self, name: str) -> CategoryResponse:
        return self._parse(CategoryResponse, self._request("POST", "/categories", payload={"name": name}))

    # Budgets

    def list_budgets(self) -> List[BudgetRecord]:
        return self._parse_list(BudgetRecord, self._request("GET", "/budgets"))

    def create_budget(self, month: str, amount: Decimal, category_id: Optional[int]) -> BudgetRecord:
        payload = {"month": month, "amount": _wire_amount(amount), "categoryId": category_id}
        return self._parse(BudgetRecord, self._request("POST", "/budgets", payload=payload))

    def update_budget(
        self,
        budget_id: int,
        month: str,
        amount: Decimal,
        category_id: Optional[int]
    ) -> BudgetRecord:
        payload = {"month": month, "amount": _wire_amount(amount), "categoryId": category_id}
        return self._parse(BudgetRecord, self._request("PUT", f"/budgets/{budget_id}", payload=payload))

    def delete_budget(self, budget_id: int) -> None:
        self._request("DELETE", f"/budgets/{budget_id}")

    # Analytics

    def get_summary(self) -> AnalyticsSummary:
        return self._parse(AnalyticsSummary, self._request("GET", "/analytics/summary"))

    def get_forecast(self) -> Forecast:
        return self._parse(Forecast, self._request("GET", "/analytics/forecast"))

    def get_alerts(self) -> List[str]:
        data = self._request("GET", "/alerts")
        if data is None:
            return []
        if not isinstance(data, list):
            raise TransportError("Remote service returned a malformed alert list")
        return [str(alert) for alert in data]
