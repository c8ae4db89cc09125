"""
Expense API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from datetime import date
from decimal import Decimal

from pennywise.client import FinanceClient
from pennywise.dependencies import get_client
from pennywise.exceptions import ValidationError
from pennywise.schemas.expense import ExpenseCreate, ExpenseFilters, ExpenseResponse

router = APIRouter(prefix="/expenses", tags=["expenses"])


def build_filters(
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
    category_id: Optional[int] = None,
    min_amount: Optional[Decimal] = None,
    max_amount: Optional[Decimal] = None,
    today: Optional[date] = None
) -> ExpenseFilters:
    """
    Build remote expense filters. The date range defaults to the current
    calendar year.
    """
    today = today or date.today()
    from_date = from_date or date(today.year, 1, 1)
    to_date = to_date or date(today.year, 12, 31)

    if from_date > to_date:
        raise ValidationError(f"Start date {from_date} is after end date {to_date}")
    if min_amount is not None and max_amount is not None and min_amount > max_amount:
        raise ValidationError(f"Minimum amount {min_amount} is above maximum {max_amount}")

    return ExpenseFilters(
        from_date=from_date,
        to_date=to_date,
        category_id=category_id,
        min_amount=min_amount,
        max_amount=max_amount
    )


@router.get("", response_model=List[ExpenseResponse])
def list_expenses(
    from_date: Optional[date] = Query(None, alias="from"),
    to_date: Optional[date] = Query(None, alias="to"),
    category: Optional[int] = None,
    min_amount: Optional[Decimal] = Query(None, ge=0),
    max_amount: Optional[Decimal] = Query(None, ge=0),
    client: FinanceClient = Depends(get_client)
):
    """List expenses with filtering"""
    filters = build_filters(from_date, to_date, category, min_amount, max_amount)
    return client.list_expenses(filters)


@router.post("", response_model=ExpenseResponse, status_code=201)
def create_expense(
    expense: ExpenseCreate,
    client: FinanceClient = Depends(get_client)
):
    """Create an expense"""
    return client.create_expense(expense)


@router.delete("/{expense_id}", status_code=204)
def delete_expense(
    expense_id: int,
    client: FinanceClient = Depends(get_client)
):
    """Delete an expense"""
    client.delete_expense(expense_id)
    return None
