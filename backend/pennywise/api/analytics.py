"""
Analytics API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from datetime import date

from pennywise.client import FinanceClient
from pennywise.dependencies import get_client
from pennywise.schemas.analytics import Bucket, DashboardSummary, Forecast, Granularity
from pennywise.schemas.expense import ExpenseFilters
from pennywise.exceptions import ValidationError
from pennywise.services.summary_service import build_dashboard_summary
from pennywise.services.trend_service import aggregate, series_from_expenses

router = APIRouter(tags=["analytics"])


@router.get("/analytics/trends", response_model=List[Bucket])
def get_spending_trends(
    granularity: Granularity = Query(Granularity.day),
    from_date: Optional[date] = Query(None, alias="from"),
    to_date: Optional[date] = Query(None, alias="to"),
    category: Optional[int] = None,
    client: FinanceClient = Depends(get_client)
):
    """
    Get spending trends bucketed by day, week or month.
    Returns: [{key, start, amount}, ...] in ascending period order
    """
    if from_date and to_date and from_date > to_date:
        raise ValidationError(f"Start date {from_date} is after end date {to_date}")

    filters = ExpenseFilters(from_date=from_date, to_date=to_date, category_id=category)
    expenses = client.list_expenses(filters)
    return aggregate(series_from_expenses(expenses), granularity)


@router.get("/analytics/summary", response_model=DashboardSummary)
def get_summary(
    client: FinanceClient = Depends(get_client)
):
    """
    Get the dashboard summary.
    Returns: total, by_category, month_over_month_change, top_category
    """
    return build_dashboard_summary(client.get_summary())


@router.get("/analytics/forecast", response_model=Forecast)
def get_forecast(
    client: FinanceClient = Depends(get_client)
):
    """Get the predicted total for the current month."""
    return client.get_forecast()


@router.get("/alerts", response_model=List[str])
def get_alerts(
    client: FinanceClient = Depends(get_client)
):
    """Get budget and spending alerts."""
    return client.get_alerts()
