"""
Budget API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from pennywise.dependencies import get_budget_resolver
from pennywise.schemas.budget import (
    MONTH_PATTERN,
    OVERALL,
    BudgetRecord,
    BudgetSave,
    Resolution,
    Selection,
)
from pennywise.services.budget_service import BudgetResolver, parse_scope

router = APIRouter(prefix="/budgets", tags=["budgets"])


@router.get("", response_model=List[BudgetRecord])
def list_budgets(
    month: str = Query(..., pattern=MONTH_PATTERN, description="YYYY-MM format"),
    resolver: BudgetResolver = Depends(get_budget_resolver)
):
    """List every budget for a month, overall and per category."""
    return resolver.records_in_scope(month)


@router.get("/resolve", response_model=Resolution)
def resolve_budget(
    month: str = Query(..., pattern=MONTH_PATTERN, description="YYYY-MM format"),
    category: Optional[str] = Query(None, description="Category id or 'overall'"),
    resolver: BudgetResolver = Depends(get_budget_resolver)
):
    """
    Resolve the budget governing a month and scope.
    Returns: {mode, prefill_amount, record_id}
    """
    selection = Selection(month=month, category_scope=parse_scope(category))
    return resolver.select(selection)


@router.put("", response_model=BudgetRecord)
def save_budget(
    budget: BudgetSave,
    resolver: BudgetResolver = Depends(get_budget_resolver)
):
    """Create the budget for a month and scope, or update the one that exists."""
    selection = Selection(
        month=budget.month,
        category_scope=budget.category_id if budget.category_id is not None else OVERALL
    )
    return resolver.save(selection, budget.amount)


@router.delete("/{budget_id}", response_model=Optional[Resolution])
def delete_budget(
    budget_id: int,
    resolver: BudgetResolver = Depends(get_budget_resolver)
):
    """
    Delete a budget and return the resolution for its scope afterwards.
    Records sharing a scope with others can be deleted one by one; the
    response is null while more than one remains.
    """
    record = resolver.find(budget_id)
    if not record:
        raise HTTPException(status_code=404, detail="Budget not found")

    if not resolver.duplicates_of(budget_id):
        resolver.edit(record)
    return resolver.delete(budget_id)
