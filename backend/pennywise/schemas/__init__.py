"""
Pydantic schemas package.
"""

from pennywise.schemas.analytics import (
    Granularity,
    Bucket,
    AnalyticsSummary,
    DashboardSummary,
    Forecast,
)
from pennywise.schemas.auth import (
    Credentials,
    TokenResponse,
)
from pennywise.schemas.budget import (
    MONTH_PATTERN,
    OVERALL,
    BudgetRecord,
    BudgetSave,
    Selection,
    ResolutionMode,
    Resolution,
)
from pennywise.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryResponse,
)
from pennywise.schemas.expense import (
    DatedAmount,
    ExpenseCreate,
    ExpenseResponse,
    ExpenseFilters,
)

__all__ = [
    "Granularity",
    "Bucket",
    "AnalyticsSummary",
    "DashboardSummary",
    "Forecast",
    "Credentials",
    "TokenResponse",
    "MONTH_PATTERN",
    "OVERALL",
    "BudgetRecord",
    "BudgetSave",
    "Selection",
    "ResolutionMode",
    "Resolution",
    "CategoryBase",
    "CategoryCreate",
    "CategoryResponse",
    "DatedAmount",
    "ExpenseCreate",
    "ExpenseResponse",
    "ExpenseFilters",
]
