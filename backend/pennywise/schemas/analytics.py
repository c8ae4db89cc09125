"""
Analytics schemas.
"""

import enum
from pydantic import AliasChoices, BaseModel, Field
from typing import Dict, Optional
from datetime import date
from decimal import Decimal


class Granularity(str, enum.Enum):
    """Bucketing period for trend charts."""
    day = "day"
    week = "week"
    month = "month"


class Bucket(BaseModel):
    """Summed amount for one period. `start` is the first day of the period."""
    key: str
    start: date
    amount: Decimal


class AnalyticsSummary(BaseModel):
    """Summary statistics as computed by the remote service."""
    total: Decimal = Decimal("0")
    by_category: Dict[str, Decimal] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("byCategory", "by_category")
    )
    month_over_month_change: Decimal = Field(
        Decimal("0"),
        validation_alias=AliasChoices("monthOverMonthChange", "month_over_month_change")
    )


class DashboardSummary(AnalyticsSummary):
    top_category: Optional[str] = None
    trend_direction: str  # "up" when spending grew month over month, else "down"


class Forecast(BaseModel):
    predicted_total: Decimal = Field(
        ...,
        validation_alias=AliasChoices("predictedTotal", "predicted_total")
    )
    confidence: Decimal
