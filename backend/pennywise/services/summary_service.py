"""
Dashboard summary derived from the remote analytics summary.
"""

from decimal import Decimal
from typing import Dict, Optional

from pennywise.schemas.analytics import AnalyticsSummary, DashboardSummary


def top_category(by_category: Dict[str, Decimal]) -> Optional[str]:
    """Category with the largest spend. Ties keep the first one listed."""
    if not by_category:
        return None
    return max(by_category.items(), key=lambda x: x[1])[0]


def build_dashboard_summary(summary: AnalyticsSummary) -> DashboardSummary:
    return DashboardSummary(
        total=summary.total,
        by_category=summary.by_category,
        month_over_month_change=summary.month_over_month_change,
        top_category=top_category(summary.by_category),
        trend_direction="up" if summary.month_over_month_change > 0 else "down",
    )
