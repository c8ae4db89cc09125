"""
Service for bucketing dated amounts into chart-ready trend series.
"""

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List

from pennywise.exceptions import ValidationError
from pennywise.schemas.analytics import Bucket, Granularity
from pennywise.schemas.expense import DatedAmount, ExpenseResponse

logger = logging.getLogger(__name__)


def period_start(day: date, granularity: Granularity) -> date:
    """
    First day of the period containing `day`.
    Weeks start on Monday (ISO weeks).
    """
    if granularity == Granularity.day:
        return day
    if granularity == Granularity.week:
        weekday = day.isoweekday()  # Monday = 1 ... Sunday = 7
        if weekday != 1:
            return day - timedelta(days=weekday - 1)
        return day
    if granularity == Granularity.month:
        return day.replace(day=1)
    raise ValidationError(f"Unknown granularity: {granularity}")


def bucket_key(start: date, granularity: Granularity) -> str:
    """Label for a period: ISO date for days and weeks, YYYY-MM for months."""
    if granularity == Granularity.month:
        return start.strftime("%Y-%m")
    return start.isoformat()


def aggregate(series: Iterable[DatedAmount], granularity: Granularity) -> List[Bucket]:
    """
    Sum amounts per period and return buckets in ascending period order.

    Periods with no records get no bucket. Amounts are accumulated as
    Decimal without rounding.
    """
    try:
        granularity = Granularity(granularity)
    except ValueError as e:
        raise ValidationError(f"Unknown granularity: {granularity}") from e

    totals: Dict[date, Decimal] = {}
    count = 0

    for item in series:
        if item.amount < 0:
            raise ValidationError(f"Negative amount {item.amount} on {item.date.isoformat()}")
        start = period_start(item.date, granularity)
        totals[start] = totals.get(start, Decimal("0")) + item.amount
        count += 1

    logger.debug(f"Aggregated {count} amounts into {len(totals)} {granularity.value} buckets")

    return [
        Bucket(key=bucket_key(start, granularity), start=start, amount=amount)
        for start, amount in sorted(totals.items())
    ]


def series_from_expenses(expenses: Iterable[ExpenseResponse]) -> List[DatedAmount]:
    """Reduce expenses to their (date, amount) contributions."""
    return [expense.as_dated_amount() for expense in expenses]


def series_from_buckets(buckets: Iterable[Bucket]) -> List[DatedAmount]:
    """Turn buckets back into dated amounts keyed by period start."""
    return [DatedAmount(date=bucket.start, amount=bucket.amount) for bucket in buckets]
