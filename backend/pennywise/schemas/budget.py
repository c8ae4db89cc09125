"""
Budget schemas: records, selections and edit-form resolutions.
"""

import enum
from pydantic import BaseModel, Field
from typing import Optional, Union, Literal
from decimal import Decimal

from pennywise.schemas.category import CategoryResponse

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
OVERALL = "overall"


class BudgetRecord(BaseModel):
    """A budget for one month, either overall (no category) or per category."""
    id: int
    amount: Decimal = Field(..., ge=0)
    month: str = Field(..., pattern=MONTH_PATTERN)
    category: Optional[CategoryResponse] = None

    @property
    def category_id(self) -> Optional[int]:
        return self.category.id if self.category else None

    @property
    def is_overall(self) -> bool:
        return self.category is None


class BudgetSave(BaseModel):
    """Schema for saving the budget governing a month and scope."""
    month: str = Field(..., pattern=MONTH_PATTERN)
    category_id: Optional[int] = None
    amount: Decimal


class Selection(BaseModel):
    """The (month, category-or-overall) scope an edit form is pointed at."""
    month: str = Field(..., pattern=MONTH_PATTERN)
    category_scope: Union[int, Literal["overall"]] = OVERALL

    class Config:
        frozen = True

    @property
    def is_overall(self) -> bool:
        return self.category_scope == OVERALL

    @property
    def category_id(self) -> Optional[int]:
        return None if self.is_overall else self.category_scope

    @classmethod
    def for_record(cls, record: BudgetRecord) -> "Selection":
        return cls(
            month=record.month,
            category_scope=OVERALL if record.is_overall else record.category_id
        )


class ResolutionMode(str, enum.Enum):
    """Whether saving a selection creates a new record or updates one."""
    create = "create"
    update = "update"


class Resolution(BaseModel):
    mode: ResolutionMode
    prefill_amount: Optional[Decimal] = None
    record_id: Optional[int] = None
