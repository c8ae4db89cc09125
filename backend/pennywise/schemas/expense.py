"""
Expense schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import date
from decimal import Decimal

from pennywise.schemas.category import CategoryResponse


class DatedAmount(BaseModel):
    """One expense's contribution on one day."""
    date: date
    amount: Decimal

    class Config:
        frozen = True


class ExpenseCreate(BaseModel):
    description: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)
    date: date
    category_id: Optional[int] = None


class ExpenseResponse(BaseModel):
    id: int
    description: str
    amount: Decimal
    date: date
    category: Optional[CategoryResponse] = None

    def as_dated_amount(self) -> DatedAmount:
        return DatedAmount(date=self.date, amount=self.amount)


class ExpenseFilters(BaseModel):
    """Filters forwarded to the remote expense listing. Date bounds are inclusive."""
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    category_id: Optional[int] = None
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.from_date:
            params["from"] = self.from_date.isoformat()
        if self.to_date:
            params["to"] = self.to_date.isoformat()
        if self.category_id is not None:
            params["category"] = self.category_id
        if self.min_amount is not None:
            params["minAmount"] = str(self.min_amount)
        if self.max_amount is not None:
            params["maxAmount"] = str(self.max_amount)
        return params
