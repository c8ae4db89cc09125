"""
Category Pydantic schemas.
"""

from pydantic import BaseModel, Field, field_validator


class CategoryBase(BaseModel):
    """Base category schema."""
    name: str = Field(..., min_length=1, max_length=100)


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class CategoryResponse(CategoryBase):
    """A category owned by the remote service. Identity is the id alone."""
    id: int

    def __eq__(self, other):
        if not isinstance(other, CategoryResponse):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)
