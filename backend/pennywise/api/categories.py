"""
Category API endpoints.
"""

from fastapi import APIRouter, Depends
from typing import List

from pennywise.client import FinanceClient
from pennywise.dependencies import get_client
from pennywise.schemas.category import CategoryCreate, CategoryResponse

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
def list_categories(
    client: FinanceClient = Depends(get_client)
):
    """List all categories."""
    return client.list_categories()


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    client: FinanceClient = Depends(get_client)
):
    """Create a new category."""
    return client.create_category(category.name)
