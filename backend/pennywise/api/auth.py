"""
Authentication API endpoints.
"""

from fastapi import APIRouter, Depends

from pennywise.client import FinanceClient
from pennywise.dependencies import get_client
from pennywise.schemas.auth import Credentials, TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: Credentials,
    client: FinanceClient = Depends(get_client)
):
    """Exchange credentials for a bearer token from the remote service."""
    token = client.login(credentials.username, credentials.password)
    return TokenResponse(token=token)


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(
    credentials: Credentials,
    client: FinanceClient = Depends(get_client)
):
    """Register a new user, then log them in."""
    client.register(credentials.username, credentials.password)
    token = client.login(credentials.username, credentials.password)
    return TokenResponse(token=token)
