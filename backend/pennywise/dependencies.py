"""
FastAPI dependencies.
"""

from typing import Generator, Optional

import httpx
from fastapi import Depends, Header

from pennywise.client import FinanceClient
from pennywise.config import settings
from pennywise.services.budget_service import BudgetResolver


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_transport() -> Optional[httpx.BaseTransport]:
    """
    Transport for outbound calls. None means httpx's default network transport.
    """
    return None


def get_client(
    authorization: Optional[str] = Header(None),
    transport: Optional[httpx.BaseTransport] = Depends(get_transport)
) -> Generator[FinanceClient, None, None]:
    """
    Dependency for getting a remote API client carrying the caller's credential.
    """
    token = bearer_token(authorization) or settings.remote_api_token
    client = FinanceClient(token=token, transport=transport)
    try:
        yield client
    finally:
        client.close()


def get_budget_resolver(client: FinanceClient = Depends(get_client)) -> BudgetResolver:
    """
    Dependency for a budget resolver loaded with the current remote budgets.
    """
    return BudgetResolver(client, client.list_budgets())
