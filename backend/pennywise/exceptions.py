"""
Error types raised by Pennywise services and the remote API client.
"""

from typing import Optional


class PennywiseError(Exception):
    """Base class for all Pennywise errors."""


class ValidationError(PennywiseError):
    """Input rejected before any call to the remote service was made."""


class TransportError(PennywiseError):
    """A call to the remote service failed, timed out or returned garbage."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class IntegrityAmbiguity(PennywiseError):
    """More than one budget record governs the same month and scope."""

    def __init__(self, message: str, record_ids: Optional[list[int]] = None):
        super().__init__(message)
        self.record_ids = record_ids or []
