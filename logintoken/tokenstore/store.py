"""
Login token types and errors for logintoken.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from ..common.utils import get_current_time


@dataclass(frozen=True)
class LoginToken:
    """
    An issued login token referencing an account ID and an expiry date.

    Tokens are immutable once created; the store removes them on
    redemption or after they expire.
    """

    value: str
    account_id: int
    expiry: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if token is expired."""
        if now is None:
            now = get_current_time()
        return now >= self.expiry

    def time_until_expiry(self, now: Optional[datetime] = None) -> timedelta:
        """Get time until token expires."""
        if now is None:
            now = get_current_time()
        return self.expiry - now

    def __repr__(self) -> str:
        # Keep the secret value out of logs and tracebacks.
        return (
            f"LoginToken(value='***', account_id={self.account_id}, "
            f"expiry={self.expiry.isoformat()})"
        )


class TokenStoreError(Exception):
    """Base exception for token store errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "TOKEN_STORE_ERROR"
        self.details = details or {}


class TokenNotFoundError(TokenStoreError):
    """
    Raised when a login token is unknown, already redeemed or expired.

    The three cases share one message and code so callers cannot tell
    which tokens once existed.
    """

    MESSAGE = "login token not found"

    def __init__(self):
        super().__init__(self.MESSAGE, "TOKEN_NOT_FOUND")


class TokenGenerationError(TokenStoreError):
    """Raised when no unused token value could be generated."""

    def __init__(self, attempts: int):
        super().__init__(
            f"could not generate a unique login token after {attempts} attempts",
            "TOKEN_GENERATION_FAILED",
            {"attempts": attempts},
        )
