"""
logintoken Python Package

Passwordless login: issue short-lived, single-use tokens bound to an
account ID and redeem them exactly once.
"""

__version__ = "0.1.0"

from .core.config import LoginTokenConfig
from .tokenstore import (
    LoginToken,
    LoginTokenStore,
    TokenStoreError,
    TokenNotFoundError,
    TokenGenerationError,
    create_memory_store,
)

__all__ = [
    "LoginTokenConfig",
    "LoginToken",
    "LoginTokenStore",
    "TokenStoreError",
    "TokenNotFoundError",
    "TokenGenerationError",
    "create_memory_store",
]
