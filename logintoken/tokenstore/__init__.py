# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Login token store package.

Provides the in-memory, thread-safe store that issues single-use login
tokens and redeems them for account IDs.
"""

from .store import (
    LoginToken,
    TokenStoreError,
    TokenNotFoundError,
    TokenGenerationError,
)

from .memory import (
    LoginTokenStore,
    MAX_GENERATION_ATTEMPTS,
    create_memory_store,
)

__all__ = [
    "LoginToken",
    "TokenStoreError",
    "TokenNotFoundError",
    "TokenGenerationError",
    "LoginTokenStore",
    "MAX_GENERATION_ATTEMPTS",
    "create_memory_store",
]
