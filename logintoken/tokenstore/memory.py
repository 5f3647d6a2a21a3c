"""
In-memory login token store for logintoken.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

This module provides a thread-safe store that issues random, single-use
login tokens bound to an account ID and redeems each of them at most once
before it expires.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Dict, Optional

from ..common.utils import build_login_url, generate_random_string, get_current_time
from ..core.config import LoginTokenConfig
from .store import LoginToken, TokenGenerationError, TokenNotFoundError


logger = logging.getLogger(__name__)

# Collisions are practically impossible at sane lengths; this only bounds
# the loop for degenerate alphabets or a misbehaving generator.
MAX_GENERATION_ATTEMPTS = 10

TokenGenerator = Callable[[int, str], str]
Clock = Callable[[], datetime]


class LoginTokenStore:
    """
    In-memory login token store.

    All reads and writes of the token mapping happen under a single lock.
    Redemption looks up, checks and removes a token in one critical
    section, so concurrent redemptions of the same value succeed at most
    once.
    """

    def __init__(self,
                 config: Optional[LoginTokenConfig] = None,
                 generator: TokenGenerator = generate_random_string,
                 clock: Clock = get_current_time):
        """
        Initialize login token store.

        Args:
            config: Store configuration, defaults to ``LoginTokenConfig()``
            generator: Callable producing a random string of a given length
                over a given alphabet
            clock: Callable returning the current timezone-aware time

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or LoginTokenConfig()
        self.config.validate()
        self._tokens: Dict[str, LoginToken] = {}
        self._lock = threading.Lock()
        self._generate = generator
        self._now = clock

    def __len__(self) -> int:
        return self.count_tokens()

    def issue(self, account_id: int) -> LoginToken:
        """
        Create a login token referencing ``account_id``.

        Expired tokens are reclaimed as a side effect before returning.

        Args:
            account_id: Account the token authenticates

        Returns:
            The new token with its random value and expiry date

        Raises:
            ValueError: If account_id is not an integer
            TokenGenerationError: If no unused value could be generated
        """
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise ValueError(f"account_id must be an int, got {type(account_id).__name__}")

        token = self._add(account_id)
        logger.debug(f"Issued login token for account {account_id}")
        self.reclaim_expired()
        return token

    def redeem(self, token_value: str) -> int:
        """
        Exchange a token value for its account ID, consuming the token.

        Args:
            token_value: Token string presented by the user

        Returns:
            Account ID the token was issued for

        Raises:
            TokenNotFoundError: If the token is unknown, already redeemed
                or expired
        """
        with self._lock:
            token = self._tokens.pop(token_value, None)
            now = self._now()

        if token is None or token.is_expired(now):
            logger.debug("Rejected login token redemption")
            raise TokenNotFoundError()

        logger.debug(f"Redeemed login token for account {token.account_id}")
        return token.account_id

    def reclaim_expired(self) -> int:
        """
        Remove expired tokens from the store.

        Returns:
            Number of tokens removed by this call
        """
        now = self._now()
        with self._lock:
            expired = [value for value, token in self._tokens.items() if token.is_expired(now)]

        removed = 0
        for value in expired:
            with self._lock:
                token = self._tokens.get(value)
                # Re-check under the lock; the entry may already be gone.
                if token is not None and token.is_expired(now):
                    del self._tokens[value]
                    removed += 1

        if removed:
            logger.info(f"Reclaimed {removed} expired login tokens")
        return removed

    def login_url(self, token: LoginToken) -> str:
        """Return the configured login URL carrying ``token``."""
        return build_login_url(self.config.login_url, token.value)

    def count_tokens(self) -> int:
        """Count tokens held in memory, expired ones included."""
        with self._lock:
            return len(self._tokens)

    def count_valid_tokens(self) -> int:
        """Count tokens that have not expired yet."""
        now = self._now()
        with self._lock:
            return sum(1 for token in self._tokens.values() if not token.is_expired(now))

    def _add(self, account_id: int) -> LoginToken:
        for _ in range(MAX_GENERATION_ATTEMPTS):
            value = self._generate(self.config.token_length, self.config.token_alphabet)
            with self._lock:
                if value in self._tokens:
                    continue
                token = LoginToken(
                    value=value,
                    account_id=account_id,
                    expiry=self._now() + self.config.token_expiry,
                )
                self._tokens[value] = token
                return token

        logger.error(f"Login token generation collided {MAX_GENERATION_ATTEMPTS} times")
        raise TokenGenerationError(MAX_GENERATION_ATTEMPTS)


def create_memory_store(config: Optional[LoginTokenConfig] = None) -> LoginTokenStore:
    """
    Create a login token store.

    Args:
        config: Store configuration; read from the environment when omitted

    Returns:
        LoginTokenStore instance
    """
    if config is None:
        config = LoginTokenConfig.from_env()
    return LoginTokenStore(config)
