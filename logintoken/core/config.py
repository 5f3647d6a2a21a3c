"""
Configuration module for logintoken.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Mapping, Union

from ..common.utils import DEFAULT_TOKEN_ALPHABET
from ..util.config import DEFAULT_ENV_PREFIX, get_config_value, load_config_file, to_duration


logger = logging.getLogger(__name__)

# Below this many characters a token is considered guessable.
MIN_RECOMMENDED_TOKEN_LENGTH = 16

# Upper bound on a login token's lifetime.
MAX_TOKEN_EXPIRY = timedelta(days=365)


@dataclass(frozen=True)
class LoginTokenConfig:
    """Construction-time settings for a login token store.

    ``token_expiry`` is a timedelta; raw numbers coming from the
    environment or a config file are read as minutes.
    """
    login_url: str = "http://localhost/login"
    token_length: int = 32
    token_expiry: timedelta = field(default_factory=lambda: timedelta(minutes=15))
    token_alphabet: str = DEFAULT_TOKEN_ALPHABET

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> "LoginTokenConfig":
        """Create configuration from environment variables"""
        defaults = cls()
        expiry = get_config_value("auth_login_token_expiry", None, env_prefix=prefix)
        return cls(
            login_url=get_config_value("auth_login_url", defaults.login_url, env_prefix=prefix),
            token_length=get_config_value(
                "auth_login_token_length", defaults.token_length, int, env_prefix=prefix
            ),
            token_expiry=to_duration(expiry) if expiry is not None else defaults.token_expiry,
            token_alphabet=get_config_value(
                "auth_login_token_alphabet", defaults.token_alphabet, env_prefix=prefix
            ),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoginTokenConfig":
        """Create configuration from a mapping using the ``auth_login_*`` keys"""
        defaults = cls()
        length = data.get("auth_login_token_length", defaults.token_length)
        if isinstance(length, bool) or not isinstance(length, (int, str)):
            raise ValueError(f"Invalid auth_login_token_length: {length!r}")
        expiry = data.get("auth_login_token_expiry")
        return cls(
            login_url=data.get("auth_login_url", defaults.login_url),
            token_length=int(length),
            token_expiry=to_duration(expiry) if expiry is not None else defaults.token_expiry,
            token_alphabet=data.get("auth_login_token_alphabet", defaults.token_alphabet),
        )

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "LoginTokenConfig":
        """Create configuration from a JSON or YAML file"""
        return cls.from_dict(load_config_file(file_path))

    def validate(self) -> bool:
        """Validate the configuration"""
        if not isinstance(self.login_url, str) or not self.login_url:
            raise ValueError("login_url is required")
        if isinstance(self.token_length, bool) or not isinstance(self.token_length, int):
            raise ValueError("token_length must be an integer")
        if self.token_length <= 0:
            raise ValueError("token_length must be positive")
        if not isinstance(self.token_expiry, timedelta):
            raise ValueError("token_expiry must be a timedelta")
        if self.token_expiry <= timedelta(0):
            raise ValueError("token_expiry must be positive")
        if self.token_expiry > MAX_TOKEN_EXPIRY:
            raise ValueError(f"token_expiry must not exceed {MAX_TOKEN_EXPIRY}")
        if not isinstance(self.token_alphabet, str) or len(set(self.token_alphabet)) < 2:
            raise ValueError("token_alphabet needs at least two distinct characters")
        if self.token_length < MIN_RECOMMENDED_TOKEN_LENGTH:
            logger.warning(
                f"Login token length {self.token_length} is below the recommended "
                f"{MIN_RECOMMENDED_TOKEN_LENGTH} characters"
            )
        return True
