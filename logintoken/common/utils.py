"""
Common utilities and helper functions for logintoken.
"""

import secrets
import string
from datetime import datetime, timezone
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


DEFAULT_TOKEN_ALPHABET = string.ascii_letters + string.digits


def get_current_time() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def generate_random_string(length: int, alphabet: str = DEFAULT_TOKEN_ALPHABET) -> str:
    """
    Generate a cryptographically secure random string.

    Args:
        length: Number of characters to generate
        alphabet: Characters to draw from

    Returns:
        Random string of exactly ``length`` characters
    """
    if length <= 0:
        raise ValueError("length must be positive")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    return ''.join(secrets.choice(alphabet) for _ in range(length))


def build_login_url(base_url: str, token_value: str, param: str = "token") -> str:
    """Append the token as a query parameter, keeping any existing query."""
    parts = urlsplit(base_url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.append((param, token_value))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


def mask_sensitive_data(data: str, mask_char: str = "*", visible_chars: int = 4) -> str:
    """
    Mask sensitive data showing only first few characters.

    Args:
        data: Sensitive data to mask
        mask_char: Character to use for masking
        visible_chars: Number of characters to keep visible

    Returns:
        Masked string
    """
    if not data or len(data) <= visible_chars:
        return mask_char * len(data) if data else ""

    return data[:visible_chars] + mask_char * (len(data) - visible_chars)
