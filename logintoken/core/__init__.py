"""
Core package for logintoken.
"""

from .config import LoginTokenConfig

__all__ = ["LoginTokenConfig"]
