"""Utility functions for onelink."""

from onelink.utils.helpers import (
    is_url_safe,
    build_share_url,
    extract_token,
)

__all__ = [
    "is_url_safe",
    "build_share_url",
    "extract_token",
]
