"""Base class for URL transforms.

A transform turns arbitrary text into a compact string that can sit in a URL
fragment or query value without percent-encoding, and back again.
"""

import re
from abc import ABC, abstractmethod

from onelink.utils.helpers import URL_SAFE_PATTERN


class Transform(ABC):
    """Abstract base class for text <-> URL-safe text transforms.

    ``compress`` must accept any text. ``decompress`` must accept any input
    and return ``None`` for anything ``compress`` could not have produced,
    instead of raising.
    """

    name: str = "base"
    description: str = ""
    token_pattern: re.Pattern = URL_SAFE_PATTERN

    @abstractmethod
    def compress(self, text: str) -> str:
        """Transform text into a URL-safe token."""
        pass

    @abstractmethod
    def decompress(self, token: str) -> str | None:
        """Reverse ``compress``, or return None if the token is not valid."""
        pass

    def is_token(self, token: str) -> bool:
        """Check that a token is non-empty and uses only this transform's alphabet."""
        return isinstance(token, str) and self.token_pattern.fullmatch(token) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
