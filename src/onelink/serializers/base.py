"""Base class for structured serializers.

A serializer converts plain Python data (dicts, lists, strings, numbers)
to text and back. It knows nothing about profiles.
"""

from abc import ABC, abstractmethod
from typing import Any


class Serializer(ABC):
    """Abstract base class for object <-> text serializers."""

    name: str = "base"

    @abstractmethod
    def write(self, value: Any) -> str:
        """Serialize a value to text.

        Raises:
            SerializationError: If the value cannot be serialized
        """
        pass

    @abstractmethod
    def read(self, text: str) -> Any:
        """Parse text back into a value.

        Raises:
            ParseError: If the text is not valid for this format
        """
        pass
