"""JSON serializer producing the canonical text form of a profile."""

import json
from typing import Any

from onelink.errors import ParseError, SerializationError
from onelink.serializers.base import Serializer


class JsonSerializer(Serializer):
    """Compact, deterministic JSON.

    Keys keep insertion order and non-ASCII text is written as-is, so the
    same value always produces the same text. NaN and Infinity are rejected
    since they are not valid JSON.
    """

    name = "json"

    def write(self, value: Any) -> str:
        try:
            return json.dumps(
                value,
                ensure_ascii=False,
                separators=(",", ":"),
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            # json reports cycles as ValueError("Circular reference detected")
            raise SerializationError(f"Cannot serialize value: {e}", cause=e) from e

    def read(self, text: str) -> Any:
        if not isinstance(text, str):
            raise ParseError(f"Expected text, got {type(text).__name__}")

        try:
            return json.loads(text)
        except (ValueError, RecursionError) as e:
            raise ParseError(f"Invalid JSON: {e}", cause=e) from e
