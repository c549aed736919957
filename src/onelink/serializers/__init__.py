"""Structured serializers: plain data <-> canonical text."""

from onelink.serializers.base import Serializer
from onelink.serializers.json_serializer import JsonSerializer

__all__ = [
    "Serializer",
    "JsonSerializer",
]
