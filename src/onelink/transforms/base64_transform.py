"""Base64url transform without compression."""

import base64
import binascii

from onelink.transforms.base import Transform

# Lone surrogates are valid in Python str but not in strict UTF-8.
_TEXT_ERRORS = "surrogatepass"


class Base64Transform(Transform):
    """UTF-8 bytes encoded as unpadded base64url.

    Subclasses change the byte payload by overriding ``_pack`` and
    ``_unpack``; the text and alphabet handling stays here.
    """

    name = "base64"
    description = "Base64url text, no compression"

    def compress(self, text: str) -> str:
        data = self._pack(text.encode("utf-8", _TEXT_ERRORS))
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")

    def decompress(self, token: str) -> str | None:
        # urlsafe_b64decode silently drops foreign characters, so check first
        if not self.is_token(token):
            return None

        padded = token + "=" * (-len(token) % 4)
        try:
            raw = base64.urlsafe_b64decode(padded)
        except (binascii.Error, ValueError):
            return None

        data = self._unpack(raw)
        if data is None:
            return None

        try:
            return data.decode("utf-8", _TEXT_ERRORS)
        except UnicodeDecodeError:
            return None

    def _pack(self, data: bytes) -> bytes:
        return data

    def _unpack(self, data: bytes) -> bytes | None:
        return data
