"""Zlib compressed base64url transform, the default for share links."""

import zlib

from onelink.transforms.base64_transform import Base64Transform


class ZlibTransform(Base64Transform):
    """UTF-8 text, deflated with zlib, encoded as unpadded base64url."""

    name = "zlib"
    description = "Zlib compressed, base64url encoded (default)"

    def __init__(self, level: int = 9):
        """Initialize the transform.

        Args:
            level: zlib compression level, -1 (library default) to 9
        """
        if not -1 <= level <= 9:
            raise ValueError(f"Compression level must be between -1 and 9, got {level}")
        self.level = level

    def _pack(self, data: bytes) -> bytes:
        return zlib.compress(data, self.level)

    def _unpack(self, data: bytes) -> bytes | None:
        try:
            return zlib.decompress(data)
        except zlib.error:
            return None
