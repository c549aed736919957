"""lz-string transform, readable by the lz-string JavaScript library.

Share links made by the browser version of the profile page use
``LZString.compressToEncodedURIComponent``. This transform produces and reads
the same tokens.
"""

import re

from lzstring import LZString

from onelink.transforms.base import Transform

# lz-string's URI alphabet; "+" and "$" need no escaping in a fragment
LZSTRING_PATTERN = re.compile(r"^[A-Za-z0-9+$-]+$")


def _to_utf16_units(text: str) -> str:
    """Split astral characters into surrogate pairs, as JavaScript strings hold them."""
    data = text.encode("utf-16-le", "surrogatepass")
    return "".join(
        chr(int.from_bytes(data[i:i + 2], "little")) for i in range(0, len(data), 2)
    )


def _from_utf16_units(text: str) -> str:
    data = b"".join(ord(unit).to_bytes(2, "little") for unit in text)
    return data.decode("utf-16-le", "surrogatepass")


class LZStringTransform(Transform):
    """lz-string ``compressToEncodedURIComponent`` tokens.

    Tokens may contain "+" and "$". Put them in the URL fragment, or let
    ``build_share_url`` percent-encode them in a query value.
    """

    name = "lzstring"
    description = "lz-string URI component, compatible with the JavaScript library"
    token_pattern = LZSTRING_PATTERN

    def __init__(self):
        self._lz = LZString()

    def compress(self, text: str) -> str:
        return self._lz.compressToEncodedURIComponent(_to_utf16_units(text))

    def decompress(self, token: str) -> str | None:
        if not self.is_token(token):
            return None

        try:
            text = self._lz.decompressFromEncodedURIComponent(token)
            if not text:
                return None
            return _from_utf16_units(text)
        # the library indexes past the end of malformed input
        except (IndexError, KeyError, ValueError, TypeError, OverflowError):
            return None
