"""
onelink - Share a user profile through a URL.

A profile (name, bio, avatar, social links) is encoded into a compact,
URL-safe token and decoded back. The link itself is the storage; nothing
is kept on a server.
"""

__version__ = "0.1.0"

from onelink.profiles.base import Profile, ProfileLink, ProfileBuilder
from onelink.codec.profile_codec import (
    ProfileCodec,
    EncodeResult,
    DecodeResult,
    encode_profile,
    decode_profile,
)
from onelink.errors import (
    OneLinkError,
    CodecError,
    SerializationError,
    ParseError,
    TransformError,
    ShapeError,
)

__all__ = [
    "Profile",
    "ProfileLink",
    "ProfileBuilder",
    "ProfileCodec",
    "EncodeResult",
    "DecodeResult",
    "encode_profile",
    "decode_profile",
    "OneLinkError",
    "CodecError",
    "SerializationError",
    "ParseError",
    "TransformError",
    "ShapeError",
]
