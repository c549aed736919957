"""Codec module - profile <-> share-link token."""

from onelink.codec.profile_codec import (
    ProfileCodec,
    EncodeResult,
    DecodeResult,
    get_default_codec,
    encode_profile,
    decode_profile,
)

__all__ = [
    "ProfileCodec",
    "EncodeResult",
    "DecodeResult",
    "get_default_codec",
    "encode_profile",
    "decode_profile",
]
