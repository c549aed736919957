"""Profile Codec - turns profiles into share-link tokens and back.

The codec composes two collaborators:
- A serializer that writes a profile's wire data as canonical text
- A transform that compresses that text into a URL-safe token

Neither operation raises. Failures are logged and returned as values:
``encode`` gives an empty string and ``decode`` gives ``None``. Use
``try_encode`` and ``try_decode`` to get the error itself.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from onelink.config import CodecSettings, get_settings
from onelink.errors import CodecError, SerializationError, ShapeError, TransformError
from onelink.profiles.base import Profile
from onelink.serializers.base import Serializer
from onelink.serializers.json_serializer import JsonSerializer
from onelink.transforms.base import Transform
from onelink.transforms.registry import TransformRegistry, get_global_transform_registry
from onelink.transforms.zlib_transform import ZlibTransform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodeResult:
    """Result of encoding a profile."""

    token: str = ""
    error: CodecError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DecodeResult:
    """Result of decoding a token."""

    profile: Profile | None = None
    error: CodecError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProfileCodec:
    """Encodes profiles to URL-safe tokens and decodes them back.

    A codec holds no mutable state, so one instance can be shared freely,
    including across threads.
    """

    def __init__(
        self,
        serializer: Serializer | None = None,
        transform: Transform | None = None,
    ):
        self.serializer = serializer or JsonSerializer()
        self.transform = transform or ZlibTransform()

    @classmethod
    def from_settings(
        cls,
        settings: CodecSettings | None = None,
        registry: TransformRegistry | None = None,
    ) -> "ProfileCodec":
        """Build a codec using the configured transform.

        Args:
            settings: Codec settings, loaded from the environment if omitted
            registry: Transform registry, the global one if omitted
        """
        settings = settings or get_settings()
        registry = registry or get_global_transform_registry()
        transform = registry.create(settings.transform, level=settings.compression_level)
        return cls(transform=transform)

    def encode(self, profile: Profile | Mapping[str, Any]) -> str:
        """Encode a profile into a token, or return "" on failure."""
        return self.try_encode(profile).token

    def decode(self, token: str) -> Profile | None:
        """Decode a token into a profile, or return None on failure."""
        return self.try_decode(token).profile

    def try_encode(self, profile: Profile | Mapping[str, Any]) -> EncodeResult:
        """Encode a profile, reporting failure as a SerializationError.

        Args:
            profile: A Profile, or a mapping with the Profile shape

        Returns:
            EncodeResult with a non-empty token, or with the error set
        """
        try:
            token = self._encode(profile)
        except SerializationError as e:
            logger.warning(f"Failed to encode profile: {e}")
            return EncodeResult(error=e)
        except Exception as e:
            logger.warning(f"Failed to encode profile: {e}", exc_info=True)
            return EncodeResult(error=SerializationError(str(e), cause=e))

        logger.debug(f"Encoded profile into {len(token)} character token")
        return EncodeResult(token=token)

    def try_decode(self, token: str) -> DecodeResult:
        """Decode a token, reporting any failure instead of raising.

        Args:
            token: Any value; tokens come from user-controlled URLs

        Returns:
            DecodeResult with the profile, or with a TransformError,
            ParseError or ShapeError
        """
        try:
            profile = self._decode(token)
        except CodecError as e:
            logger.warning(f"Failed to decode profile token: {e}")
            return DecodeResult(error=e)
        except Exception as e:
            logger.warning(f"Failed to decode profile token: {e}", exc_info=True)
            return DecodeResult(error=TransformError(str(e), cause=e))

        return DecodeResult(profile=profile)

    def _encode(self, profile: Profile | Mapping[str, Any]) -> str:
        data = self._profile_data(profile)
        text = self.serializer.write(data)
        token = self.transform.compress(text)

        if not self.transform.is_token(token):
            raise SerializationError(f"Transform '{self.transform.name}' produced an invalid token")
        return token

    def _decode(self, token: str) -> Profile:
        if not isinstance(token, str):
            raise TransformError(f"Expected a text token, got {type(token).__name__}")
        if not token:
            raise TransformError("Token is empty")

        text = self.transform.decompress(token)
        if not text:
            raise TransformError(f"Token is not valid {self.transform.name} data")

        data = self.serializer.read(text)
        return Profile.from_data(data)

    def _profile_data(self, profile: Profile | Mapping[str, Any]) -> dict[str, Any]:
        if isinstance(profile, Profile):
            return profile.to_data()

        if isinstance(profile, Mapping):
            try:
                return Profile.from_data(dict(profile)).to_data()
            except ShapeError as e:
                raise SerializationError(f"Value is not a profile: {e}", cause=e) from e

        raise SerializationError(f"Expected a Profile, got {type(profile).__name__}")


_default_codec: ProfileCodec | None = None


def get_default_codec() -> ProfileCodec:
    """Get the codec built from environment settings, created once."""
    global _default_codec
    if _default_codec is None:
        _default_codec = ProfileCodec.from_settings()
    return _default_codec


def encode_profile(profile: Profile | Mapping[str, Any]) -> str:
    """Encode a profile with the default codec. Returns "" on failure."""
    return get_default_codec().encode(profile)


def decode_profile(token: str) -> Profile | None:
    """Decode a token with the default codec. Returns None on failure."""
    return get_default_codec().decode(token)
