"""Exception hierarchy for the profile codec.

Collaborators raise these; ``ProfileCodec`` catches them at its boundary and
turns them into result values.
"""


class OneLinkError(Exception):
    """Base class for all onelink errors."""


class CodecError(OneLinkError):
    """An error raised while encoding or decoding a profile."""

    user_message = "Something went wrong"

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class SerializationError(CodecError):
    """The profile cannot be turned into canonical text."""

    user_message = "Unable to generate link"


class ParseError(CodecError):
    """Text is not valid structured data."""

    user_message = "Link is invalid or corrupted"


class TransformError(CodecError):
    """The token is not a product of the URL transform."""

    user_message = "Link is invalid or corrupted"


class ShapeError(CodecError):
    """Structured data parsed but does not describe a profile."""

    user_message = "Link is invalid or corrupted"
