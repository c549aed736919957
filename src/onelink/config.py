"""Configuration for the profile codec.

Settings are read from environment variables prefixed with ``ONELINK_`` and
from a ``.env`` file in the working directory when one exists:

    ONELINK_TRANSFORM=zlib
    ONELINK_COMPRESSION_LEVEL=9
    ONELINK_SHARE_PARAM=p
    ONELINK_LOG_LEVEL=DEBUG
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Settings for building a ProfileCodec."""

    model_config = SettingsConfigDict(
        env_prefix="ONELINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    transform: str = Field(default="zlib", description="Registered URL transform name")
    compression_level: int = Field(default=9, description="zlib compression level")
    share_param: str | None = Field(
        default=None,
        description="Query parameter carrying the token; fragment when unset",
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("compression_level")
    @classmethod
    def validate_compression_level(cls, v: int) -> int:
        if not -1 <= v <= 9:
            raise ValueError("Compression level must be between -1 and 9")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> CodecSettings:
    """Return the settings loaded from the environment, cached."""
    return CodecSettings()
