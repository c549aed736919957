"""Base classes for Profiles - the data carried inside a share link.

A Profile is a value: it has no identity beyond its content and is never
mutated after construction.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from onelink.errors import ShapeError


class ProfileLink(BaseModel):
    """A titled social link shown on the profile page."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: StrictStr = Field(..., description="Display title of the link")
    url: StrictStr = Field(..., description="Link target, kept as opaque text")


class Profile(BaseModel):
    """A user profile that can be shared through a URL.

    Optional fields are ``None`` when absent. Absent fields are left out of
    the wire form, so an empty string survives a round trip as an empty
    string and an absent field stays absent.

    Unknown keys are ignored and missing keys read as absent, which lets
    tokens written by older or newer releases keep decoding.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: StrictStr | None = Field(default=None, description="Display name")
    bio: StrictStr | None = Field(default=None, description="Short biography")
    avatar_url: StrictStr | None = Field(
        default=None,
        alias="avatarUrl",
        description="Avatar image reference, not validated",
    )
    links: tuple[ProfileLink, ...] = Field(
        default=(),
        description="Social links in display order",
    )

    def to_data(self) -> dict[str, Any]:
        """Return the wire dictionary with absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_data(cls, data: Any) -> "Profile":
        """Build a Profile from decoded structured data.

        Raises:
            ShapeError: If ``data`` does not describe a Profile
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ShapeError(
                f"Data does not describe a profile ({e.error_count()} errors)",
                cause=e,
            ) from e

    def is_empty(self) -> bool:
        """True when no field carries any content."""
        return (
            self.name is None
            and self.bio is None
            and self.avatar_url is None
            and not self.links
        )


class ProfileBuilder:
    """Fluent builder for creating Profiles."""

    def __init__(self, name: str | None = None):
        self._name = name
        self._bio: str | None = None
        self._avatar_url: str | None = None
        self._links: list[ProfileLink] = []

    def name(self, name: str) -> "ProfileBuilder":
        self._name = name
        return self

    def bio(self, bio: str) -> "ProfileBuilder":
        self._bio = bio
        return self

    def avatar(self, url: str) -> "ProfileBuilder":
        self._avatar_url = url
        return self

    def link(self, title: str, url: str) -> "ProfileBuilder":
        self._links.append(ProfileLink(title=title, url=url))
        return self

    def build(self) -> Profile:
        return Profile(
            name=self._name,
            bio=self._bio,
            avatar_url=self._avatar_url,
            links=tuple(self._links),
        )
