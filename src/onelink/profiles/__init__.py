"""Profiles module - the structured data carried by a share link.

A profile holds:
- A display name
- A short bio
- An avatar reference
- Ordered social links

It contains no encoding logic; see ``onelink.codec`` for that.
"""

from onelink.profiles.base import Profile, ProfileLink, ProfileBuilder
from onelink.profiles.loader import ProfileLoader, load_profile

__all__ = [
    "Profile",
    "ProfileLink",
    "ProfileBuilder",
    "ProfileLoader",
    "load_profile",
]
