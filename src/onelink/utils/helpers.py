"""Utility helper functions for share links."""

import re
from urllib.parse import parse_qs, parse_qsl, urlencode, urlsplit, urlunsplit

URL_SAFE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def is_url_safe(token: str) -> bool:
    """Check that a token is non-empty and uses only base64url characters.

    These are all unreserved URL characters, so the token can be placed in a
    fragment or query value without percent-encoding.
    """
    return isinstance(token, str) and URL_SAFE_PATTERN.fullmatch(token) is not None


def build_share_url(base_url: str, token: str, param: str | None = None) -> str:
    """Build a share URL carrying a token.

    Args:
        base_url: Page URL the profile is viewed at
        token: Encoded profile token
        param: Query parameter to carry the token; the fragment is used
            when not given

    Returns:
        The share URL
    """
    parts = urlsplit(base_url)

    if param is None:
        return urlunsplit(parts._replace(fragment=token))

    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != param]
    query.append((param, token))
    return urlunsplit(parts._replace(query=urlencode(query)))


def extract_token(value: str, param: str | None = None) -> str:
    """Extract a token from a share URL, or return a bare token unchanged.

    Args:
        value: A token or a URL containing one
        param: Query parameter to read; the fragment is read when not given
            or when the parameter is missing

    Returns:
        The token, or an empty string if the URL carries none
    """
    value = value.strip()
    if "://" not in value and not value.startswith(("#", "?", "/")):
        return value

    parts = urlsplit(value)
    if param is not None:
        values = parse_qs(parts.query).get(param)
        if values:
            return values[0]

    return parts.fragment

