"""
Purpose: Turn a scrap URL or bare slug into the identifier used by the API.
Constraints: Pure string handling; no network or filesystem access.
"""

from urllib.parse import urlparse

from scrap2md.core.errors import InvalidIdentifier

SCRAPS_MARKER = "/scraps/"


def extract_slug(value: str) -> str:
    """Return the scrap slug from a full URL or a bare slug.

    ``https://zenn.dev/foo/scraps/barbaz/`` and ``barbaz`` both yield
    ``barbaz``. Raises InvalidIdentifier when nothing usable is left.
    """
    trimmed = (value or "").strip().rstrip("/")
    pos = trimmed.find(SCRAPS_MARKER)
    if pos >= 0:
        slug = trimmed[pos + len(SCRAPS_MARKER):]
    else:
        slug = trimmed
    if not slug:
        raise InvalidIdentifier(f"No scrap slug in {value!r}")
    return slug


def is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


def relative_link(url: str) -> str:
    """Platform-relative form of a scrap URL, used as backlink text."""
    if is_absolute_url(url):
        return urlparse(url).path or "/"
    return url
