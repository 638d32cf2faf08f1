"""URL validation for links opened outside the terminal UI.

Links in terminal output are attacker-controlled: a program can print an
OSC 8 hyperlink pointing anywhere. Only web and mail links may be handed
to the operating system's default-application launcher.
"""

import re
from urllib.parse import urlsplit

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http:", "https:", "mailto:"})

# RFC 3986 scheme followed by the colon
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
# Whitespace and ASCII control characters are never valid inside a URL
_FORBIDDEN_RE = re.compile(r"[\x00-\x20\x7f]")
_HOST_SCHEMES = frozenset({"http:", "https:"})


def _parsed_scheme(candidate: str) -> str | None:
    """Return the lower-cased scheme (with colon) of a well-formed URL."""
    if not _SCHEME_RE.match(candidate) or _FORBIDDEN_RE.search(candidate):
        return None

    try:
        parts = urlsplit(candidate)
        scheme = parts.scheme.lower() + ":"
        if scheme in _HOST_SCHEMES:
            if not parts.hostname:
                return None
            # Raises ValueError for a malformed or out-of-range port
            parts.port
        elif scheme == "mailto:" and not parts.path:
            return None
    except ValueError:
        return None

    return scheme


def is_valid_external_url(candidate: object) -> bool:
    """Check if a URL is safe to open externally.

    Rejects anything that does not parse as a fully qualified URL, and any
    scheme other than http, https and mailto (javascript:, data:, file:...).
    """
    if not candidate or not isinstance(candidate, str):
        return False
    return _parsed_scheme(candidate) in ALLOWED_SCHEMES


def sanitize_external_url(candidate: object) -> str | None:
    """Return the URL unchanged if it is safe to open, None otherwise."""
    if isinstance(candidate, str) and is_valid_external_url(candidate):
        return candidate
    return None
