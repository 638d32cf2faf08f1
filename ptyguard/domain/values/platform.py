"""Target platform families for spawned processes."""

from enum import Enum

# sys.platform values and common spellings
_ALIASES = {
    "posix": "posix",
    "linux": "posix",
    "darwin": "posix",
    "macos": "posix",
    "freebsd": "posix",
    "windows": "windows",
    "win32": "windows",
    "cygwin": "posix",
}


class Platform(Enum):
    """Platform family whose shell environment conventions apply."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def from_tag(cls, tag: "Platform | str | None") -> "Platform | None":
        """Resolve a platform tag, returning None when it is not recognized."""
        if isinstance(tag, Platform):
            return tag
        if not isinstance(tag, str):
            return None
        key = tag.strip().lower()
        if key.startswith("linux") or key.startswith("freebsd"):
            key = key.rstrip("0123456789")
        value = _ALIASES.get(key)
        return cls(value) if value else None
