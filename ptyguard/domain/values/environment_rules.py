"""Environment allowlists for spawned shell processes."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .platform import Platform

# Variables needed by shells and everyday tools on Linux/macOS.
# None of these carry credentials by convention.
POSIX_SAFE_VARS: frozenset[str] = frozenset(
    {
        # Paths and identity
        "PATH",
        "HOME",
        "USER",
        "LOGNAME",
        "SHELL",
        # Locale settings for proper text rendering
        "LANG",
        "LC_ALL",
        "LC_CTYPE",
        "LC_MESSAGES",
        "LC_COLLATE",
        # Display and session
        "DISPLAY",
        "WAYLAND_DISPLAY",
        "XDG_RUNTIME_DIR",
        "XDG_SESSION_TYPE",
        "XDG_DATA_HOME",
        "XDG_CONFIG_HOME",
        "XDG_CACHE_HOME",
        "TMPDIR",
        # Editors and pagers
        "EDITOR",
        "VISUAL",
        "PAGER",
        # Agent sockets (the socket path, not a key)
        "SSH_AUTH_SOCK",
        "SSH_AGENT_PID",
        "DBUS_SESSION_BUS_ADDRESS",
    }
)

WINDOWS_SAFE_VARS: frozenset[str] = frozenset(
    {
        # System paths
        "COMSPEC",
        "SYSTEMROOT",
        "SYSTEMDRIVE",
        "WINDIR",
        "PATH",
        "PATHEXT",
        "TEMP",
        "TMP",
        # User directories
        "HOMEDRIVE",
        "HOMEPATH",
        "USERPROFILE",
        "USERNAME",
        "APPDATA",
        "LOCALAPPDATA",
        "PROGRAMDATA",
        "PROGRAMFILES",
        "PROGRAMFILES(X86)",
        "COMMONPROGRAMFILES",
        # System info
        "NUMBER_OF_PROCESSORS",
        "PROCESSOR_ARCHITECTURE",
        "OS",
        # Locale
        "LANG",
        "LC_ALL",
        "LC_CTYPE",
        "PSModulePath",
    }
)

SAFE_VARS_BY_PLATFORM: Mapping[Platform, frozenset[str]] = MappingProxyType(
    {
        Platform.POSIX: POSIX_SAFE_VARS,
        Platform.WINDOWS: WINDOWS_SAFE_VARS,
    }
)

# Terminal capabilities the builder itself is authoritative over
FORCED_VARS: tuple[tuple[str, str], ...] = (
    ("TERM", "xterm-256color"),
    ("COLORTERM", "truecolor"),
)


@dataclass(frozen=True, slots=True)
class EnvironmentRules:
    """Allowlist and forced variables for one platform (value object)."""

    allowed_vars: frozenset[str] = frozenset()
    forced_vars: tuple[tuple[str, str], ...] = FORCED_VARS

    @classmethod
    def for_platform(cls, platform: Platform | None) -> "EnvironmentRules":
        """Rules for a platform; an unknown platform gets an empty allowlist."""
        return cls(allowed_vars=SAFE_VARS_BY_PLATFORM.get(platform, frozenset()))
