"""Privileged channel names and the rate limit profile guarding each."""

from collections.abc import Mapping
from types import MappingProxyType

PTY_CREATE = "pty-create"
PTY_WRITE = "pty-write"
PTY_RESIZE = "pty-resize"
PTY_KILL = "pty-kill"
CONFIG_GET = "config-get"
CONFIG_UPDATE = "config-update"
OPEN_EXTERNAL = "open-external"

# Channel -> profile name. The dispatcher only admits channels listed here,
# so the limiter registry can never grow past this set.
CHANNEL_PROFILES: Mapping[str, str] = MappingProxyType(
    {
        PTY_CREATE: "pty_create",
        PTY_KILL: "pty_create",
        PTY_WRITE: "pty_write",
        PTY_RESIZE: "pty_resize",
        CONFIG_GET: "config",
        CONFIG_UPDATE: "config",
        OPEN_EXTERNAL: "open_external",
    }
)
