"""Adapters for the real host: clock, platform, environment, browser."""

import logging
import os
import sys
import time
import webbrowser

from ptyguard.domain import Platform

logger = logging.getLogger(__name__)


class MonotonicClock:
    """Clock implementation using the monotonic clock, in milliseconds."""

    def now(self) -> float:
        return time.monotonic() * 1000


def detect_platform() -> Platform:
    """Get the platform family of the running host."""
    if sys.platform == "win32":
        return Platform.WINDOWS
    return Platform.POSIX


def host_environment() -> dict[str, str]:
    """Snapshot of the host process environment."""
    return dict(os.environ)


class WebBrowserOpener:
    """Open URLs with the desktop's default browser or mail client."""

    def __call__(self, url: str) -> bool:
        try:
            return webbrowser.open(url)
        except webbrowser.Error as e:
            logger.error("Failed to open external URL url=%s: %s", url, e)
            return False
