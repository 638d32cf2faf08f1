"""External URL opener port."""

from typing import Protocol


class URLOpener(Protocol):
    """Protocol for handing a URL to the OS default-application launcher."""

    def __call__(self, url: str) -> bool:
        """Open ``url`` outside the terminal UI. Returns True on success."""
        ...
