"""PTY spawning port - the process primitive lives outside this package."""

from collections.abc import Sequence
from typing import Any, Protocol


class PTYFactory(Protocol):
    """Protocol for spawning a shell in a pseudo-terminal.

    Implementations receive an environment that has already been sanitized
    and must not merge the host environment back in.
    """

    def __call__(self, command: Sequence[str], environment: dict[str, str]) -> Any:
        """Spawn ``command`` with exactly ``environment``, returning a handle."""
        ...
