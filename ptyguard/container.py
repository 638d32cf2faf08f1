"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass
from pathlib import Path

from ptyguard.application.services import GuardService
from ptyguard.config import GuardConfig
from ptyguard.domain import Platform


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    """

    guard_service: GuardService
    config: GuardConfig
    config_path: Path
    platform: Platform
