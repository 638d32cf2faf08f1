"""Composition root - the ONLY place where dependencies are wired."""

from collections.abc import Mapping
from pathlib import Path

from ptyguard.application.services import GuardService
from ptyguard.config import default_config_path, load_config
from ptyguard.container import Container
from ptyguard.domain import Clock, PTYFactory, URLOpener
from ptyguard.infrastructure.system import (
    MonotonicClock,
    WebBrowserOpener,
    detect_platform,
    host_environment,
)


def create_container(
    pty_factory: PTYFactory,
    config_path: Path | str | None = None,
    url_opener: URLOpener | None = None,
    clock: Clock | None = None,
    host_env: Mapping[str, str | None] | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    Args:
        pty_factory: Host's process spawning primitive.
        config_path: Path to config file, defaults to $PTYGUARD_CONFIG_PATH
            or ptyguard.yaml.
        url_opener: External opener, defaults to the system browser.
        clock: Millisecond clock, defaults to the monotonic clock.
        host_env: Host environment, defaults to os.environ.

    Returns:
        Fully wired dependency container.
    """
    config_path = Path(config_path) if config_path else default_config_path()
    config = load_config(config_path)
    platform = config.environment.platform or detect_platform()

    guard_service = GuardService(
        pty_factory=pty_factory,
        url_opener=url_opener or WebBrowserOpener(),
        clock=clock or MonotonicClock(),
        platform=platform,
        host_env=host_env if host_env is not None else host_environment(),
        rate_limits=config.effective_rate_limits(),
        env_overrides=config.environment.overrides,
    )

    return Container(
        guard_service=guard_service,
        config=config,
        config_path=config_path,
        platform=platform,
    )
