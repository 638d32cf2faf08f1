"""Shared test fixtures and configuration."""

import pytest

from ptyguard.application.services import GuardService
from ptyguard.domain import ChannelRateLimiter, EnvironmentRules, Platform, RateLimitConfig

# ============= Domain Fixtures =============


@pytest.fixture
def limiter():
    """Empty channel rate limiter."""
    return ChannelRateLimiter()


@pytest.fixture
def strict_config():
    """Small bucket for exhausting quickly."""
    return RateLimitConfig(max_tokens=3, refill_rate=2)


@pytest.fixture
def posix_rules():
    """POSIX environment rules."""
    return EnvironmentRules.for_platform(Platform.POSIX)


@pytest.fixture
def posix_host_env():
    """Typical Linux host environment with some secrets mixed in."""
    return {
        "PATH": "/usr/local/bin:/usr/bin:/bin",
        "HOME": "/home/user",
        "USER": "user",
        "SHELL": "/bin/bash",
        "LANG": "en_US.UTF-8",
        "TERM": "dumb",
        "COLORTERM": "24bit",
        "AWS_SECRET_ACCESS_KEY": "super-secret",
        "GITHUB_TOKEN": "ghp_xxxx",
        "DATABASE_URL": "postgres://user:pass@db/app",
    }


@pytest.fixture
def windows_host_env():
    """Typical Windows host environment with some secrets mixed in."""
    return {
        "PATH": "C:\\Windows\\system32",
        "COMSPEC": "C:\\Windows\\system32\\cmd.exe",
        "USERPROFILE": "C:\\Users\\test",
        "SYSTEMROOT": "C:\\Windows",
        "GITHUB_TOKEN": "ghp_xxxx",
        "NPM_TOKEN": "npm_xxxx",
    }


# ============= Mock Fixtures =============


class FakeClock:
    """Fake millisecond clock for testing rate limiting."""

    def __init__(self, start_ms: float = 1_000_000.0):
        self._time = start_ms

    def now(self) -> float:
        return self._time

    def advance(self, ms: float) -> None:
        self._time += ms


@pytest.fixture
def fake_clock():
    """Fake clock at a fixed start time."""
    return FakeClock()


class FakePTYFactory:
    """Records spawn requests instead of starting processes."""

    def __init__(self):
        self.calls: list[tuple[list[str], dict[str, str]]] = []

    def __call__(self, command, environment):
        self.calls.append((list(command), dict(environment)))
        return f"pty-{len(self.calls)}"


class FakeURLOpener:
    """Records URLs instead of launching a browser."""

    def __init__(self, result: bool = True):
        self.opened: list[str] = []
        self._result = result

    def __call__(self, url: str) -> bool:
        self.opened.append(url)
        return self._result


@pytest.fixture
def fake_pty_factory():
    """PTY factory that records calls."""
    return FakePTYFactory()


@pytest.fixture
def fake_opener():
    """URL opener that records calls."""
    return FakeURLOpener()


# ============= Service Fixtures =============


@pytest.fixture
def guard_service(fake_pty_factory, fake_opener, fake_clock, posix_host_env):
    """Guard service wired with fakes on POSIX."""
    return GuardService(
        pty_factory=fake_pty_factory,
        url_opener=fake_opener,
        clock=fake_clock,
        platform=Platform.POSIX,
        host_env=posix_host_env,
    )
