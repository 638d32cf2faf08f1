"""Guard service - gatekeeper for privileged calls coming from the UI."""

import logging
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from ptyguard.domain import (
    CHANNEL_PROFILES,
    DEFAULT_RATE_LIMITS,
    ChannelRateLimiter,
    Clock,
    Platform,
    PTYFactory,
    RateLimitConfig,
    URLOpener,
    build_safe_environment,
    sanitize_external_url,
)
from ptyguard.domain.values.channels import OPEN_EXTERNAL, PTY_CREATE

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GuardDecision:
    """Outcome of a guarded call."""

    allowed: bool
    reason: str | None = None
    value: Any = None

    @classmethod
    def deny(cls, reason: str) -> "GuardDecision":
        return cls(allowed=False, reason=reason)


class GuardService:
    """Service for admitting privileged calls.

    Owns the channel rate limiter, samples the clock once per call, and
    routes PTY creation through the environment allowlist and external
    opens through URL validation before touching the real collaborators.
    """

    def __init__(
        self,
        pty_factory: PTYFactory,
        url_opener: URLOpener,
        clock: Clock,
        platform: Platform | str,
        host_env: Mapping[str, str | None],
        rate_limits: Mapping[str, RateLimitConfig] | None = None,
        env_overrides: Mapping[str, str | None] | None = None,
        limiter: ChannelRateLimiter | None = None,
    ) -> None:
        self._pty_factory = pty_factory
        self._url_opener = url_opener
        self._clock = clock
        self._platform = platform
        self._host_env = host_env
        self._rate_limits = {**DEFAULT_RATE_LIMITS, **(rate_limits or {})}
        self._env_overrides = dict(env_overrides or {})
        self._limiter = limiter or ChannelRateLimiter()
        self._lock = threading.Lock()

    @property
    def rate_limits(self) -> dict[str, RateLimitConfig]:
        """Effective rate limit profiles by name."""
        return dict(self._rate_limits)

    def check(self, channel: str) -> GuardDecision:
        """Rate-limit one call on a known channel.

        Unknown channels are denied before reaching the limiter, so untrusted
        input can never add buckets to the registry.
        """
        profile = CHANNEL_PROFILES.get(channel)
        if profile is None:
            logger.warning("Rejected call on unknown channel=%r", channel)
            return GuardDecision.deny("Unknown channel")

        config = self._rate_limits[profile]
        with self._lock:
            allowed = self._limiter.is_allowed(channel, config, self._clock.now())

        if not allowed:
            return GuardDecision.deny("Rate limit exceeded")
        return GuardDecision(allowed=True)

    def build_environment(self, overrides: Mapping[str, str | None] | None = None) -> dict[str, str]:
        """Environment a spawned shell would receive.

        Configured overrides apply first, then per-call overrides.
        """
        merged = {**self._env_overrides, **(overrides or {})}
        return build_safe_environment(self._host_env, self._platform, merged or None)

    def create_pty(
        self,
        command: Sequence[str],
        overrides: Mapping[str, str | None] | None = None,
    ) -> GuardDecision:
        """Spawn a shell with a sanitized environment if the rate limit allows.

        Args:
            command: Shell executable followed by its arguments.
            overrides: Explicit user environment configuration.

        Returns:
            Decision whose value is the PTY handle when allowed.
        """
        if not command:
            logger.warning("Rejected PTY creation with empty command")
            return GuardDecision.deny("Empty command")

        decision = self.check(PTY_CREATE)
        if not decision.allowed:
            return decision

        environment = self.build_environment(overrides)
        logger.info(
            "Spawning PTY command=%s env_vars=%d",
            command[0],
            len(environment),
        )
        try:
            handle = self._pty_factory(command, environment)
        except Exception:
            logger.exception("PTY spawn failed command=%s", command[0])
            raise
        return GuardDecision(allowed=True, value=handle)

    def open_external(self, url: str) -> GuardDecision:
        """Open a URL in the external browser if it is safe and not rate-limited."""
        decision = self.check(OPEN_EXTERNAL)
        if not decision.allowed:
            return decision

        safe_url = sanitize_external_url(url)
        if safe_url is None:
            logger.warning("Blocked external open of unsafe URL url=%r", url)
            return GuardDecision.deny("Unsafe URL")

        opened = self._url_opener(safe_url)
        # Path and query may carry tokens
        parts = urlsplit(safe_url)
        logger.info(
            "Opened external URL scheme=%s host=%s opened=%s",
            parts.scheme.lower(),
            parts.hostname or "-",
            opened,
        )
        return GuardDecision(allowed=True, value=safe_url)

    def reset(self) -> None:
        """Replenish every channel."""
        with self._lock:
            self._limiter.reset_all()
