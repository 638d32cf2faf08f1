"""Rate limit configuration value object."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class RateLimitConfig:
    """Token bucket configuration (value object).

    max_tokens is the burst capacity, refill_rate is tokens added per second.
    Construction never raises; an unusable config is denied by the limiter.
    """

    max_tokens: int
    refill_rate: float

    @property
    def is_valid(self) -> bool:
        """Check that the config can admit anything at all."""
        try:
            return (
                self.max_tokens >= 1
                and math.isfinite(self.max_tokens)
                and self.refill_rate >= 0
                and math.isfinite(self.refill_rate)
            )
        except TypeError:
            return False


# Pre-defined profiles for the privileged channels
PTY_WRITE_LIMIT = RateLimitConfig(max_tokens=500, refill_rate=300)
PTY_RESIZE_LIMIT = RateLimitConfig(max_tokens=30, refill_rate=20)
CONFIG_LIMIT = RateLimitConfig(max_tokens=10, refill_rate=5)
PTY_CREATE_LIMIT = RateLimitConfig(max_tokens=5, refill_rate=2)
OPEN_EXTERNAL_LIMIT = RateLimitConfig(max_tokens=10, refill_rate=5)

DEFAULT_RATE_LIMITS: Mapping[str, RateLimitConfig] = MappingProxyType(
    {
        "pty_write": PTY_WRITE_LIMIT,
        "pty_resize": PTY_RESIZE_LIMIT,
        "config": CONFIG_LIMIT,
        "pty_create": PTY_CREATE_LIMIT,
        "open_external": OPEN_EXTERNAL_LIMIT,
    }
)
