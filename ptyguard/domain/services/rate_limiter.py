"""Token bucket rate limiting for privileged channels."""

import logging
import math
from collections.abc import KeysView
from dataclasses import dataclass
from typing import Protocol

from ..values import RateLimitConfig

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Protocol for time source, in milliseconds."""

    def now(self) -> float:
        """Return current time in milliseconds."""
        ...


@dataclass
class TokenBucket:
    """Per-channel bucket state."""

    tokens: float
    last_refill: float
    config: RateLimitConfig


class ChannelRateLimiter:
    """Token bucket rate limiter keyed by channel name.

    Each channel gets its own bucket, created full on first use. The caller
    supplies ``now`` so the limiter never reads a clock itself.

    Not thread-safe: the refill-then-consume step is a read-modify-write,
    so concurrent callers must serialize access.
    """

    def __init__(self) -> None:
        self._buckets: dict[str, TokenBucket] = {}

    def is_allowed(self, channel: str, config: RateLimitConfig, now: float) -> bool:
        """Check whether one request on ``channel`` is admitted at ``now``.

        Args:
            channel: Name of the privileged operation class.
            config: Burst capacity and refill rate for the channel.
            now: Current time in milliseconds.

        Returns:
            True if a token was consumed, False if the request is denied.
        """
        if not isinstance(channel, str) or not channel:
            logger.warning("Rejected request with empty channel name")
            return False
        if not config.is_valid or not _is_finite(now):
            logger.warning("Rejected request with invalid rate limit channel=%s", channel)
            return False

        bucket = self._buckets.get(channel)
        if bucket is None:
            bucket = TokenBucket(tokens=config.max_tokens, last_refill=now, config=config)
            self._buckets[channel] = bucket

        # A clock that went backwards refills nothing
        elapsed = max(0.0, (now - bucket.last_refill) / 1000)
        bucket.tokens = min(config.max_tokens, bucket.tokens + elapsed * config.refill_rate)
        bucket.last_refill = now
        bucket.config = config

        if bucket.tokens >= 1:
            bucket.tokens -= 1
            return True

        logger.warning("Rate limit exceeded channel=%s", channel)
        return False

    def available_tokens(self, channel: str) -> float | None:
        """Tokens left in a channel's bucket as of its last refill."""
        bucket = self._buckets.get(channel)
        return bucket.tokens if bucket else None

    @property
    def channels(self) -> KeysView[str]:
        """Channel names that currently have a bucket."""
        return self._buckets.keys()

    def reset_all(self) -> None:
        """Drop every bucket; each channel starts full again."""
        self._buckets.clear()


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False
