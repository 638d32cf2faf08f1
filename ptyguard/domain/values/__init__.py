"""Domain value objects - immutable data structures."""

from .channels import CHANNEL_PROFILES
from .environment_rules import (
    FORCED_VARS,
    POSIX_SAFE_VARS,
    SAFE_VARS_BY_PLATFORM,
    WINDOWS_SAFE_VARS,
    EnvironmentRules,
)
from .platform import Platform
from .rate_limit_config import DEFAULT_RATE_LIMITS, RateLimitConfig

__all__ = [
    "RateLimitConfig",
    "DEFAULT_RATE_LIMITS",
    "CHANNEL_PROFILES",
    "Platform",
    "EnvironmentRules",
    "POSIX_SAFE_VARS",
    "WINDOWS_SAFE_VARS",
    "SAFE_VARS_BY_PLATFORM",
    "FORCED_VARS",
]
