"""Pure domain layer - no infrastructure dependencies."""

# Ports
from .ports import PTYFactory, URLOpener

# Services
from .services import (
    ALLOWED_SCHEMES,
    ChannelRateLimiter,
    Clock,
    EnvironmentSanitizer,
    TokenBucket,
    build_safe_environment,
    is_valid_external_url,
    sanitize_external_url,
)

# Value Objects
from .values import (
    CHANNEL_PROFILES,
    DEFAULT_RATE_LIMITS,
    FORCED_VARS,
    POSIX_SAFE_VARS,
    SAFE_VARS_BY_PLATFORM,
    WINDOWS_SAFE_VARS,
    EnvironmentRules,
    Platform,
    RateLimitConfig,
)

__all__ = [
    # Values
    "RateLimitConfig",
    "DEFAULT_RATE_LIMITS",
    "CHANNEL_PROFILES",
    "Platform",
    "EnvironmentRules",
    "POSIX_SAFE_VARS",
    "WINDOWS_SAFE_VARS",
    "SAFE_VARS_BY_PLATFORM",
    "FORCED_VARS",
    # Services
    "ChannelRateLimiter",
    "Clock",
    "TokenBucket",
    "EnvironmentSanitizer",
    "build_safe_environment",
    "ALLOWED_SCHEMES",
    "is_valid_external_url",
    "sanitize_external_url",
    # Ports
    "PTYFactory",
    "URLOpener",
]
