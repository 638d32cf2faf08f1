"""Domain services - pure business logic operations."""

from .environment_sanitizer import EnvironmentSanitizer, build_safe_environment
from .rate_limiter import ChannelRateLimiter, Clock, TokenBucket
from .url_validator import ALLOWED_SCHEMES, is_valid_external_url, sanitize_external_url

__all__ = [
    "ChannelRateLimiter",
    "Clock",
    "TokenBucket",
    "EnvironmentSanitizer",
    "build_safe_environment",
    "ALLOWED_SCHEMES",
    "is_valid_external_url",
    "sanitize_external_url",
]
