"""Configuration loading and validation using Pydantic."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ptyguard.domain import DEFAULT_RATE_LIMITS, Platform, RateLimitConfig
from ptyguard.infrastructure.config import YAMLConfigLoader

DEFAULT_CONFIG_PATH = "ptyguard.yaml"
CONFIG_PATH_ENV = "PTYGUARD_CONFIG_PATH"


class RateLimitProfile(BaseModel):
    """One token bucket profile."""

    model_config = ConfigDict(extra="forbid")

    max_tokens: int = Field(ge=1)
    refill_rate: float = Field(ge=0, allow_inf_nan=False)

    def to_value(self) -> RateLimitConfig:
        return RateLimitConfig(max_tokens=self.max_tokens, refill_rate=self.refill_rate)


class EnvironmentConfig(BaseModel):
    """Spawned shell environment configuration."""

    model_config = ConfigDict(extra="forbid")

    platform: Platform | None = None
    overrides: dict[str, str] = Field(default_factory=dict)

    @field_validator("platform", mode="before")
    @classmethod
    def parse_platform(cls, v: object) -> Platform | None:
        """Accept platform tags such as "linux" or "win32"."""
        if v is None:
            return None
        platform = Platform.from_tag(v)
        if platform is None:
            raise ValueError(f"Unknown platform: {v!r}")
        return platform


class GuardConfig(BaseModel):
    """Application configuration."""

    model_config = ConfigDict(extra="forbid")

    rate_limits: dict[str, RateLimitProfile] = Field(default_factory=dict)
    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig)

    @field_validator("rate_limits")
    @classmethod
    def validate_profile_names(cls, v: dict[str, RateLimitProfile]) -> dict[str, RateLimitProfile]:
        """Only known profiles may be tuned."""
        unknown = sorted(set(v) - set(DEFAULT_RATE_LIMITS))
        if unknown:
            raise ValueError(f"Unknown rate limit profiles: {', '.join(unknown)}")
        return v

    def effective_rate_limits(self) -> dict[str, RateLimitConfig]:
        """Defaults with configured profiles merged over them."""
        limits = dict(DEFAULT_RATE_LIMITS)
        limits.update({name: profile.to_value() for name, profile in self.rate_limits.items()})
        return limits


def default_config_path() -> Path:
    """Config path from PTYGUARD_CONFIG_PATH, else ptyguard.yaml."""
    return Path(os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)


def load_config(config_path: Path | str | None = None) -> GuardConfig:
    """Load configuration from YAML file.

    Without a path the default from default_config_path() is used. A missing
    file yields the defaults. Invalid content raises ``pydantic.ValidationError``.
    """
    data = YAMLConfigLoader(config_path or default_config_path()).load()
    return GuardConfig.model_validate(data)
