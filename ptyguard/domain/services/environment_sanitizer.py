"""Environment allowlist for spawned PTY processes."""

import logging
from collections.abc import Mapping

from ..values import EnvironmentRules, Platform

logger = logging.getLogger(__name__)


class EnvironmentSanitizer:
    """Build the environment handed to a spawned shell.

    Uses an allowlist: only names in ``rules.allowed_vars`` are copied from
    the host, so secrets under names nobody anticipated can never leak.
    """

    def __init__(self, rules: EnvironmentRules) -> None:
        self._rules = rules

    @property
    def rules(self) -> EnvironmentRules:
        return self._rules

    def sanitize(
        self,
        source: Mapping[str, str | None],
        overrides: Mapping[str, str | None] | None = None,
    ) -> dict[str, str]:
        """Build a sanitized environment.

        Args:
            source: Host process environment; values may be None.
            overrides: Explicit user configuration, applied unconditionally;
                None values are skipped like absent host variables.

        Returns:
            Allowlisted host variables, then overrides, then forced variables.
        """
        result = {
            name: value
            for name in self._rules.allowed_vars
            if (value := source.get(name)) is not None
        }

        if overrides:
            result.update(
                (name, value) for name, value in overrides.items() if value is not None
            )

        for name, value in self._rules.forced_vars:
            result[name] = value

        return result

    def is_var_allowed(self, name: str) -> bool:
        """Check if a host variable would be copied through."""
        return name in self._rules.allowed_vars


def build_safe_environment(
    host_env: Mapping[str, str | None],
    platform: Platform | str,
    overrides: Mapping[str, str | None] | None = None,
) -> dict[str, str]:
    """Build a sanitized environment for a PTY on ``platform``.

    An unrecognized platform selects an empty allowlist, so only the
    overrides and the forced terminal variables survive.
    """
    resolved = Platform.from_tag(platform)
    if resolved is None:
        logger.warning("Unknown platform %r, passing no host variables", platform)
    sanitizer = EnvironmentSanitizer(EnvironmentRules.for_platform(resolved))
    return sanitizer.sanitize(host_env, overrides)
