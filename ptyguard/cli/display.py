"""Rich output for the ptyguard CLI."""

from collections.abc import Iterable, Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ptyguard.domain import CHANNEL_PROFILES, FORCED_VARS, Platform, RateLimitConfig

console = Console()

_FORCED_NAMES = {name for name, _ in FORCED_VARS}


def display_environment(
    env: Mapping[str, str],
    platform: Platform,
    overrides: Mapping[str, str],
    out: Console | None = None,
) -> None:
    """Print the sanitized environment with where each value came from."""
    out = out or console
    table = Table(title=f"Shell environment ({platform.value})")
    table.add_column("Variable", style="cyan")
    table.add_column("Value")
    table.add_column("Source", style="dim")

    for name in sorted(env):
        if name in _FORCED_NAMES:
            source = "forced"
        elif name in overrides:
            source = "override"
        else:
            source = "host"
        table.add_row(Text(name), Text(env[name]), source)

    out.print(table)


def display_url_results(results: Iterable[tuple[str, bool]], out: Console | None = None) -> None:
    """Print one verdict per URL."""
    out = out or console
    table = Table(title="External URLs")
    table.add_column("URL", overflow="fold")
    table.add_column("Verdict")

    for url, valid in results:
        verdict = "[green]allowed[/green]" if valid else "[red]blocked[/red]"
        table.add_row(Text(url), verdict)

    out.print(table)


def display_rate_limits(limits: Mapping[str, RateLimitConfig], out: Console | None = None) -> None:
    """Print each profile and the channels it guards."""
    out = out or console
    table = Table(title="Rate limits")
    table.add_column("Profile", style="cyan")
    table.add_column("Burst", justify="right")
    table.add_column("Refill/s", justify="right")
    table.add_column("Channels")

    for name in sorted(limits):
        config = limits[name]
        channels = sorted(ch for ch, profile in CHANNEL_PROFILES.items() if profile == name)
        table.add_row(
            name,
            str(config.max_tokens),
            f"{config.refill_rate:g}",
            ", ".join(channels),
        )

    out.print(table)
