"""Command line argument parsing."""

import argparse

from ptyguard import __version__
from ptyguard.config import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH, default_config_path


def _key_value(text: str) -> tuple[str, str]:
    """Parse a KEY=VALUE override."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return name, value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ptyguard",
        description="ptyguard - Inspect the guards protecting a terminal host process",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show guard decisions in the log",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=str(default_config_path()),
        help=f"Config file (default: ${CONFIG_PATH_ENV} or {DEFAULT_CONFIG_PATH})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    env_parser = subparsers.add_parser(
        "env",
        help="Show the environment a spawned shell would receive",
    )
    env_parser.add_argument(
        "--platform",
        choices=["posix", "windows"],
        default=None,
        help="Platform family (default: configured or detected)",
    )
    env_parser.add_argument(
        "--set",
        dest="overrides",
        metavar="KEY=VALUE",
        type=_key_value,
        action="append",
        default=[],
        help="Add or replace a variable, may be repeated",
    )

    url_parser = subparsers.add_parser(
        "url",
        help="Check whether URLs may be opened externally",
    )
    url_parser.add_argument("urls", nargs="+", metavar="URL")

    subparsers.add_parser("limits", help="Show effective rate limit profiles")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - command: One of env, url, limits
        - config: Path to the YAML config
        - verbose: Whether to log at INFO
        - platform/overrides (env), urls (url)
    """
    return build_parser().parse_args(argv)
