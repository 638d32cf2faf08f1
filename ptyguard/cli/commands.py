"""CLI commands and entry point."""

import argparse
import logging

import yaml
from pydantic import ValidationError
from rich.markup import escape

from ptyguard.config import GuardConfig, load_config
from ptyguard.domain import Platform, build_safe_environment, is_valid_external_url
from ptyguard.infrastructure.system import detect_platform, host_environment
from ptyguard.logging_setup import setup_logging, setup_logging_from_env

from .args import parse_args
from .display import console, display_environment, display_rate_limits, display_url_results

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BLOCKED = 1
EXIT_CONFIG_ERROR = 2


def _run_env(args: argparse.Namespace, config: GuardConfig) -> int:
    platform = Platform.from_tag(args.platform) or config.environment.platform or detect_platform()
    overrides = {**config.environment.overrides, **dict(args.overrides)}
    env = build_safe_environment(host_environment(), platform, overrides or None)
    display_environment(env, platform, overrides)
    return EXIT_OK


def _run_url(args: argparse.Namespace) -> int:
    results = [(url, is_valid_external_url(url)) for url in args.urls]
    display_url_results(results)
    return EXIT_OK if all(valid for _, valid in results) else EXIT_BLOCKED


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    args = parse_args(argv)

    if args.verbose:
        setup_logging("INFO")
    else:
        setup_logging_from_env()

    try:
        config = load_config(args.config)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid config {escape(str(args.config))}:[/red]\n{escape(str(e))}")
        return EXIT_CONFIG_ERROR

    logger.info("Loaded config path=%s", args.config)

    if args.command == "env":
        return _run_env(args, config)
    if args.command == "url":
        return _run_url(args)
    display_rate_limits(config.effective_rate_limits())
    return EXIT_OK
