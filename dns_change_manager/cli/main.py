#!/usr/bin/env python3
"""
DNS Change Manager - Command Line Interface

Main entry point for the DNS Change Manager CLI.

Exit codes: 0 when the change completed (or waiting was not requested),
1 when waiting timed out, 2 on any error.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from rich.console import Console

from ..core.dns_change_manager import DNSChangeManager
from ..core.models import ChangeAction, ChangeRequest, PollConfig, RecordType
from ..exceptions import ConfigurationError, DNSChangeError

console = Console()
logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_TIMEOUT = 1
EXIT_ERROR = 2
EXIT_INTERRUPTED = 130

DEFAULT_SLEEP = 5
DEFAULT_MAX_WAIT = 120


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with both subcommands."""
    parser = argparse.ArgumentParser(
        prog="dns-change",
        description="DNS Change Manager - Update DNS records and wait for changes to propagate",
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )
    parser.add_argument(
        "--provider", help="DNS provider to use (overrides default_provider)"
    )
    parser.add_argument("--profile", help="AWS profile (route53 provider)")
    parser.add_argument("--region", help="AWS region (route53 provider)")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    update = subparsers.add_parser(
        "update-record", help="Update a Resource Record within a zone"
    )
    update.add_argument("--zone", required=True, help="Zone ID")
    update.add_argument("--name", required=True, help="Fully-qualified DNS Name")
    update.add_argument(
        "--type",
        dest="record_type",
        required=True,
        type=str.upper,
        choices=[record_type.value for record_type in RecordType],
        help="Record Type (i.e. A, CNAME, TXT, etc...)",
    )
    update.add_argument(
        "--action",
        default=ChangeAction.UPSERT.value,
        type=str.upper,
        choices=[action.value for action in ChangeAction],
        help="Action (CREATE, DELETE, UPSERT; default: UPSERT)",
    )
    update.add_argument(
        "--value",
        dest="values",
        action="append",
        required=True,
        help="Record value, repeat for multiple values",
    )
    update.add_argument("--ttl", required=True, type=int, help="Time-to-live (in seconds)")
    update.add_argument("--comment", help="Comment attached to the change batch")
    _add_wait_arguments(update)

    wait = subparsers.add_parser("wait-for-change", help="Wait for a change (by ID)")
    wait.add_argument("--change-id", required=True, help="Change ID")
    _add_wait_arguments(wait)

    return parser


def _add_wait_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--no-wait", action="store_true", help="Do not wait for completion"
    )
    parser.add_argument(
        "--sleep",
        type=int,
        help=f"Time (in seconds) to sleep between completion checks (default: {DEFAULT_SLEEP})",
    )
    parser.add_argument(
        "--max-wait",
        type=int,
        help=f"Maximum time (in seconds) to wait for completion (default: {DEFAULT_MAX_WAIT})",
    )


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        apply_overrides(config, args)
        config_logger(config, args.verbose)

        sys.exit(run(args, config))

    except KeyboardInterrupt:
        console.print("Interrupted", style="yellow")
        sys.exit(EXIT_INTERRUPTED)

    except (DNSChangeError, ValueError) as e:
        print_error_chain(e)
        if args.verbose:
            console.print_exception()
        sys.exit(EXIT_ERROR)

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        print_error_chain(e)
        if args.verbose:
            console.print_exception()
        sys.exit(EXIT_ERROR)


def run(args: argparse.Namespace, config: Dict) -> int:
    """Run a subcommand and return the process exit code."""
    poll_config = get_poll_config(args, config)
    manager = DNSChangeManager(config)

    if args.command == "update-record":
        request = ChangeRequest(
            zone_id=args.zone,
            name=args.name,
            record_type=args.record_type,
            action=args.action,
            values=args.values,
            ttl=args.ttl,
            comment=args.comment,
        )
        complete = manager.update_record(request, poll_config, no_wait=args.no_wait)
    else:
        complete = manager.wait_for_change(args.change_id, poll_config)

    return EXIT_SUCCESS if complete else EXIT_TIMEOUT


def get_poll_config(args: argparse.Namespace, config: Dict) -> PollConfig:
    """Resolve poll timing from arguments, then the config file, then defaults."""
    polling = config.get("polling") or {}
    interval = args.sleep if args.sleep is not None else polling.get("sleep", DEFAULT_SLEEP)
    max_wait = (
        args.max_wait if args.max_wait is not None else polling.get("max_wait", DEFAULT_MAX_WAIT)
    )

    # Without waiting, wait-for-change still checks the status once
    if args.no_wait:
        max_wait = 0

    return PollConfig(interval=interval, max_wait=max_wait)


def print_error_chain(error: BaseException):
    """Print an error followed by the errors that caused it."""
    console.print(f"Error: {error}", style="red", markup=False)
    cause = error.__cause__
    while cause is not None:
        console.print(f"  Caused by: {cause}", style="red", markup=False)
        cause = cause.__cause__


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    if not Path(config_path).exists():
        logger.debug(f"Config file {config_path} not found, using defaults")
        return get_default_config()

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Error reading config file {config_path}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    logger.info(f"Configuration loaded from {config_path}")
    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"route53": {}},
        "default_provider": "route53",
        "polling": {"sleep": DEFAULT_SLEEP, "max_wait": DEFAULT_MAX_WAIT},
        "logging": {"level": "WARNING"},
    }


def apply_overrides(config: Dict, args: argparse.Namespace):
    """Apply provider, profile and region given on the command line."""
    if args.provider:
        config["default_provider"] = args.provider

    if args.profile or args.region:
        providers = config.setdefault("dns_providers", {})
        route53 = providers.get("route53") or {}
        if args.profile:
            route53["profile"] = args.profile
        if args.region:
            route53["region"] = args.region
        providers["route53"] = route53


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "WARNING")
    log_file = logging_config.get("file")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    main()
