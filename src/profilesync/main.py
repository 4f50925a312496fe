#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from profilesync.app import sync_profile
from profilesync.config import ConfigurationError, configure_logging
from profilesync.domain.reconciliation import ReconciliationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from profilesync.domain.reconciliation import SyncPlan

log = logging.getLogger(__name__)


def _add_target_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--flake",
        type=Path,
        help="Directory of the flake whose default dev shell is synced (defaults to cwd)",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        help="Nix profile to reconcile (defaults to .profilesync/nix/profile/default)",
    )
    parser.add_argument(
        "--system",
        type=str,
        help="Nix system double to evaluate, e.g. x86_64-linux (defaults to this host)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sync a Nix profile with the build inputs of a flake dev shell"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Install and remove packages to match the flake")
    _add_target_arguments(sync)
    sync.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute the changes without touching the profile",
    )

    plan = subparsers.add_parser("plan", help="Show the changes a sync would make")
    _add_target_arguments(plan)

    return parser.parse_args(list(argv))


def _print_plan(plan: SyncPlan) -> None:
    if plan.delta.is_empty:
        print("Profile is up to date")
        return
    for store_path in plan.delta.remove:
        print(f"- {store_path.label} ({store_path.path})")
    for store_path in plan.delta.add:
        print(f"+ {store_path.label} ({store_path.path})")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    if parsed_args.verbose:
        configure_logging(verbose=True, force=True)

    dry_run = parsed_args.command == "plan" or parsed_args.dry_run
    try:
        result = sync_profile(
            flake_dir=parsed_args.flake,
            profile_path=parsed_args.profile,
            system=parsed_args.system,
            dry_run=dry_run,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except ReconciliationError as exc:
        log.error("Sync failed: %s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)

    if result.dry_run:
        _print_plan(result.plan)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
