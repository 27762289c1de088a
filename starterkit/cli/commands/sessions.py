"""Session cleanup command handlers for the starterkit CLI."""

import argparse
import asyncio

from starterkit.cli.result import CommandResult, error, success
from starterkit.config import LOGGER
from starterkit.services import session_service
from starterkit.workflows import SessionCleanupService, session_cleanup_service


def setup_parser(subparsers: argparse._SubParsersAction) -> None:
    """Set up the sessions command parser and its subcommands."""
    sessions_parser = subparsers.add_parser(
        "sessions", help="Commands to manage authentication sessions"
    )
    sessions_subparsers = sessions_parser.add_subparsers(dest="sessions_command")

    cleanup_parser = sessions_subparsers.add_parser(
        "cleanup", help="Delete expired sessions once and report the count"
    )
    cleanup_parser.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        help="Print the deleted count as JSON",
    )

    watch_parser = sessions_subparsers.add_parser(
        "watch", help="Delete expired sessions periodically until interrupted"
    )
    watch_parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between cleanup passes (default: one hour)",
    )


def handle_command(args: argparse.Namespace) -> None:
    """Route sessions subcommands to their appropriate handlers."""
    handlers = {
        "cleanup": sessions_cleanup,
        "watch": sessions_watch,
    }

    handler = handlers.get(args.sessions_command)
    if handler:
        result = handler(args)
        result.emit(as_json=getattr(args, "output_json", False))
        if result.exit_code != 0:
            exit(result.exit_code)
    else:
        result = error(f"Unknown sessions subcommand: {args.sessions_command}")
        result.log()
        exit(1)


def sessions_cleanup(args: argparse.Namespace) -> CommandResult:
    """Run one cleanup pass."""
    try:
        deleted_count = asyncio.run(session_cleanup_service.manual_cleanup())
    except Exception as e:
        return error(f"Session cleanup failed: {e}")

    return success(
        f"Removed {deleted_count} expired sessions",
        payload={"deleted_sessions": deleted_count},
    )


def sessions_watch(args: argparse.Namespace) -> CommandResult:
    """Run the cleanup schedule in the foreground."""
    reaper = session_cleanup_service
    if args.interval is not None:
        if args.interval <= 0:
            return error("--interval must be greater than zero")
        reaper = SessionCleanupService(session_service, interval_seconds=args.interval)

    LOGGER.info(
        f"Cleaning up expired sessions every {reaper.interval_seconds:g}s. "
        "Press Ctrl+C to stop."
    )
    try:
        asyncio.run(reaper.run_until_stopped())
    except KeyboardInterrupt:
        pass

    return success("Session cleanup stopped")
