import argparse

from starterkit.cli import setup_all_parsers
from starterkit.cli.commands import grant, sessions
from starterkit.config import LOGGER
from starterkit.db import initialize_database


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments using modular command parsers."""
    parser = argparse.ArgumentParser(
        prog="starterkit",
        description="Grant starter content to players and reap expired sessions",
    )
    parser.formatter_class = argparse.RawDescriptionHelpFormatter
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output on the console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    setup_all_parsers(subparsers)

    return parser.parse_args(argv)


def validate_args(args: argparse.Namespace) -> str | None:
    """
    Validate the parsed arguments.
    Returns an error message if validation fails, None otherwise.
    """
    if not args.command:
        return "No command specified. Use --help to see available commands."

    if args.command == "sessions" and not args.sessions_command:
        return (
            "No sessions subcommand specified. "
            "Use 'sessions --help' to see available subcommands."
        )

    return None


def route_command(args: argparse.Namespace) -> None:
    """Route parsed arguments to the appropriate command handler."""
    if not initialize_database():
        LOGGER.error("Failed to initialize database")
        return

    if args.command == "grant":
        grant.handle_command(args)
    elif args.command == "sessions":
        sessions.handle_command(args)
    else:
        LOGGER.error(f"Unknown command: {args.command}")
        LOGGER.error("Use --help to see available commands.")
