"""Command modules for the starterkit CLI."""

from .commands import grant, sessions

# Registry of all command modules
COMMAND_MODULES = [
    grant,  # Starter content for new players
    sessions,  # Expired session cleanup
]


def setup_all_parsers(subparsers):
    """Set up all command parsers by calling each module's setup_parser function."""
    for module in COMMAND_MODULES:
        module.setup_parser(subparsers)
