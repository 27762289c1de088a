"""Starter content command handlers for the starterkit CLI."""

import argparse

from starterkit.cli.result import CommandResult, error, success, warning
from starterkit.config import LOGGER, load_starter_config
from starterkit.errors import Error, UserNotFoundError
from starterkit.services import user_service
from starterkit.workflows import starter_workflow


def setup_parser(subparsers: argparse._SubParsersAction) -> None:
    """Set up the grant command parser."""
    grant_parser = subparsers.add_parser(
        "grant", help="Grant starter cards, deck and packs to a player"
    )
    grant_parser.add_argument("user_id", help="ID of the player to grant content to")
    grant_parser.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="YAML file overriding the starter cards, deck name and packs",
    )
    grant_parser.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        help="Print the grant result as JSON",
    )


def handle_command(args: argparse.Namespace) -> None:
    result = grant_starter(args)
    result.emit(as_json=getattr(args, "output_json", False))
    if result.exit_code != 0:
        exit(result.exit_code)


def grant_starter(args: argparse.Namespace) -> CommandResult:
    """Grant starter content to one player."""
    if user_service.get_user(args.user_id) is None:
        return error(str(UserNotFoundError(args.user_id)))

    try:
        config = load_starter_config(args.config_file)
    except Error as e:
        return error(str(e))

    workflow = starter_workflow.with_config(config)
    try:
        result = workflow.grant_starter_content(args.user_id)
    except Error as e:
        return error(str(e))
    except Exception as e:
        return error(f"Failed to grant starter content: {e}")

    if not getattr(args, "output_json", False):
        LOGGER.info(f"Deck:  {result.deck_name} ({result.deck_id})")
        LOGGER.info(f"Cards: {result.total_cards}")
        LOGGER.info(f"Packs: {result.pack_count}")

    if result.missing_cards:
        return warning(
            f"Granted starter content to {args.user_id}, but these cards were "
            f"not in the catalog: {', '.join(result.missing_cards)}",
            payload=result.to_dict(),
        )
    return success(
        f"Granted starter content to {args.user_id}", payload=result.to_dict()
    )
