"""Main CLI entry point for flashcard_challenge."""

import argparse
import logging
import sys

from flashcard_challenge import __version__
from flashcard_challenge.cli.commands import categories, history, play
from flashcard_challenge.models import ChallengeDifficulty


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--cards", help="Path to a JSON file with study cards")
    source.add_argument("--url", help="REST endpoint returning study cards as JSON")


def main(argv: list[str] | None = None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="flashcard-challenge",
        description="Timed flashcard challenges with scoring and achievements",
        epilog="Use 'flashcard-challenge <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # flashcard-challenge play --cards cards.json
    play_parser = subparsers.add_parser(
        "play",
        help="Play a timed challenge",
        description="Run a timed challenge over a pool of study cards",
    )
    _add_source_arguments(play_parser)
    play_parser.add_argument(
        "--duration", type=int, default=None, help="Time limit in seconds (30-300)"
    )
    play_parser.add_argument(
        "--count", type=int, default=None, help="Number of cards in the challenge (5-30)"
    )
    play_parser.add_argument(
        "--difficulty",
        choices=[d.value for d in ChallengeDifficulty],
        default=None,
        help="Challenge difficulty tier",
    )
    play_parser.add_argument(
        "--category",
        action="append",
        default=[],
        help="Only use cards from this category (repeatable)",
    )
    play_parser.add_argument("--no-hints", action="store_true", help="Do not show card hints")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for card selection")
    play_parser.add_argument(
        "--memory",
        action="store_true",
        help="Keep history in memory only (do not write the history database)",
    )

    # flashcard-challenge history
    history_parser = subparsers.add_parser(
        "history",
        help="Show past challenge results",
        description="List completed challenges, newest first",
    )
    history_parser.add_argument("--limit", type=int, default=10, help="Number of entries to show")

    # flashcard-challenge categories --cards cards.json
    categories_parser = subparsers.add_parser(
        "categories",
        help="List categories in a card pool",
        description="List the distinct categories available for filtering",
    )
    _add_source_arguments(categories_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # Dispatch to appropriate command
    if args.command == "play":
        return play.play_command(args)
    elif args.command == "history":
        return history.history_command(args)
    elif args.command == "categories":
        return categories.categories_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
