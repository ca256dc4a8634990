"""CLI command for listing the categories of a card pool."""

from flashcard_challenge.config import create_default_config
from flashcard_challenge.exceptions import ChallengeException
from flashcard_challenge.presenters import ConsolePresenter
from flashcard_challenge.services import CardPoolSelector

from .source import card_source_from_args


def categories_command(args) -> int:
    """Execute the categories subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = create_default_config()
    presenter = ConsolePresenter()

    try:
        pool = card_source_from_args(args, config).load_cards()
    except ChallengeException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    names = CardPoolSelector.available_categories(pool)
    if not names:
        presenter.show_warning("No categories found")
        return 0

    for name in names:
        count = sum(1 for card in pool if card.category == name)
        presenter.show_info(f"{name} ({count})")
    return 0
