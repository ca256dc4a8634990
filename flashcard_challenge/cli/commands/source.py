"""Card source selection shared by CLI commands."""

from pathlib import Path

from flashcard_challenge.config import ChallengeConfig
from flashcard_challenge.exceptions import CardSourceError
from flashcard_challenge.interfaces import CardSource
from flashcard_challenge.services import HttpCardSource, JsonFileCardSource


def card_source_from_args(args, config: ChallengeConfig) -> CardSource:
    """Pick the card source named on the command line, else the configured one.

    Raises:
        CardSourceError: If no source was given
    """
    if getattr(args, "cards", None):
        return JsonFileCardSource(Path(args.cards))
    if getattr(args, "url", None):
        return HttpCardSource(args.url, timeout=config.request_timeout)
    if config.cards_file is not None:
        return JsonFileCardSource(config.cards_file)
    if config.card_source_url:
        return HttpCardSource(config.card_source_url, timeout=config.request_timeout)
    raise CardSourceError("No card source given (use --cards FILE or --url URL)")
