"""CLI command for playing a timed challenge."""

import random

from flashcard_challenge.config import ChallengeConfig, create_default_config
from flashcard_challenge.exceptions import ChallengeException
from flashcard_challenge.interfaces import HistoryRecorder
from flashcard_challenge.models import ChallengeSettings
from flashcard_challenge.orchestration import ChallengeController, ChallengeRunner
from flashcard_challenge.presenters import ConsolePresenter
from flashcard_challenge.services import (
    CardPoolSelector,
    InMemoryHistoryLog,
    SqliteHistoryLog,
    ThreadingScheduler,
)

from .source import card_source_from_args


def build_settings(args, config: ChallengeConfig) -> ChallengeSettings:
    """Merge command-line overrides onto the configured defaults."""
    defaults = config.default_settings()
    return ChallengeSettings(
        duration=args.duration if args.duration is not None else defaults.duration,
        cards_count=args.count if args.count is not None else defaults.cards_count,
        difficulty=args.difficulty or defaults.difficulty,
        categories=frozenset(args.category or ()),
        include_hints=defaults.include_hints and not args.no_hints,
    )


def build_history(config: ChallengeConfig, in_memory: bool) -> HistoryRecorder:
    """Create the history log the session will append to."""
    if in_memory or not config.use_persistent_history:
        return InMemoryHistoryLog()
    history = SqliteHistoryLog(config.history_db_path)
    history.initialize()
    return history


def play_command(args, input_func=input) -> int:
    """Execute the play subcommand.

    Args:
        args: Parsed command-line arguments
        input_func: Function reading one line of user input

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = create_default_config()
    presenter = ConsolePresenter()

    presenter.show_info("Flashcard Challenge")
    presenter.show_info("=" * 50)

    try:
        source = card_source_from_args(args, config)
        presenter.show_info(f"Loading cards from {source.name}...")
        pool = source.load_cards()
        presenter.show_success(f"Loaded {len(pool)} cards")

        settings = build_settings(args, config)
        history = build_history(config, args.memory)
        rng = random.Random(args.seed) if args.seed is not None else None

        controller = ChallengeController(
            ThreadingScheduler(),
            history=history,
            selector=CardPoolSelector(rng),
            presenter=presenter,
            tick_interval=config.tick_interval,
        )
        runner = ChallengeRunner(controller, input_func=input_func)
        stats = runner.run(pool, settings)

    except ChallengeException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1

    return 0 if stats is not None else 1
