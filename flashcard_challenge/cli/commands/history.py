"""CLI command for listing past challenge results."""

import sqlite3

from flashcard_challenge.config import create_default_config
from flashcard_challenge.presenters import ConsolePresenter
from flashcard_challenge.services import SqliteHistoryLog, summarize


def history_command(args) -> int:
    """Execute the history subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = create_default_config()
    presenter = ConsolePresenter()

    if not config.history_db_path.exists():
        presenter.show_history([])
        return 0

    try:
        history = SqliteHistoryLog(config.history_db_path)
        history.initialize()
        entries = history.entries(limit=args.limit)
        summary = summarize(history.entries())
    except sqlite3.Error as e:
        presenter.show_error(f"Could not read history database: {e}")
        return 1

    presenter.show_history(entries)
    if summary.sessions_played:
        presenter.show_info(
            f"\n{summary.sessions_played} challenges, best score {summary.best_score}, "
            f"average {summary.average_score:.0f}, accuracy {summary.overall_accuracy:.0f}%"
        )
    return 0
