"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from flashcard_challenge.config import ChallengeConfig
from flashcard_challenge.exceptions import CardSourceError
from flashcard_challenge.gui.challenge_window import ChallengeWindow
from flashcard_challenge.gui.utils.config_manager import GUIConfigManager
from flashcard_challenge.interfaces import HistoryRecorder
from flashcard_challenge.models import StudyCard
from flashcard_challenge.services import InMemoryHistoryLog, JsonFileCardSource, SqliteHistoryLog

logger = logging.getLogger(__name__)


def create_history(config: ChallengeConfig) -> HistoryRecorder:
    """Create the persistent history log, or an in-memory one if disabled."""
    if not config.use_persistent_history:
        return InMemoryHistoryLog()
    history = SqliteHistoryLog(config.history_db_path)
    history.initialize()
    return history


def load_initial_pool(config: ChallengeConfig) -> list[StudyCard]:
    """Load the last-used cards file, if any."""
    if config.cards_file is None or not config.cards_file.exists():
        return []
    try:
        return JsonFileCardSource(config.cards_file).load_cards()
    except CardSourceError as e:
        logger.warning(f"Could not load last cards file: {e}")
        return []


def main():
    """Launch the Flashcard Challenge GUI application."""
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Flashcard Challenge")
    app.setOrganizationName("FlashcardChallenge")

    config = GUIConfigManager.load_config()
    window = ChallengeWindow(config, create_history(config), load_initial_pool(config))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
