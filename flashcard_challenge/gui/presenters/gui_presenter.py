"""GUI presenter implementation using Qt signals for thread-safe communication."""

from PyQt6.QtCore import QObject, pyqtSignal

from flashcard_challenge.models import (
    Achievement,
    HistoryEntry,
    SessionStats,
    StudyCard,
)


class GUIPresenter(QObject):
    """Thread-safe presenter using Qt signals.

    Implements ChallengePresenterProtocol through structural subtyping (duck
    typing). This avoids metaclass conflicts between QObject and Protocol
    metaclasses.

    Calls made from any thread emit signals that Qt queues for the main GUI
    thread, so the challenge window only ever updates on that thread.
    """

    info_signal = pyqtSignal(str)
    success_signal = pyqtSignal(str)
    warning_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    card_signal = pyqtSignal(int, int, object, object)  # index, total, StudyCard, hint
    answer_signal = pyqtSignal(object)  # StudyCard
    tick_signal = pyqtSignal(int)
    results_signal = pyqtSignal(object, list)  # SessionStats, list[Achievement]
    history_signal = pyqtSignal(list)  # list[HistoryEntry]

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        self.info_signal.emit(message)

    def show_success(self, message: str) -> None:
        self.success_signal.emit(message)

    def show_warning(self, message: str) -> None:
        self.warning_signal.emit(message)

    def show_error(self, message: str) -> None:
        self.error_signal.emit(message)

    def show_card(self, index: int, total: int, card: StudyCard, hint: str | None) -> None:
        """Display the question side of the current card.

        Args:
            index: Zero-based position in the card-set
            total: Length of the card-set
            card: The card to show
            hint: Hint text or None
        """
        self.card_signal.emit(index, total, card, hint)

    def show_answer(self, card: StudyCard) -> None:
        self.answer_signal.emit(card)

    def show_tick(self, time_left: int) -> None:
        self.tick_signal.emit(time_left)

    def show_results(self, stats: SessionStats, achievements: list[Achievement]) -> None:
        """Display final statistics and unlocked achievements.

        Args:
            stats: Final session statistics
            achievements: Unlocked achievements
        """
        self.results_signal.emit(stats, list(achievements))

    def show_history(self, entries: list[HistoryEntry]) -> None:
        self.history_signal.emit(list(entries))
