"""Null presenter for testing (no output)."""

from flashcard_challenge.models import (
    Achievement,
    HistoryEntry,
    SessionStats,
    StudyCard,
)


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_card(self, index: int, total: int, card: StudyCard, hint: str | None) -> None:
        """Display the current card (no-op)."""
        pass

    def show_answer(self, card: StudyCard) -> None:
        """Reveal the current answer (no-op)."""
        pass

    def show_tick(self, time_left: int) -> None:
        """Display the remaining time (no-op)."""
        pass

    def show_results(self, stats: SessionStats, achievements: list[Achievement]) -> None:
        """Display final statistics (no-op)."""
        pass

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display past results (no-op)."""
        pass
