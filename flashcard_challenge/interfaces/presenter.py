"""Presenter protocol for output abstraction."""

from typing import Protocol

from flashcard_challenge.models import (
    Achievement,
    HistoryEntry,
    SessionStats,
    StudyCard,
)


class ChallengePresenterProtocol(Protocol):
    """Interface for presenting a challenge to the user (CLI, GUI, etc).

    The same session logic drives every presentation layer through this
    protocol.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_card(self, index: int, total: int, card: StudyCard, hint: str | None) -> None:
        """Display the question side of the current card.

        Args:
            index: Zero-based position of the card in the card-set
            total: Length of the card-set
            card: The card to show
            hint: Hint to show, or None when hints are off or missing
        """
        ...

    def show_answer(self, card: StudyCard) -> None:
        """Reveal the answer side of the current card.

        Args:
            card: The card whose answer is revealed
        """
        ...

    def show_tick(self, time_left: int) -> None:
        """Display the remaining time after a countdown tick.

        Args:
            time_left: Seconds left in the session
        """
        ...

    def show_results(self, stats: SessionStats, achievements: list[Achievement]) -> None:
        """Display final statistics and unlocked achievements.

        Args:
            stats: Final session statistics
            achievements: Achievements unlocked by this session
        """
        ...

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display past challenge results.

        Args:
            entries: History entries, newest first
        """
        ...
