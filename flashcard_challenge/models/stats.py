"""Final statistics of a challenge session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionStats:
    """Statistics computed once, when a session finishes.

    ``correct_answers + incorrect_answers + skipped_answers == total_cards``
    always holds.
    """

    score: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0
    skipped_answers: int = 0
    average_response_time: float = 0.0
    streak: int = 0
    longest_streak: int = 0
    time_remaining: int = 0
    total_cards: int = 0

    @property
    def answered(self) -> int:
        """Number of cards graded correct or incorrect."""
        return self.correct_answers + self.incorrect_answers

    @property
    def accuracy(self) -> float:
        """Percentage of the card-set answered correctly."""
        if self.total_cards == 0:
            return 0.0
        return self.correct_answers / self.total_cards * 100

    def __str__(self) -> str:
        return (
            f"SessionStats(score={self.score}, correct={self.correct_answers}, "
            f"incorrect={self.incorrect_answers}, skipped={self.skipped_answers}, "
            f"avg={self.average_response_time:.1f}s)"
        )
