"""Per-card response records."""

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    """How a single card in the card-set ended up."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    SKIPPED = "skipped"
    UNANSWERED = "unanswered"

    @property
    def is_graded(self) -> bool:
        """True for outcomes that count toward the average response time."""
        return self in (Outcome.CORRECT, Outcome.INCORRECT)


@dataclass
class ResponseRecord:
    """Outcome and response time for one card slot."""

    outcome: Outcome = Outcome.UNANSWERED
    response_time: float = 0.0  # Seconds; 0 when skipped without reveal

    def __str__(self) -> str:
        return f"{self.outcome.value} ({self.response_time:.1f}s)"
