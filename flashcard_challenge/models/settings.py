"""Challenge settings model with range clamping."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from flashcard_challenge.exceptions.settings import MalformedSettingsWarning

logger = logging.getLogger(__name__)

MIN_DURATION = 30
MAX_DURATION = 300
MIN_CARDS = 5
MAX_CARDS = 30


class ChallengeDifficulty(str, Enum):
    """Difficulty tier chosen for a whole challenge."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @classmethod
    def parse(cls, value: "str | ChallengeDifficulty") -> "ChallengeDifficulty":
        """Parse a tier name, falling back to medium for unknown names."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.debug(str(MalformedSettingsWarning("difficulty", value, cls.MEDIUM.value)))
            return cls.MEDIUM


def _clamp(name: str, value: int, low: int, high: int) -> int:
    clamped = max(low, min(high, int(value)))
    if clamped != value:
        logger.debug(str(MalformedSettingsWarning(name, value, clamped)))
    return clamped


@dataclass(frozen=True)
class ChallengeSettings:
    """Settings for one challenge session.

    Created once at setup time and never changed while the session runs.
    Out-of-range values are clamped to the nearest bound, never rejected.
    """

    duration: int = 120  # Seconds, clamped to [30, 300]
    cards_count: int = 10  # Clamped to [5, 30]
    difficulty: ChallengeDifficulty = ChallengeDifficulty.MEDIUM
    categories: frozenset[str] = field(default_factory=frozenset)  # Empty = all
    include_hints: bool = True

    def __post_init__(self):
        """Clamp numeric ranges and normalize field types."""
        object.__setattr__(
            self, "duration", _clamp("duration", self.duration, MIN_DURATION, MAX_DURATION)
        )
        object.__setattr__(
            self, "cards_count", _clamp("cards_count", self.cards_count, MIN_CARDS, MAX_CARDS)
        )
        object.__setattr__(self, "difficulty", ChallengeDifficulty.parse(self.difficulty))
        if not isinstance(self.categories, frozenset):
            object.__setattr__(self, "categories", frozenset(self.categories or ()))

    @property
    def category_labels(self) -> tuple[str, ...]:
        """Sorted category names for display, ``("All",)`` when unfiltered."""
        return tuple(sorted(self.categories)) if self.categories else ("All",)
