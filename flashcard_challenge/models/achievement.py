"""Achievement definition model."""

from collections.abc import Callable
from dataclasses import dataclass, field

from .settings import ChallengeSettings
from .stats import SessionStats


@dataclass(frozen=True)
class Achievement:
    """A named predicate over final session statistics.

    Holds no unlocked flag: whether it is unlocked is recomputed from
    the stats every time it is asked.
    """

    id: str
    name: str
    description: str
    condition: Callable[[SessionStats, ChallengeSettings], bool] = field(compare=False)
    icon: str = ""

    def is_unlocked(self, stats: SessionStats, settings: ChallengeSettings) -> bool:
        """Evaluate the predicate against the given stats."""
        return bool(self.condition(stats, settings))
