"""Configuration classes for Flashcard Challenge."""

from dataclasses import dataclass, field
from pathlib import Path

from flashcard_challenge.models.settings import ChallengeDifficulty, ChallengeSettings


@dataclass(frozen=True)
class ChallengeConfig:
    """Immutable application configuration.

    Holds the defaults a new challenge is set up with, plus where card
    pools come from and where completed sessions are kept.
    """

    # Challenge defaults
    default_duration: int = 120  # Seconds
    default_cards_count: int = 10
    default_difficulty: str = "medium"
    default_include_hints: bool = True

    # Card source settings
    cards_file: Path | None = None
    card_source_url: str = ""
    request_timeout: float = 10.0  # Seconds

    # History settings
    history_db_path: Path = field(
        default_factory=lambda: Path.home() / ".flashcard_challenge" / "history.db"
    )
    use_persistent_history: bool = True
    history_display_limit: int = 5

    # Timer settings
    tick_interval: float = 1.0  # Seconds between countdown ticks

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.history_db_path, str):
            object.__setattr__(self, "history_db_path", Path(self.history_db_path))
        if isinstance(self.cards_file, str):
            object.__setattr__(
                self, "cards_file", Path(self.cards_file) if self.cards_file else None
            )

    def default_settings(self) -> ChallengeSettings:
        """Build the ChallengeSettings a fresh setup screen starts from."""
        return ChallengeSettings(
            duration=self.default_duration,
            cards_count=self.default_cards_count,
            difficulty=ChallengeDifficulty.parse(self.default_difficulty),
            include_hints=self.default_include_hints,
        )
