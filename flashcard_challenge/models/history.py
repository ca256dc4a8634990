"""Data model for challenge history entries."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class HistoryEntry:
    """Summary of one completed challenge session."""

    id: str
    timestamp: datetime
    score: int
    correct_answers: int
    total_cards: int
    categories: tuple[str, ...] = ("All",)
    difficulty: str = "medium"
    duration: int = 0
    achievements: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-compatible values."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "score": self.score,
            "correct_answers": self.correct_answers,
            "total_cards": self.total_cards,
            "categories": list(self.categories),
            "difficulty": self.difficulty,
            "duration": self.duration,
            "achievements": list(self.achievements),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryEntry":
        """Rebuild an entry serialized with to_dict()."""
        return cls(
            id=str(data["id"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            score=int(data["score"]),
            correct_answers=int(data["correct_answers"]),
            total_cards=int(data["total_cards"]),
            categories=tuple(data.get("categories") or ("All",)),
            difficulty=str(data.get("difficulty", "medium")),
            duration=int(data.get("duration", 0)),
            achievements=tuple(data.get("achievements") or ()),
        )


@dataclass
class HistorySummary:
    """Aggregated figures across history entries."""

    sessions_played: int = 0
    best_score: int = 0
    total_cards_seen: int = 0
    total_correct: int = 0
    total_score: int = 0

    @property
    def average_score(self) -> float:
        """Average score per session."""
        if self.sessions_played == 0:
            return 0.0
        return self.total_score / self.sessions_played

    @property
    def overall_accuracy(self) -> float:
        """Percentage of all seen cards answered correctly."""
        if self.total_cards_seen == 0:
            return 0.0
        return self.total_correct / self.total_cards_seen * 100
