"""Data models for study cards."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CardDifficulty(str, Enum):
    """Difficulty tag carried by a single card."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class StudyCard:
    """A single question/answer card from the card collection."""

    id: str
    question: str
    answer: str
    category: str = ""
    difficulty: CardDifficulty = CardDifficulty.MEDIUM
    hint: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StudyCard":
        """Build a card from a backend or JSON-file mapping.

        Accepts ``id`` or ``_id``. Unknown difficulty tags fall back to medium.

        Raises:
            KeyError: If id, question or answer is missing
        """
        card_id = data["id"] if "id" in data else data["_id"]
        raw_difficulty = str(data.get("difficulty") or "medium").strip().lower()
        try:
            difficulty = CardDifficulty(raw_difficulty)
        except ValueError:
            difficulty = CardDifficulty.MEDIUM
        hint = data.get("hint") or None
        return cls(
            id=str(card_id),
            question=str(data["question"]),
            answer=str(data["answer"]),
            category=str(data.get("category") or ""),
            difficulty=difficulty,
            hint=str(hint) if hint is not None else None,
        )

    def __str__(self) -> str:
        return f"{self.question} [{self.category or 'uncategorized'}]"
