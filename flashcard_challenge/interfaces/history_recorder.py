"""Protocol for the append-only challenge history log."""

from typing import Protocol

from flashcard_challenge.models import HistoryEntry


class HistoryRecorder(Protocol):
    """Append-only log of completed sessions.

    There is no removal operation.
    """

    def append(self, entry: HistoryEntry) -> None:
        """Append an entry without touching earlier ones."""
        ...

    def entries(self, limit: int | None = None) -> list[HistoryEntry]:
        """Return entries newest first, optionally limited."""
        ...

    def __len__(self) -> int: ...
