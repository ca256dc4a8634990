"""Append-only challenge history logs (in-memory and SQLite-backed)."""

import json
import logging
import sqlite3
import threading
from pathlib import Path

from flashcard_challenge.models import HistoryEntry, HistorySummary

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".flashcard_challenge" / "history.db"


class InMemoryHistoryLog:
    """Process-lifetime history log.

    Entries live in a tuple that is replaced, never mutated, on append, so
    a reader holding an older snapshot is unaffected.
    """

    def __init__(self):
        self._entries: tuple[HistoryEntry, ...] = ()
        self._lock = threading.Lock()

    def append(self, entry: HistoryEntry) -> None:
        """Append an entry to the log."""
        with self._lock:
            self._entries = (*self._entries, entry)

    def entries(self, limit: int | None = None) -> list[HistoryEntry]:
        """Return entries newest first.

        Args:
            limit: Maximum number of entries to return (None or negative = all)
        """
        newest_first = list(reversed(self._entries))
        if limit is None or limit < 0:
            return newest_first
        return newest_first[:limit]

    def __len__(self) -> int:
        return len(self._entries)


class SqliteHistoryLog:
    """History log persisted to SQLite across runs.

    Each method opens its own connection, so the log can be shared between
    the GUI thread and the timer thread.
    """

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        """Initialize the history log.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path

    def initialize(self) -> None:
        """Create the database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS challenge_history (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    entry_id TEXT NOT NULL UNIQUE,
                    timestamp TEXT NOT NULL,
                    score INTEGER NOT NULL DEFAULT 0,
                    correct_answers INTEGER NOT NULL DEFAULT 0,
                    total_cards INTEGER NOT NULL DEFAULT 0,
                    categories TEXT NOT NULL DEFAULT '[]',
                    difficulty TEXT NOT NULL DEFAULT 'medium',
                    duration INTEGER NOT NULL DEFAULT 0,
                    achievements TEXT NOT NULL DEFAULT '[]'
                )
                """)
        logger.info(f"History database initialized at {self.db_path}")

    def append(self, entry: HistoryEntry) -> None:
        """Insert an entry as a new row.

        Args:
            entry: Completed session summary
        """
        data = entry.to_dict()
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute(
                """
                INSERT INTO challenge_history
                    (entry_id, timestamp, score, correct_answers, total_cards,
                     categories, difficulty, duration, achievements)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["timestamp"],
                    data["score"],
                    data["correct_answers"],
                    data["total_cards"],
                    json.dumps(data["categories"]),
                    data["difficulty"],
                    data["duration"],
                    json.dumps(data["achievements"]),
                ),
            )

    def entries(self, limit: int | None = None) -> list[HistoryEntry]:
        """Get history entries, newest first.

        Args:
            limit: Maximum number of entries to return (None or negative = all)

        Returns:
            List of history entries
        """
        query = "SELECT * FROM challenge_history ORDER BY seq DESC"
        params: tuple = ()
        if limit is not None and limit >= 0:
            query += " LIMIT ?"
            params = (limit,)
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.row_factory = sqlite3.Row
            rows = conn.execute(query, params).fetchall()
        return [self._row_to_entry(row) for row in rows]

    def get_entry(self, entry_id: str) -> HistoryEntry | None:
        """Get a specific history entry by its id.

        Returns:
            The entry, or None if not found
        """
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM challenge_history WHERE entry_id = ?",
                (entry_id,),
            ).fetchone()
        if row is None:
            return None
        return self._row_to_entry(row)

    def __len__(self) -> int:
        with sqlite3.connect(str(self.db_path)) as conn:
            (count,) = conn.execute("SELECT COUNT(*) FROM challenge_history").fetchone()
        return count

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> HistoryEntry:
        """Convert a database row to a HistoryEntry with parsed JSON fields."""
        data = dict(row)
        data["id"] = data.pop("entry_id")
        try:
            data["categories"] = json.loads(row["categories"])
        except (json.JSONDecodeError, TypeError):
            data["categories"] = None
        try:
            data["achievements"] = json.loads(row["achievements"])
        except (json.JSONDecodeError, TypeError):
            data["achievements"] = None
        return HistoryEntry.from_dict(data)


def summarize(entries: list[HistoryEntry]) -> HistorySummary:
    """Aggregate a list of history entries."""
    summary = HistorySummary()
    for entry in entries:
        summary.sessions_played += 1
        summary.best_score = max(summary.best_score, entry.score)
        summary.total_cards_seen += entry.total_cards
        summary.total_correct += entry.correct_answers
        summary.total_score += entry.score
    return summary
