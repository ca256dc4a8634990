"""Protocol for card pool sources."""

from typing import Protocol

from flashcard_challenge.models import StudyCard


class CardSource(Protocol):
    """Interface for anything that can supply the pool of study cards.

    The challenge engine never fetches or caches cards itself; it only
    receives the list a source returns.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this source (e.g., 'cards.json')."""
        ...

    def load_cards(self) -> list[StudyCard]:
        """Load the full card collection.

        Returns:
            All cards the source knows about (may be empty).

        Raises:
            CardSourceError: If the collection cannot be loaded.
        """
        ...
