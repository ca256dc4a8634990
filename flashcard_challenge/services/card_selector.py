"""Service for selecting the working set of cards for a challenge."""

import logging
import random

from flashcard_challenge.models import (
    CardDifficulty,
    ChallengeDifficulty,
    ChallengeSettings,
    StudyCard,
)

logger = logging.getLogger(__name__)

# Card difficulties admitted by each challenge tier. Hard and expert admit
# everything; expert only differs in which achievements are reachable.
ALLOWED_DIFFICULTIES: dict[ChallengeDifficulty, frozenset[CardDifficulty]] = {
    ChallengeDifficulty.EASY: frozenset({CardDifficulty.EASY}),
    ChallengeDifficulty.MEDIUM: frozenset({CardDifficulty.EASY, CardDifficulty.MEDIUM}),
    ChallengeDifficulty.HARD: frozenset(CardDifficulty),
    ChallengeDifficulty.EXPERT: frozenset(CardDifficulty),
}


class CardPoolSelector:
    """Pick a bounded, filtered, shuffled card-set from the full pool.

    Pass a seeded ``random.Random`` to make selection reproducible.
    """

    def __init__(self, rng: random.Random | None = None):
        """Initialize the selector.

        Args:
            rng: Random source used for shuffling (defaults to a fresh Random)
        """
        self._rng = rng or random.Random()

    def filter_pool(self, pool: list[StudyCard], settings: ChallengeSettings) -> list[StudyCard]:
        """Apply the category and difficulty filters, keeping pool order.

        Args:
            pool: Full card collection
            settings: Challenge settings with the filters

        Returns:
            Cards that pass both filters
        """
        cards = list(pool)
        if settings.categories:
            cards = [card for card in cards if card.category in settings.categories]
        allowed = ALLOWED_DIFFICULTIES[settings.difficulty]
        return [card for card in cards if card.difficulty in allowed]

    def select_cards(self, pool: list[StudyCard], settings: ChallengeSettings) -> list[StudyCard]:
        """Select the card-set for one session.

        Filters, shuffles and truncates to ``settings.cards_count``. When the
        filtered set is too small it is padded with random cards from the
        unfiltered pool, so the result is ``min(cards_count, len(pool))`` long.

        Args:
            pool: Full card collection
            settings: Challenge settings

        Returns:
            Ordered card-set without duplicate cards
        """
        target = settings.cards_count
        selected = self.filter_pool(pool, settings)
        self._rng.shuffle(selected)
        selected = selected[:target]

        if len(selected) < target:
            taken = {id(card) for card in selected}
            extra = [card for card in pool if id(card) not in taken]
            self._rng.shuffle(extra)
            backfill = extra[: target - len(selected)]
            if backfill:
                logger.debug(
                    f"Filtered pool had {len(selected)} cards, "
                    f"backfilled {len(backfill)} from the full pool"
                )
            selected.extend(backfill)

        return selected

    @staticmethod
    def available_categories(pool: list[StudyCard]) -> list[str]:
        """Sorted distinct non-empty categories present in the pool."""
        return sorted({card.category for card in pool if card.category})
