"""State machine for timed challenge sessions."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from datetime import datetime, timezone
from uuid import uuid4

from flashcard_challenge.exceptions import EmptyPoolError, InvalidTransitionError
from flashcard_challenge.interfaces import ChallengePresenterProtocol, HistoryRecorder, Scheduler
from flashcard_challenge.models import (
    Achievement,
    ChallengeSettings,
    HistoryEntry,
    Outcome,
    SessionState,
    SessionStats,
    StudyCard,
)
from flashcard_challenge.presenters import NullPresenter
from flashcard_challenge.services import achievement_service
from flashcard_challenge.services.card_selector import CardPoolSelector
from flashcard_challenge.services.history_service import InMemoryHistoryLog
from flashcard_challenge.services.scorer import ResponseTracker
from flashcard_challenge.services.session_timer import SessionTimer

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[SessionStats, HistoryEntry], None]


class ChallengeSession:
    """One run of the challenge, from SETUP to FINISHED.

    A session object is never reset: starting over means creating a new
    session, so every history entry maps to exactly one completed run.

    Actions that arrive in the wrong state are logged and ignored; they
    return False and leave the session untouched.

    Thread Safety:
        Every public mutating method takes the session's RLock, which the
        timer also holds while ticking, so ticks and user actions are
        processed strictly one at a time.
    """

    def __init__(
        self,
        pool: list[StudyCard],
        settings: ChallengeSettings,
        scheduler: Scheduler,
        selector: CardPoolSelector | None = None,
        history: HistoryRecorder | None = None,
        presenter: ChallengePresenterProtocol | None = None,
        on_complete: CompletionCallback | None = None,
        clock: Callable[[], float] = time.monotonic,
        tick_interval: float = 1.0,
    ):
        """Initialize the session in SETUP state.

        Args:
            pool: Full card collection supplied by the caller
            settings: Settings for this session
            scheduler: Scheduler that drives the countdown
            selector: Card pool selector (defaults to an unseeded one)
            history: Log that receives the history entry on completion
            presenter: Output presenter
            on_complete: Hook called with (stats, entry) when the session finishes
            clock: Monotonic clock for response times
            tick_interval: Seconds between countdown ticks
        """
        self.settings = settings
        self._pool = list(pool)
        self._scheduler = scheduler
        self._selector = selector or CardPoolSelector()
        self._history = history if history is not None else InMemoryHistoryLog()
        self.presenter = presenter or NullPresenter()
        self._on_complete = on_complete
        self._clock = clock
        self._tick_interval = tick_interval

        self._lock = threading.RLock()
        self._state = SessionState.SETUP
        self._cards: list[StudyCard] = []
        self._tracker: ResponseTracker | None = None
        self._timer: SessionTimer | None = None
        self._index = 0
        self._revealed = False
        self._stats: SessionStats | None = None
        self._entry: HistoryEntry | None = None
        self._unlocked: list[Achievement] = []

    # === Read-only views ===

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def cards(self) -> list[StudyCard]:
        return list(self._cards)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_card(self) -> StudyCard | None:
        """Card being shown, or None outside RUNNING."""
        if self._state is not SessionState.RUNNING:
            return None
        return self._cards[self._index]

    @property
    def answer_revealed(self) -> bool:
        return self._revealed

    @property
    def current_hint(self) -> str | None:
        """Hint of the current card, only when hints are enabled."""
        card = self.current_card
        if card is None or not self.settings.include_hints:
            return None
        return card.hint

    @property
    def time_left(self) -> int:
        if self._timer is None:
            return self.settings.duration
        return self._timer.time_left

    @property
    def progress(self) -> float:
        """Percentage of the card-set already passed."""
        if not self._cards:
            return 0.0
        if self._state is SessionState.FINISHED:
            return 100.0
        return self._index / len(self._cards) * 100

    @property
    def streak(self) -> int:
        return self._tracker.streak if self._tracker else 0

    @property
    def longest_streak(self) -> int:
        return self._tracker.longest_streak if self._tracker else 0

    @property
    def stats(self) -> SessionStats | None:
        """Final statistics, available once FINISHED."""
        return self._stats

    @property
    def history_entry(self) -> HistoryEntry | None:
        return self._entry

    @property
    def unlocked_achievements(self) -> list[Achievement]:
        return list(self._unlocked)

    # === Transitions ===

    def start(self) -> bool:
        """Select the card-set and start the countdown (SETUP -> RUNNING).

        Returns:
            True if the session started, False if it was not in SETUP

        Raises:
            EmptyPoolError: If no cards could be selected; the session stays in SETUP
        """
        with self._lock:
            if self._state is not SessionState.SETUP:
                return self._reject("start")

            cards = self._selector.select_cards(self._pool, self.settings)
            if not cards:
                raise EmptyPoolError()

            self._cards = cards
            self._tracker = ResponseTracker(len(cards))
            self._index = 0
            self._revealed = False
            self._timer = SessionTimer(
                self.settings.duration,
                self._scheduler,
                on_expire=self._on_time_expired,
                on_tick=self._on_tick,
                clock=self._clock,
                interval=self._tick_interval,
                lock=self._lock,
            )
            self._state = SessionState.RUNNING
            logger.info(
                f"Challenge started: {len(cards)} cards, {self.settings.duration}s, "
                f"difficulty={self.settings.difficulty.value}"
            )
            self._timer.start()
            self._show_current()
            return True

    def reveal(self) -> bool:
        """Reveal the answer of the current card."""
        with self._lock:
            if self._state is not SessionState.RUNNING:
                return self._reject("reveal")
            if not self._revealed:
                self._revealed = True
                self.presenter.show_answer(self._cards[self._index])
            return True

    def respond(self, correct: bool) -> bool:
        """Grade the current card after its answer was revealed.

        Args:
            correct: Whether the user got the card right

        Returns:
            True if the response was accepted
        """
        with self._lock:
            if self._state is not SessionState.RUNNING or not self._revealed:
                return self._reject("respond")
            outcome = Outcome.CORRECT if correct else Outcome.INCORRECT
            self._advance(outcome, self._timer.elapsed_since_mark())
            return True

    def skip(self) -> bool:
        """Skip the current card. Response time counts only after a reveal."""
        with self._lock:
            if self._state is not SessionState.RUNNING:
                return self._reject("skip")
            elapsed = self._timer.elapsed_since_mark() if self._revealed else 0.0
            self._advance(Outcome.SKIPPED, elapsed)
            return True

    def end(self) -> bool:
        """Terminate the session by hand; unreached cards count as skipped."""
        with self._lock:
            if self._state is not SessionState.RUNNING:
                return self._reject("end")
            self._finish(time_expired=False)
            return True

    # === Internals ===

    def _reject(self, action: str) -> bool:
        logger.warning(str(InvalidTransitionError(action, self._state.value)))
        return False

    def _show_current(self) -> None:
        self.presenter.show_card(
            self._index, len(self._cards), self._cards[self._index], self.current_hint
        )

    def _advance(self, outcome: Outcome, elapsed: float) -> None:
        is_last = self._tracker.record_response(self._index, outcome, elapsed)
        if is_last:
            self._finish(time_expired=False)
            return
        self._index += 1
        self._revealed = False
        self._timer.mark()
        self._show_current()

    def _on_tick(self, time_left: int) -> None:
        if self._state is SessionState.RUNNING:
            self.presenter.show_tick(time_left)

    def _on_time_expired(self) -> None:
        with self._lock:
            if self._state is SessionState.RUNNING:
                logger.info("Challenge time expired")
                self._finish(time_expired=True)

    def _finish(self, time_expired: bool) -> None:
        self._timer.cancel()
        self._state = SessionState.FINISHED

        stats = self._tracker.finalize(
            time_expired=time_expired,
            duration=self.settings.duration,
            time_remaining=self._timer.time_left,
        )
        unlocked = achievement_service.evaluate(stats, self.settings)
        entry = HistoryEntry(
            id=uuid4().hex,
            timestamp=datetime.now(timezone.utc),
            score=stats.score,
            correct_answers=stats.correct_answers,
            total_cards=stats.total_cards,
            categories=self.settings.category_labels,
            difficulty=self.settings.difficulty.value,
            duration=self.settings.duration,
            achievements=tuple(a.id for a in unlocked),
        )
        self._stats = stats
        self._unlocked = unlocked
        self._entry = entry
        self._history.append(entry)
        logger.info(f"Challenge finished: {stats}")

        self.presenter.show_results(stats, unlocked)
        if self._on_complete:
            self._on_complete(stats, entry)


class ChallengeController:
    """Create challenge sessions and own the shared history log.

    Only one session runs at a time: a start request while the current
    session is RUNNING is logged and ignored.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        history: HistoryRecorder | None = None,
        selector: CardPoolSelector | None = None,
        presenter: ChallengePresenterProtocol | None = None,
        on_complete: CompletionCallback | None = None,
        clock: Callable[[], float] = time.monotonic,
        tick_interval: float = 1.0,
    ):
        self.scheduler = scheduler
        self.history = history if history is not None else InMemoryHistoryLog()
        self.selector = selector or CardPoolSelector()
        self.presenter = presenter or NullPresenter()
        self.on_complete = on_complete
        self._clock = clock
        self._tick_interval = tick_interval
        self._session: ChallengeSession | None = None

    @property
    def session(self) -> ChallengeSession | None:
        """Most recently started session."""
        return self._session

    def start(self, pool: list[StudyCard], settings: ChallengeSettings) -> ChallengeSession | None:
        """Start a brand-new session.

        Args:
            pool: Full card collection
            settings: Settings for the new session

        Returns:
            The running session, or None if another session is still running

        Raises:
            EmptyPoolError: If no cards are available; no session is created
        """
        if self._session is not None and self._session.state is SessionState.RUNNING:
            logger.warning(str(InvalidTransitionError("start", SessionState.RUNNING.value)))
            return None

        session = ChallengeSession(
            pool,
            settings,
            self.scheduler,
            selector=self.selector,
            history=self.history,
            presenter=self.presenter,
            on_complete=self.on_complete,
            clock=self._clock,
            tick_interval=self._tick_interval,
        )
        session.start()
        self._session = session
        return session

    def available_categories(self, pool: list[StudyCard]) -> list[str]:
        """Categories offered on the setup screen."""
        return self.selector.available_categories(pool)
