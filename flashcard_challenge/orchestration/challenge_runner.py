"""Interactive console loop for playing a challenge."""

import logging
from collections.abc import Callable

from flashcard_challenge.models import ChallengeSettings, SessionState, SessionStats, StudyCard

from .session_controller import ChallengeController

logger = logging.getLogger(__name__)

REVEAL_PROMPT = "[Enter] reveal  [s] skip  [q] quit > "
GRADE_PROMPT = "[y] correct  [n] incorrect  [s] skip  [q] quit > "


class ChallengeRunner:
    """Drive a challenge session from line-based user input.

    The countdown keeps running in the background while waiting for input;
    if time runs out mid-prompt, the pending answer is discarded.
    """

    def __init__(
        self,
        controller: ChallengeController,
        input_func: Callable[[str], str] = input,
    ):
        """Initialize the runner.

        Args:
            controller: Controller that creates the session
            input_func: Function reading one line of user input
        """
        self.controller = controller
        self._input = input_func

    def run(self, pool: list[StudyCard], settings: ChallengeSettings) -> SessionStats | None:
        """Play one challenge until it finishes.

        Args:
            pool: Full card collection
            settings: Challenge settings

        Returns:
            Final statistics, or None if the session could not be started

        Raises:
            EmptyPoolError: If there are no cards to play
        """
        session = self.controller.start(pool, settings)
        if session is None:
            return None

        while session.state is SessionState.RUNNING:
            prompt = GRADE_PROMPT if session.answer_revealed else REVEAL_PROMPT
            try:
                choice = self._input(prompt).strip().lower()
            except (EOFError, KeyboardInterrupt):
                choice = "q"

            if session.state is not SessionState.RUNNING:
                break

            if choice == "q":
                session.end()
            elif choice == "s":
                session.skip()
            elif not session.answer_revealed:
                session.reveal()
            elif choice in ("y", "yes"):
                session.respond(correct=True)
            elif choice in ("n", "no"):
                session.respond(correct=False)
            else:
                logger.debug(f"Ignoring unrecognized input {choice!r}")

        return session.stats
