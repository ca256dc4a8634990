"""Challenge session lifecycle exceptions."""

from .base import ChallengeException


class EmptyPoolError(ChallengeException):
    """Raised when a session cannot start because no cards are available."""

    def __init__(self, message: str = "Cannot start: no cards available"):
        super().__init__(message)


class InvalidTransitionError(ChallengeException):
    """Raised when an action arrives in a state that does not accept it."""

    def __init__(self, action: str, state: str):
        self.action = action
        self.state = state
        super().__init__(f"Action '{action}' is not accepted while session is {state}")
