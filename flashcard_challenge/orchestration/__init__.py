"""Orchestration for coordinating challenge services."""

from .challenge_runner import ChallengeRunner
from .session_controller import ChallengeController, ChallengeSession

__all__ = ["ChallengeController", "ChallengeSession", "ChallengeRunner"]
