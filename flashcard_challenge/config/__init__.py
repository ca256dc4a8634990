"""Configuration management for Flashcard Challenge."""

from .config import ChallengeConfig
from .defaults import create_default_config

__all__ = ["ChallengeConfig", "create_default_config"]
