"""Default configuration values for Flashcard Challenge."""

from .config import ChallengeConfig


def create_default_config(**overrides) -> ChallengeConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        ChallengeConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            default_duration=60,
            use_persistent_history=False
        )
    """
    return ChallengeConfig(**overrides)
