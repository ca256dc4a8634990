"""Session lifecycle states."""

from enum import Enum


class SessionState(str, Enum):
    """States of a challenge session. FINISHED is terminal."""

    SETUP = "setup"
    RUNNING = "running"
    FINISHED = "finished"
