"""
Greedy Session Support.

Session creation models, state snapshots, and the AI session runner.
"""

from greedy.session.models import (
    CarryoverSnapshot,
    GameSnapshot,
    PlayerConfig,
    PlayerSnapshot,
    TurnSnapshot,
)
from greedy.session.runner import SessionRunner

__all__ = [
    "CarryoverSnapshot",
    "GameSnapshot",
    "PlayerConfig",
    "PlayerSnapshot",
    "SessionRunner",
    "TurnSnapshot",
]
