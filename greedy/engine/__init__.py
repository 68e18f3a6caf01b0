"""
Greedy Game Engine.

Pure Python game logic with zero transport/persistence dependencies.
Handles scoring, keep validation, the turn state machine and the
multi-player reducer.
"""

from greedy.engine.actions import (
    Bank,
    DeclineCarryover,
    EndTurn,
    GameAction,
    Keep,
    Roll,
    TurnAction,
)
from greedy.engine.base import (
    DICE_COUNT,
    ENTRY_THRESHOLD,
    TARGET_SCORE,
    CarryoverPot,
    DiceRoll,
    GameConfig,
    GameState,
    KeepValidation,
    PlayerState,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    StrategyName,
    TurnPhase,
    TurnState,
)
from greedy.engine.errors import (
    BankNotAllowed,
    DeclineNotAllowed,
    EndTurnNotReady,
    GameOver,
    GreedyError,
    InsufficientPlayers,
    InvalidKeep,
    InvalidRoll,
    NoCurrentRoll,
)
from greedy.engine.game import GameEngine
from greedy.engine.keeping import KeepValidator
from greedy.engine.scoring import ScoringEngine
from greedy.engine.turn import TurnEngine

__all__ = [
    # Constants
    "DICE_COUNT",
    "ENTRY_THRESHOLD",
    "TARGET_SCORE",
    # Data Classes
    "CarryoverPot",
    "DiceRoll",
    "GameConfig",
    "GameState",
    "KeepValidation",
    "PlayerState",
    "ScoringBreakdown",
    "ScoringResult",
    "TurnState",
    # Enums
    "ScoringCategory",
    "StrategyName",
    "TurnPhase",
    # Actions
    "Bank",
    "DeclineCarryover",
    "EndTurn",
    "GameAction",
    "Keep",
    "Roll",
    "TurnAction",
    # Errors
    "BankNotAllowed",
    "DeclineNotAllowed",
    "EndTurnNotReady",
    "GameOver",
    "GreedyError",
    "InsufficientPlayers",
    "InvalidKeep",
    "InvalidRoll",
    "NoCurrentRoll",
    # Engines
    "GameEngine",
    "KeepValidator",
    "ScoringEngine",
    "TurnEngine",
]
