"""
Greedy AI.

Strategy-driven AI players that use the same engine operations as humans.
"""

from greedy.ai.decision import AIDecision, build_game_context, find_best_keep, make_decision
from greedy.ai.probability import AIGameContext, evaluate_carryover_risk, estimate_steal
from greedy.ai.strategies import (
    DEFAULT_STRATEGIES,
    Decision,
    aggressive,
    balanced,
    chaos,
    conservative,
    should_attempt_steal,
)

__all__ = [
    "AIDecision",
    "AIGameContext",
    "DEFAULT_STRATEGIES",
    "Decision",
    "aggressive",
    "balanced",
    "build_game_context",
    "chaos",
    "conservative",
    "estimate_steal",
    "evaluate_carryover_risk",
    "find_best_keep",
    "make_decision",
    "should_attempt_steal",
]
