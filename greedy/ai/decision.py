"""
Greedy - AI Decision Entry Point

Maps the current turn phase to the matching strategy call. AI seats have no
privileged path: the decision is turned into an ordinary reducer action by
whoever schedules AI turns.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Mapping, Sequence

from greedy.ai.probability import AIGameContext
from greedy.ai.strategies import DEFAULT_STRATEGIES, Decision, Strategy, should_attempt_steal
from greedy.engine.base import GameState, StrategyName, TurnPhase, TurnState
from greedy.engine.scoring import ScoringEngine
from greedy.engine.turn import TurnEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AIDecision:
    """
    A decision for the current seat.

    Attributes:
        action: What to do next
        dice: Die values to keep (KEEP only)
        reasoning: Short explanation, for logs
    """
    action: Decision
    dice: tuple[int, ...] = ()
    reasoning: str = ""


def find_best_keep(roll: Sequence[int]) -> tuple[int, ...]:
    """Keep every scoring die in the roll."""
    return ScoringEngine.score_selection(roll).scoring_dice


def build_game_context(game: GameState) -> AIGameContext | None:
    """Describe the pot that banking now would leave for the next seat."""
    pot = TurnEngine.get_carryover_pot(game.turn)
    if pot is None:
        return None

    next_player = game.players[game.next_player_index]
    return AIGameContext(
        dice_remaining_after_bank=pot.dice_count,
        next_player_is_on_board=next_player.is_on_board,
        turn_score_for_carryover=pot.points,
    )


def make_decision(
    turn: TurnState,
    is_on_board: bool,
    strategy_name: StrategyName,
    entry_threshold: int,
    *,
    strategies: Mapping[StrategyName, Strategy] = DEFAULT_STRATEGIES,
    rng: random.Random | None = None,
    context: AIGameContext | None = None,
) -> AIDecision:
    """
    Make a complete AI decision for the current turn state.

    Handles the steal choice, dice selection, and the roll/bank choice.

    Args:
        turn: Current turn state
        is_on_board: Whether the deciding player is on the board
        strategy_name: Strategy to consult
        entry_threshold: Own points needed to get on the board
        strategies: Strategy table to dispatch through
        rng: Random source for strategies that need one
        context: Carryover context for the roll/bank choice

    Returns:
        AIDecision the engine will accept
    """
    if turn.phase == TurnPhase.ENDED:
        return AIDecision(Decision.END_TURN)

    if turn.phase == TurnPhase.STEAL_REQUIRED and not turn.current_roll:
        attempt, reasoning = should_attempt_steal(
            turn.carryover_points,
            turn.dice_remaining,
            strategy_name,
            is_on_board,
            rng=rng,
        )
        logger.debug(
            "Steal decision (%s): %s - %s",
            strategy_name.value, "ATTEMPT" if attempt else "DECLINE", reasoning,
        )
        if attempt:
            return AIDecision(Decision.ROLL, reasoning=reasoning)
        return AIDecision(Decision.DECLINE_CARRYOVER, reasoning=reasoning)

    if turn.phase == TurnPhase.KEEPING and turn.current_roll:
        return AIDecision(Decision.KEEP, dice=find_best_keep(turn.current_roll))

    if turn.phase == TurnPhase.DECIDING:
        strategy = strategies[strategy_name]
        choice = strategy(turn, is_on_board, entry_threshold, rng=rng, context=context)
        return AIDecision(choice)

    return AIDecision(Decision.ROLL)
