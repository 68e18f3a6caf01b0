"""
Greedy - AI Strategies

Strategies are pure functions over the same TurnState a human sees. Each
decides whether to roll again or bank while the turn is DECIDING, and
whether to attempt or decline an inherited carryover pot.

Randomness (chaos only) comes from the caller's `rng`; the strategy table
is an immutable mapping passed to whoever drives AI seats.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from greedy.ai.probability import (
    AIGameContext,
    bust_probability,
    estimate_steal,
    evaluate_carryover_risk,
    roll_expected_value,
)
from greedy.engine.base import DICE_COUNT, StrategyName, TurnState

logger = logging.getLogger(__name__)


class Decision(Enum):
    """
    What an AI seat wants to do next.

    Strategies only ever return ROLL or BANK; the other members complete
    the action vocabulary for make_decision.
    """
    KEEP = "KEEP"
    ROLL = "ROLL"
    BANK = "BANK"
    DECLINE_CARRYOVER = "DECLINE_CARRYOVER"
    END_TURN = "END_TURN"


Strategy = Callable[..., Decision]


def conservative(
    turn: TurnState,
    is_on_board: bool,
    entry_threshold: int,
    *,
    rng: random.Random | None = None,
    context: AIGameContext | None = None,
) -> Decision:
    """
    Plays it safe and banks early.

    Banks as soon as it gets on the board, then at 300+ per turn. Rolls on
    rather than hand a likely steal to an on-board opponent while the bust
    risk stays low.
    """
    if turn.is_hot_dice:
        return Decision.ROLL

    if not is_on_board:
        if turn.own_score >= entry_threshold:
            return Decision.BANK
        return Decision.ROLL

    if turn.turn_score >= 300:
        if context is not None:
            risk = evaluate_carryover_risk(context)
            if risk.risk_score > 0.6 and turn.dice_remaining > 2:
                if bust_probability(turn.dice_remaining) < 0.35:
                    logger.debug("Conservative avoiding carryover: %s", risk.reasoning)
                    return Decision.ROLL
        return Decision.BANK

    return Decision.ROLL


def aggressive(
    turn: TurnState,
    is_on_board: bool,
    entry_threshold: int,
    *,
    rng: random.Random | None = None,
    context: AIGameContext | None = None,
) -> Decision:
    """
    Takes big risks for big rewards.

    Off the board it banks only once the score is comfortably past entry
    with poor odds, or at 1500. On the board it chases hot dice with two
    or fewer dice below 2500 and banks at 3500.
    """
    if turn.is_hot_dice:
        return Decision.ROLL

    if not is_on_board:
        if turn.own_score < entry_threshold:
            return Decision.ROLL

        high_risk = bust_probability(turn.dice_remaining) >= 0.4
        decent_score = turn.turn_score >= entry_threshold + 300
        great_score = turn.turn_score >= 1500

        if (high_risk and decent_score) or great_score:
            return Decision.BANK
        return Decision.ROLL

    if turn.dice_remaining <= 2 and turn.turn_score < 2500:
        return Decision.ROLL

    if turn.turn_score >= 3500:
        return Decision.BANK

    return Decision.ROLL


def balanced(
    turn: TurnState,
    is_on_board: bool,
    entry_threshold: int,
    *,
    rng: random.Random | None = None,
    context: AIGameContext | None = None,
) -> Decision:
    """
    Weighs risk against reward.

    Secures entry as soon as it is reachable unless the next roll is very
    safe and the score is barely over the threshold. On the board it banks
    once the score passes a threshold that drops as dice run out, or at 1500.
    """
    if turn.is_hot_dice:
        return Decision.ROLL

    bust_prob = bust_probability(turn.dice_remaining)

    if not is_on_board:
        if turn.own_score < entry_threshold:
            return Decision.ROLL

        barely_over = turn.turn_score < entry_threshold + 150
        very_safe = bust_prob < 0.25
        if not (barely_over and very_safe):
            return Decision.BANK

    ev = roll_expected_value(turn.dice_remaining)
    effective_threshold = 1000 - (turn.dice_remaining / DICE_COUNT) * 500

    # Leaving a rich pot for an on-board opponent raises the bar for banking
    adjustment = 0.0
    if context is not None and turn.turn_score >= effective_threshold:
        risk = evaluate_carryover_risk(context)
        if risk.risk_score > 0.5 and bust_prob < 0.4:
            adjustment = risk.risk_score * 300
            logger.debug(
                "Balanced weighing carryover: %s, adjustment +%.0f",
                risk.reasoning, adjustment,
            )

    if turn.turn_score >= effective_threshold + adjustment and turn.turn_score > ev * 3:
        return Decision.BANK

    if turn.turn_score >= 1500 + adjustment / 2:
        return Decision.BANK

    return Decision.ROLL


def chaos(
    turn: TurnState,
    is_on_board: bool,
    entry_threshold: int,
    *,
    rng: random.Random | None = None,
    context: AIGameContext | None = None,
) -> Decision:
    """Coin flip between rolling and banking once banking is allowed."""
    if turn.is_hot_dice:
        return Decision.ROLL

    if not is_on_board and turn.own_score < entry_threshold:
        return Decision.ROLL

    if rng is None:
        raise ValueError("Chaos strategy needs a random source.")

    return Decision.BANK if rng.random() > 0.5 else Decision.ROLL


DEFAULT_STRATEGIES: Mapping[StrategyName, Strategy] = MappingProxyType({
    StrategyName.CONSERVATIVE: conservative,
    StrategyName.AGGRESSIVE: aggressive,
    StrategyName.BALANCED: balanced,
    StrategyName.CHAOS: chaos,
})


def should_attempt_steal(
    carryover_points: int,
    dice_count: int,
    strategy_name: StrategyName,
    is_on_board: bool,
    *,
    rng: random.Random | None = None,
) -> tuple[bool, str]:
    """
    Decide whether to roll an inherited pot or decline it.

    Returns:
        Tuple of (should_attempt, reasoning)
    """
    estimate = estimate_steal(carryover_points, dice_count, is_on_board)
    odds = f"{estimate.success_prob:.0%}"
    evs = f"{estimate.attempt_ev:.0f} vs {estimate.decline_ev:.0f}"

    logger.debug(
        "Steal analysis: %d points on %d dice, success %s, EV %s",
        carryover_points, dice_count, odds, evs,
    )

    if strategy_name == StrategyName.CONSERVATIVE:
        attempt = (
            estimate.success_prob >= 0.5
            and estimate.attempt_ev >= estimate.decline_ev * 1.5
        )
        reason = f"Safe enough ({odds}) with good EV ({evs})" if attempt else f"Too risky ({odds}) or poor EV ({evs})"
        return attempt, reason

    if strategy_name == StrategyName.AGGRESSIVE:
        worth_it = carryover_points >= 800 or estimate.success_prob >= 0.3
        attempt = worth_it and estimate.attempt_ev >= estimate.decline_ev * 0.5
        reason = f"Going for {carryover_points} points at {odds}" if attempt else "Odds too long even for me"
        return attempt, reason

    if strategy_name == StrategyName.CHAOS:
        if rng is None:
            raise ValueError("Chaos strategy needs a random source.")
        attempt = rng.random() < estimate.ev_ratio
        reason = f"Feeling {'lucky' if attempt else 'cautious'} ({estimate.ev_ratio:.0%} threshold)"
        return attempt, reason

    attempt = (
        estimate.attempt_ev >= estimate.decline_ev * 1.1
        and estimate.success_prob >= 0.35
    )
    reason = f"EV favors attempt ({evs}) at {odds}" if attempt else f"Better to start fresh ({evs})"
    return attempt, reason
