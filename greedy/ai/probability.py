"""
Greedy - Risk Estimates for AI Decisions

Closed-form approximations used by the strategies. A roll of n dice busts
only when no die shows a 1 or a 5 (triples and straights are ignored here),
so P(bust) = (4/6)^n.
"""

from __future__ import annotations

from dataclasses import dataclass

from greedy.engine.base import DICE_COUNT

# Average points per scoring die (weighted 1s and 5s)
AVG_POINTS_PER_DIE = 75
# Expected extra points after a successful steal roll
AVG_TURN_CONTINUATION = 300
# Expected value of a fresh five-dice turn
AVG_FRESH_TURN_ON_BOARD = 400
AVG_FRESH_TURN_OFF_BOARD = 300


def bust_probability(dice_count: int) -> float:
    """Chance that rolling `dice_count` dice shows no 1 and no 5."""
    return (4 / 6) ** dice_count


def success_probability(dice_count: int) -> float:
    """Chance of at least one 1 or 5 among `dice_count` dice."""
    return 1 - bust_probability(dice_count)


def roll_expected_value(dice_count: int) -> float:
    """Rough expected gain of one more roll with `dice_count` dice."""
    return success_probability(dice_count) * AVG_POINTS_PER_DIE * dice_count


@dataclass(frozen=True)
class StealEstimate:
    """Expected values of attempting versus declining an inherited pot."""
    success_prob: float
    attempt_ev: float
    decline_ev: float

    @property
    def ev_ratio(self) -> float:
        """Share of the combined EV that attempting represents."""
        total = self.attempt_ev + self.decline_ev
        return self.attempt_ev / total if total else 0.0


def estimate_steal(carryover_points: int, dice_count: int, is_on_board: bool) -> StealEstimate:
    """
    Compare rolling an inherited pot against starting fresh.

    Attempting: success × (pot + continuation); a failed attempt scores 0.
    Declining: success with five dice × expected fresh turn.
    """
    success_prob = success_probability(dice_count)
    attempt_ev = success_prob * (carryover_points + AVG_TURN_CONTINUATION)

    fresh_turn = AVG_FRESH_TURN_ON_BOARD if is_on_board else AVG_FRESH_TURN_OFF_BOARD
    decline_ev = success_probability(DICE_COUNT) * fresh_turn

    return StealEstimate(
        success_prob=success_prob,
        attempt_ev=attempt_ev,
        decline_ev=decline_ev,
    )


@dataclass(frozen=True)
class AIGameContext:
    """
    What banking now would hand to the next player.

    Attributes:
        dice_remaining_after_bank: Dice the next player would inherit
        next_player_is_on_board: Whether the next player may claim the pot
        turn_score_for_carryover: Points that would sit in the pot
    """
    dice_remaining_after_bank: int
    next_player_is_on_board: bool
    turn_score_for_carryover: int


@dataclass(frozen=True)
class CarryoverRisk:
    """Risk from 0 (harmless) to 1 (opponent very likely to cash in)."""
    risk_score: float
    steal_success_prob: float
    reasoning: str


def evaluate_carryover_risk(context: AIGameContext) -> CarryoverRisk:
    """
    Evaluate the risk of leaving a pot for the next player.

    Risk grows with the dice handed over, is scaled up when the opponent
    is on the board and down when they are not, and grows slowly with the
    points at stake.
    """
    dice = context.dice_remaining_after_bank
    points = context.turn_score_for_carryover

    if dice == 0 or points < 100:
        return CarryoverRisk(0.0, 0.0, "No carryover created")

    steal_success_prob = success_probability(dice)

    risk = steal_success_prob
    risk *= 1.3 if context.next_player_is_on_board else 0.7
    risk *= min(1.2, 0.8 + (points / 2000) * 0.4)
    risk = min(1.0, risk)

    reasoning = (
        f"{dice} dice @ {steal_success_prob:.0%} steal, "
        f"opponent {'on' if context.next_player_is_on_board else 'off'} board, "
        f"{points} points at risk"
    )
    return CarryoverRisk(risk, steal_success_prob, reasoning)
