"""
Greedy - AI Probability Tests

Tests for bust odds, steal estimates and carryover risk.
"""

import pytest

from greedy.ai.probability import (
    AIGameContext,
    StealEstimate,
    bust_probability,
    estimate_steal,
    evaluate_carryover_risk,
    roll_expected_value,
    success_probability,
)


class TestBustProbability:
    """Tests for the 1s-and-5s bust approximation."""

    @pytest.mark.parametrize("dice,expected", [
        (1, 4 / 6),
        (2, 16 / 36),
        (5, (4 / 6) ** 5),
    ])
    def test_bust_probability(self, dice, expected):
        assert bust_probability(dice) == pytest.approx(expected)

    def test_success_complements_bust(self):
        for dice in range(1, 6):
            assert success_probability(dice) + bust_probability(dice) == pytest.approx(1.0)

    def test_more_dice_is_safer(self):
        odds = [bust_probability(dice) for dice in range(1, 6)]
        assert odds == sorted(odds, reverse=True)

    def test_roll_expected_value(self):
        assert roll_expected_value(1) == pytest.approx(25.0)
        assert roll_expected_value(4) == pytest.approx((1 - (4 / 6) ** 4) * 300)


class TestEstimateSteal:
    """Tests for attempt versus decline expected values."""

    def test_two_dice_pot(self):
        estimate = estimate_steal(400, 2, is_on_board=True)
        assert estimate.success_prob == pytest.approx(20 / 36)
        assert estimate.attempt_ev == pytest.approx(20 / 36 * 700)
        assert estimate.decline_ev == pytest.approx((1 - (4 / 6) ** 5) * 400)

    def test_off_board_fresh_turn_worth_less(self):
        on = estimate_steal(400, 2, is_on_board=True)
        off = estimate_steal(400, 2, is_on_board=False)
        assert off.decline_ev < on.decline_ev
        assert off.attempt_ev == on.attempt_ev

    def test_ev_ratio(self):
        estimate = StealEstimate(success_prob=0.5, attempt_ev=300.0, decline_ev=100.0)
        assert estimate.ev_ratio == pytest.approx(0.75)

    def test_ev_ratio_without_value(self):
        assert StealEstimate(0.0, 0.0, 0.0).ev_ratio == 0.0


class TestCarryoverRisk:
    """Tests for the risk of handing a pot to the next player."""

    def test_no_dice_no_risk(self):
        risk = evaluate_carryover_risk(AIGameContext(0, True, 1000))
        assert risk.risk_score == 0.0
        assert risk.reasoning == "No carryover created"

    def test_small_pot_no_risk(self):
        assert evaluate_carryover_risk(AIGameContext(3, True, 50)).risk_score == 0.0

    def test_on_board_opponent_raises_risk(self):
        on = evaluate_carryover_risk(AIGameContext(2, True, 600))
        off = evaluate_carryover_risk(AIGameContext(2, False, 600))
        assert on.risk_score > off.risk_score
        assert on.steal_success_prob == pytest.approx(20 / 36)

    def test_risk_formula(self):
        risk = evaluate_carryover_risk(AIGameContext(1, False, 1000))
        assert risk.risk_score == pytest.approx((1 / 3) * 0.7 * 1.0)

    def test_risk_capped_at_one(self):
        risk = evaluate_carryover_risk(AIGameContext(5, True, 5000))
        assert risk.risk_score == 1.0
        assert "5 dice" in risk.reasoning
