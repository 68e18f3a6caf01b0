"""
Greedy - Scoring Engine Tests

Tests for score_selection, bust and hot dice detection, and dice rolling.
"""

import random
from itertools import product

import pytest

from greedy.engine.base import DiceRoll, ScoringCategory
from greedy.engine.scoring import ScoringEngine


class TestScoringTable:
    """Every pattern in the shared scoring table."""

    def test_all_patterns(self, scoring_rolls):
        for name, (dice, expected, description) in scoring_rolls.items():
            result = ScoringEngine.score_selection(dice)
            assert result.score == expected, f"{name}: {description}"


class TestSingleDieScoring:
    """Tests for single die scoring (1s and 5s)."""

    def test_single_one_scores_100(self):
        result = ScoringEngine.score_selection((1,))
        assert result.score == 100
        assert result.scoring_dice == (1,)

    def test_single_five_scores_50(self):
        result = ScoringEngine.score_selection((5,))
        assert result.score == 50

    @pytest.mark.parametrize("value", [2, 3, 4, 6])
    def test_non_scoring_single(self, value: int):
        result = ScoringEngine.score_selection((value,))
        assert result.score == 0
        assert result.scoring_dice == ()
        assert result.remaining_dice == (value,)


class TestSets:
    """Tests for three, four and five of a kind."""

    @pytest.mark.parametrize("value,expected", [
        (1, 1000),
        (2, 200),
        (3, 300),
        (4, 400),
        (5, 500),
        (6, 600),
    ])
    def test_three_of_a_kind(self, value: int, expected: int):
        result = ScoringEngine.score_selection((value,) * 3)
        assert result.score == expected
        assert result.breakdown[0].category == ScoringCategory.THREE_OF_A_KIND

    def test_triple_ones_ignores_twos(self):
        result = ScoringEngine.score_selection((1, 1, 1, 2, 2))
        assert result.score == 1000
        assert result.scoring_dice == (1, 1, 1)
        assert result.remaining_dice == (2, 2)

    def test_four_fives_doubles_triple(self):
        result = ScoringEngine.score_selection((5, 5, 5, 5))
        assert result.score == 1000
        assert result.breakdown[0].category == ScoringCategory.FOUR_OF_A_KIND

    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5, 6])
    def test_five_of_a_kind_quadruples_triple(self, value: int):
        triple = ScoringEngine.TRIPLE_POINTS[value]
        result = ScoringEngine.score_selection((value,) * 5)
        assert result.score == triple * 4
        assert result.breakdown[0].category == ScoringCategory.FIVE_OF_A_KIND

    def test_set_absorbs_matching_singles(self):
        """Ones inside a triple are not also scored as singles."""
        result = ScoringEngine.score_selection((1, 1, 1, 1, 5))
        assert result.score == 2050
        categories = [item.category for item in result.breakdown]
        assert categories == [ScoringCategory.FOUR_OF_A_KIND, ScoringCategory.SINGLE_FIVE]


class TestStraights:
    """Tests for straight combinations."""

    def test_low_straight_scores_750(self):
        result = ScoringEngine.score_selection((1, 2, 3, 4, 5))
        assert result.score == 750
        assert len(result.breakdown) == 1
        assert result.breakdown[0].category == ScoringCategory.LOW_STRAIGHT

    def test_high_straight_scores_1500(self):
        result = ScoringEngine.score_selection((2, 3, 4, 5, 6))
        assert result.score == 1500
        assert result.breakdown[0].category == ScoringCategory.HIGH_STRAIGHT

    def test_straight_order_doesnt_matter(self):
        result = ScoringEngine.score_selection((6, 4, 2, 5, 3))
        assert result.score == 1500
        assert result.scoring_dice == (6, 4, 2, 5, 3)

    def test_four_in_a_row_is_not_a_straight(self):
        result = ScoringEngine.score_selection((1, 2, 3, 4))
        assert result.score == 100
        assert result.scoring_dice == (1,)


class TestBustDetection:
    """Tests for bust detection."""

    def test_bust_rolls(self, bust_rolls):
        for dice in bust_rolls:
            assert ScoringEngine.is_bust(dice) is True
            assert ScoringEngine.score_selection(dice).score == 0

    def test_no_ones_fives_sets_or_straights_is_bust(self):
        """Every five-dice roll without a scoring pattern busts."""
        for roll in product((2, 3, 4, 6), repeat=5):
            counts = [roll.count(face) for face in set(roll)]
            if max(counts) >= 3:
                continue
            assert ScoringEngine.is_bust(roll), roll
            assert ScoringEngine.score_selection(roll).score == 0

    def test_single_one_is_not_bust(self):
        assert ScoringEngine.is_bust((1, 2, 3, 4, 6)) is False

    def test_triple_twos_is_not_bust(self):
        assert ScoringEngine.is_bust((2, 2, 2, 3, 4)) is False


class TestHotDice:
    """Tests for all-dice-score detection."""

    @pytest.mark.parametrize("dice", [
        (1, 2, 3, 4, 5),
        (1, 1, 1, 5, 5),
        (4, 4, 4, 4, 1),
        (1, 5, 1, 5, 1),
    ])
    def test_every_die_scores(self, dice):
        assert ScoringEngine.is_hot_dice(dice) is True

    def test_partial_scoring_is_not_hot_dice(self):
        assert ScoringEngine.is_hot_dice((1, 2, 3, 4)) is False

    def test_empty_is_not_hot_dice(self):
        assert ScoringEngine.is_hot_dice(()) is False


class TestScoringIndices:
    """Tests for tracking which dice scored."""

    def test_first_matching_indices_claimed(self):
        result = ScoringEngine.score_selection((2, 1, 2, 5, 2))
        assert result.scoring_dice_indices == frozenset({0, 1, 2, 3, 4})
        assert result.score == 350

    def test_junk_indices_excluded(self):
        result = ScoringEngine.score_selection((3, 1, 4, 6, 5))
        assert result.scoring_dice_indices == frozenset({1, 4})
        assert result.scoring_dice == (1, 5)


class TestInputHandling:
    """Tests for accepted input types and edge cases."""

    def test_accepts_dice_roll_object(self):
        result = ScoringEngine.score_selection(DiceRoll(values=(2, 3, 4, 5, 6)))
        assert result.score == 1500

    def test_accepts_list(self):
        assert ScoringEngine.score_selection([1, 5]).score == 150

    def test_empty_selection_scores_zero(self):
        result = ScoringEngine.score_selection(())
        assert result.score == 0
        assert result.scoring_dice == ()
        assert result.is_bust

    def test_invalid_face_raises(self):
        with pytest.raises(ValueError, match="between 1 and 6"):
            ScoringEngine.score_selection((1, 7))

    def test_result_str(self):
        assert "Total: 1000 points" in str(ScoringEngine.score_selection((1, 1, 1)))
        assert str(ScoringEngine.score_selection((2,))) == "BUST! No scoring dice."


class TestRollGeneration:
    """Tests for dice roll generation."""

    def test_roll_dice_returns_correct_count(self):
        roll = ScoringEngine.roll_dice(3, random.Random(1))
        assert len(roll) == 3
        assert all(1 <= value <= 6 for value in roll.values)

    def test_same_seed_same_roll(self):
        first = ScoringEngine.roll_dice(5, random.Random(42))
        second = ScoringEngine.roll_dice(5, random.Random(42))
        assert first == second

    @pytest.mark.parametrize("count", [0, 6])
    def test_roll_count_out_of_range(self, count: int):
        with pytest.raises(ValueError, match="Can roll between"):
            ScoringEngine.roll_dice(count, random.Random(0))
