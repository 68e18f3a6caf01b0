"""
Greedy - Scoring Engine

Scoring rules for the five-dice Greedy game. All methods are stateless class
methods that operate on immutable inputs.

Scoring Rules:
    - Single 1: 100 points
    - Single 5: 50 points
    - Three 1s: 1,000 points
    - Three of X (2-6): X × 100 points
    - Four of a kind: three of a kind × 2
    - Five of a kind: four of a kind × 2
    - 1-2-3-4-5 (Low Straight): 750 points
    - 2-3-4-5-6 (High Straight): 1,500 points

Straights are checked on the whole selection first and consume all five
dice; singles inside a straight are never scored separately.
"""

import random
from collections import Counter
from typing import Sequence

from greedy.engine.base import (
    DICE_COUNT,
    DiceRoll,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from greedy.engine.validators import validate_dice_values


class ScoringEngine:
    """
    Stateless scoring engine for Greedy.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    # Scoring values
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    TRIPLE_POINTS = {1: 1000, 2: 200, 3: 300, 4: 400, 5: 500, 6: 600}
    LOW_STRAIGHT_POINTS = 750
    HIGH_STRAIGHT_POINTS = 1500

    LOW_STRAIGHT = (1, 2, 3, 4, 5)
    HIGH_STRAIGHT = (2, 3, 4, 5, 6)

    @classmethod
    def roll_dice(cls, count: int, rng: random.Random) -> DiceRoll:
        """
        Roll the specified number of dice.

        Args:
            count: Number of dice to roll (1-5)
            rng: Random source supplied by the caller

        Returns:
            DiceRoll with random values
        """
        if not (1 <= count <= DICE_COUNT):
            raise ValueError(f"Can roll between 1 and {DICE_COUNT} dice, got {count}.")
        values = tuple(rng.randint(1, 6) for _ in range(count))
        return DiceRoll(values=values)

    @classmethod
    def score_selection(
        cls,
        dice: Sequence[int] | DiceRoll
    ) -> ScoringResult:
        """
        Calculate the score for a selection of dice.

        Identifies every scoring combination in the selection and returns
        a complete breakdown along with the dice that contributed.

        Args:
            dice: Dice values to score (sequence or DiceRoll)

        Returns:
            ScoringResult with total points, scoring dice and breakdown
        """
        if isinstance(dice, DiceRoll):
            values = dice.values
        else:
            values = validate_dice_values(dice, min_count=0)

        if not values:
            return ScoringResult(score=0, scoring_dice=())

        straight = cls._check_straight(values)
        if straight is not None:
            return ScoringResult(
                score=straight.points,
                scoring_dice=values,
                remaining_dice=(),
                scoring_dice_indices=frozenset(range(len(values))),
                breakdown=(straight,),
            )

        counts = Counter(values)
        breakdown: list[ScoringBreakdown] = []
        scoring_faces: Counter[int] = Counter()

        for face_value in range(1, 7):
            count = counts[face_value]
            if count >= 3:
                breakdown.append(cls._score_set(face_value, count))
                scoring_faces[face_value] = count

        singles = (
            (1, cls.SINGLE_ONE_POINTS, ScoringCategory.SINGLE_ONE),
            (5, cls.SINGLE_FIVE_POINTS, ScoringCategory.SINGLE_FIVE),
        )
        for face_value, points, category in singles:
            count = counts[face_value] - scoring_faces[face_value]
            if count > 0:
                breakdown.append(ScoringBreakdown(
                    category=category,
                    dice_values=tuple([face_value] * count),
                    points=count * points,
                    description=f"{count}x Single {face_value}{'s' if count > 1 else ''}"
                ))
                scoring_faces[face_value] += count

        scoring_indices = cls._claim_indices(values, scoring_faces)

        return ScoringResult(
            score=sum(item.points for item in breakdown),
            scoring_dice=tuple(v for i, v in enumerate(values) if i in scoring_indices),
            remaining_dice=tuple(v for i, v in enumerate(values) if i not in scoring_indices),
            scoring_dice_indices=scoring_indices,
            breakdown=tuple(breakdown),
        )

    @classmethod
    def _check_straight(cls, values: tuple[int, ...]) -> ScoringBreakdown | None:
        """
        Check for a five-dice straight.

        Returns:
            Breakdown for the straight or None if the selection isn't one
        """
        ordered = tuple(sorted(values))
        if ordered == cls.LOW_STRAIGHT:
            return ScoringBreakdown(
                category=ScoringCategory.LOW_STRAIGHT,
                dice_values=cls.LOW_STRAIGHT,
                points=cls.LOW_STRAIGHT_POINTS,
                description="Low Straight (1-2-3-4-5)"
            )
        if ordered == cls.HIGH_STRAIGHT:
            return ScoringBreakdown(
                category=ScoringCategory.HIGH_STRAIGHT,
                dice_values=cls.HIGH_STRAIGHT,
                points=cls.HIGH_STRAIGHT_POINTS,
                description="High Straight (2-3-4-5-6)"
            )
        return None

    @classmethod
    def _score_set(cls, face_value: int, count: int) -> ScoringBreakdown:
        """
        Score three or more of a kind.

        Points double for each additional die beyond three.
        """
        points = cls.TRIPLE_POINTS[face_value]
        for _ in range(count - 3):
            points *= 2

        if count == 3:
            category = ScoringCategory.THREE_OF_A_KIND
        elif count == 4:
            category = ScoringCategory.FOUR_OF_A_KIND
        else:
            category = ScoringCategory.FIVE_OF_A_KIND

        return ScoringBreakdown(
            category=category,
            dice_values=tuple([face_value] * count),
            points=points,
            description=f"{count}x {face_value}s"
        )

    @classmethod
    def _claim_indices(
        cls,
        values: tuple[int, ...],
        faces: Counter[int]
    ) -> frozenset[int]:
        """Find the first `faces[v]` indices holding each face value v."""
        needed = Counter(faces)
        indices: set[int] = set()

        for i, v in enumerate(values):
            if needed[v] > 0:
                indices.add(i)
                needed[v] -= 1

        return frozenset(indices)

    @classmethod
    def is_bust(cls, dice: Sequence[int] | DiceRoll) -> bool:
        """
        Check if a roll is a bust (no scoring dice).

        Must be given the full newly rolled dice, never earlier kept dice.

        Args:
            dice: Dice values to check

        Returns:
            True if the roll contains no scoring combinations
        """
        return cls.score_selection(dice).score == 0

    @classmethod
    def is_hot_dice(cls, dice: Sequence[int] | DiceRoll) -> bool:
        """
        Check if every die in the selection scores.

        Keeping such a roll whole exhausts the dice in hand.
        """
        return cls.score_selection(dice).all_dice_score
