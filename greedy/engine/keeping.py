"""
Greedy - Keep Validation

Decides whether a proposed set of dice may be kept from a roll, and which
dice in a roll can still be toggled while a selection is being built.

A keep is legal when every kept die belongs to a complete scoring group:
singles (1s and 5s) always qualify on their own, while triples, quads,
quints and straights must be kept whole.
"""

from collections import Counter
from itertools import combinations
from typing import Sequence

from greedy.engine.base import KeepValidation
from greedy.engine.scoring import ScoringEngine
from greedy.engine.validators import validate_dice_values, validate_selected_indices


class KeepValidator:
    """
    Stateless keep rules.

    All methods are class methods operating on immutable data.
    """

    @classmethod
    def validate_keep(
        cls,
        roll: Sequence[int],
        proposed: Sequence[int]
    ) -> KeepValidation:
        """
        Validate that a player's keep is legal.

        Rules:
            - Must keep at least one die
            - Can only keep dice that were rolled
            - Every kept die must contribute to the score of the keep

        Args:
            roll: The dice currently on the table
            proposed: Die values the player wants to keep

        Returns:
            KeepValidation with an error message when invalid
        """
        roll_values = validate_dice_values(roll)
        keep_values = validate_dice_values(proposed, min_count=0)

        if not keep_values:
            return KeepValidation(valid=False, error="Must keep at least one die.")

        available = Counter(roll_values)
        for face, count in Counter(keep_values).items():
            if count > available[face]:
                return KeepValidation(
                    valid=False,
                    error=f"Cannot keep {count}x {face}: only {available[face]} rolled.",
                )

        result = ScoringEngine.score_selection(keep_values)
        if result.score == 0:
            return KeepValidation(valid=False, error="Kept dice do not score.")

        if result.remaining_dice:
            return KeepValidation(
                valid=False,
                error=(
                    f"Dice {list(result.remaining_dice)} do not complete a "
                    "scoring combination."
                ),
            )

        return KeepValidation(valid=True)

    @classmethod
    def valid_keeps(cls, roll: Sequence[int]) -> tuple[frozenset[int], ...]:
        """
        Enumerate every legal keep from a roll as a set of roll indices.

        Rolls hold at most five dice, so all subsets are checked directly.
        """
        values = validate_dice_values(roll)
        keeps: list[frozenset[int]] = []

        for size in range(1, len(values) + 1):
            for indices in combinations(range(len(values)), size):
                kept = [values[i] for i in indices]
                if ScoringEngine.score_selection(kept).all_dice_score:
                    keeps.append(frozenset(indices))

        return tuple(keeps)

    @classmethod
    def get_selectable_indices(
        cls,
        roll: Sequence[int],
        selected: Sequence[int] | frozenset[int] | set[int]
    ) -> frozenset[int]:
        """
        Get which dice indices can be toggled given the current selection.

        A die is selectable if:
            - It's already selected (can always be deselected)
            - Adding it leaves the selection extendable to some legal keep

        A selection that no legal keep contains offers no new dice, not
        even a 1 or a 5; the player has to deselect first.

        Args:
            roll: The dice currently on the table
            selected: Indices already toggled on

        Returns:
            Indices that may be toggled next
        """
        values = validate_dice_values(roll)
        chosen = validate_selected_indices(selected, len(values))
        keeps = cls.valid_keeps(values)

        selectable = set(chosen)
        for i in range(len(values)):
            if i in chosen:
                continue
            candidate = chosen | {i}
            if any(candidate <= keep for keep in keeps):
                selectable.add(i)

        return frozenset(selectable)
