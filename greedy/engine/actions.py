"""
Greedy - Reducer Actions

The closed set of actions a seat (human or AI) can apply. Turn actions are
handled by the turn state machine; the game reducer accepts all five.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True)
class Roll:
    """Dice were rolled; values come from the caller's random source."""
    dice: tuple[int, ...]

    @classmethod
    def of(cls, dice: Sequence[int]) -> "Roll":
        return cls(dice=tuple(dice))


@dataclass(frozen=True)
class Keep:
    """Die values set aside from the current roll."""
    dice: tuple[int, ...]

    @classmethod
    def of(cls, dice: Sequence[int]) -> "Keep":
        return cls(dice=tuple(dice))


@dataclass(frozen=True)
class Bank:
    """Stop rolling and keep the turn score."""


@dataclass(frozen=True)
class DeclineCarryover:
    """Refuse an inherited pot and start a fresh turn."""


@dataclass(frozen=True)
class EndTurn:
    """Commit an ended turn and pass play to the next seat."""


TurnAction = Union[Roll, Keep, Bank]
GameAction = Union[Roll, Keep, Bank, DeclineCarryover, EndTurn]
