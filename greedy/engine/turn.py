"""
Greedy - Turn State Machine

Governs a single player's turn: rolling, keeping, deciding, banking,
busting, and the carryover steal sub-protocol. All methods are stateless
class methods; each returns a new TurnState and never mutates its input.

Phases:
    ROLLING        -> KEEPING (roll) | ENDED (bust)
    STEAL_REQUIRED -> KEEPING (roll) | ENDED (bust)
    KEEPING        -> DECIDING (keep)
    DECIDING       -> KEEPING (roll) | ENDED (bust or bank)
"""

from dataclasses import replace
from typing import Sequence

from greedy.engine.actions import Bank, Keep, Roll, TurnAction
from greedy.engine.base import DICE_COUNT, CarryoverPot, DiceRoll, TurnPhase, TurnState
from greedy.engine.errors import BankNotAllowed, InvalidKeep, InvalidRoll, NoCurrentRoll
from greedy.engine.keeping import KeepValidator
from greedy.engine.scoring import ScoringEngine
from greedy.engine.validators import validate_dice_values


class TurnEngine:
    """
    Stateless turn state machine.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    ROLLABLE_PHASES = frozenset({
        TurnPhase.ROLLING,
        TurnPhase.DECIDING,
        TurnPhase.STEAL_REQUIRED,
    })

    @classmethod
    def create_turn_state(cls, carryover: CarryoverPot | None = None) -> TurnState:
        """
        Create the initial state for a new turn.

        A turn that inherits a carryover starts in STEAL_REQUIRED with only
        the dice the previous banker left behind.

        Args:
            carryover: Pot handed over by the previous player, if any

        Returns:
            Fresh TurnState
        """
        if carryover is not None:
            return TurnState(
                phase=TurnPhase.STEAL_REQUIRED,
                turn_score=0,
                dice_remaining=carryover.dice_count,
                has_carryover=True,
                carryover_claimed=False,
                carryover_points=carryover.points,
            )

        return TurnState()

    @classmethod
    def roll(cls, state: TurnState, dice: Sequence[int] | DiceRoll) -> TurnState:
        """
        Process a roll of the dice in hand.

        A bust ends the turn and forfeits everything accumulated, including
        any claimed carryover. The roll is kept on the state for display.

        Raises:
            InvalidRoll: Wrong phase or a dice count other than dice_remaining
        """
        if state.phase not in cls.ROLLABLE_PHASES:
            raise InvalidRoll(f"Cannot roll during {state.phase.value}.")

        values = dice.values if isinstance(dice, DiceRoll) else validate_dice_values(dice)
        if len(values) != state.dice_remaining:
            raise InvalidRoll(
                f"Expected {state.dice_remaining} dice, got {len(values)}."
            )

        if ScoringEngine.is_bust(values):
            return replace(
                state,
                phase=TurnPhase.ENDED,
                turn_score=0,
                current_roll=values,
            )

        return replace(state, phase=TurnPhase.KEEPING, current_roll=values)

    @classmethod
    def keep(cls, state: TurnState, dice: Sequence[int]) -> TurnState:
        """
        Set aside scoring dice from the current roll.

        The first keep of a carryover turn folds the inherited points into
        the turn score. Using up every die grants a fresh set of five
        (hot dice) without ending the turn.

        Raises:
            NoCurrentRoll: Not in KEEPING or no roll on the table
            InvalidKeep: The dice are not a legal keep from the roll
        """
        if state.phase != TurnPhase.KEEPING or not state.current_roll:
            raise NoCurrentRoll("Cannot keep dice without a current roll.")

        kept = tuple(dice)
        validation = KeepValidator.validate_keep(state.current_roll, kept)
        if not validation.valid:
            raise InvalidKeep(validation.error or "Invalid keep.")

        new_score = state.turn_score + ScoringEngine.score_selection(kept).score

        claiming = state.has_carryover and not state.carryover_claimed
        if claiming:
            new_score += state.carryover_points

        dice_remaining = state.dice_remaining - len(kept)
        if dice_remaining == 0:
            dice_remaining = DICE_COUNT

        return replace(
            state,
            phase=TurnPhase.DECIDING,
            turn_score=new_score,
            dice_remaining=dice_remaining,
            current_roll=None,
            kept_dice=state.kept_dice + kept,
            carryover_claimed=state.carryover_claimed or claiming,
        )

    @classmethod
    def bank(cls, state: TurnState) -> TurnState:
        """
        End the turn keeping the turn score.

        Entry-threshold eligibility is checked by the caller via can_bank.

        Raises:
            BankNotAllowed: Not in DECIDING
        """
        if state.phase != TurnPhase.DECIDING:
            raise BankNotAllowed(f"Cannot bank during {state.phase.value}.")

        return replace(state, phase=TurnPhase.ENDED)

    @classmethod
    def can_bank(
        cls,
        state: TurnState,
        is_on_board: bool,
        entry_threshold: int
    ) -> bool:
        """
        Check if the player may bank now.

        Players not yet on the board need entry_threshold points of their
        own; carryover points never count toward entry.
        """
        if state.phase != TurnPhase.DECIDING:
            return False

        if not is_on_board:
            return state.own_score >= entry_threshold

        return True

    @classmethod
    def get_carryover_pot(cls, state: TurnState) -> CarryoverPot | None:
        """
        Pot that banking now would leave on the table.

        Returns:
            CarryoverPot with the turn score and unused dice, or None
        """
        if state.phase != TurnPhase.DECIDING:
            return None
        if state.dice_remaining == 0:
            return None

        return CarryoverPot(points=state.turn_score, dice_count=state.dice_remaining)

    @classmethod
    def apply(cls, state: TurnState, action: TurnAction) -> TurnState:
        """Dispatch a turn action to its transition."""
        if isinstance(action, Roll):
            return cls.roll(state, action.dice)
        if isinstance(action, Keep):
            return cls.keep(state, action.dice)
        if isinstance(action, Bank):
            return cls.bank(state)
        raise TypeError(f"Unsupported turn action: {type(action).__name__}")
