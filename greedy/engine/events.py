"""
Greedy - Game Event Definitions

Event types and payloads describing what a single reducer step did, for a
broadcast layer or game log to consume.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from greedy.engine.actions import Bank, DeclineCarryover, EndTurn, GameAction, Keep, Roll
from greedy.engine.base import GameState, TurnPhase


class GameEvent(Enum):
    """Events that can occur during a game."""

    DICE_ROLLED = auto()
    PLAYER_BUST = auto()
    DICE_KEPT = auto()
    HOT_DICE = auto()
    TURN_BANKED = auto()
    CARRYOVER_DECLINED = auto()
    CARRYOVER_OFFERED = auto()
    PLAYER_ENTERED = auto()
    FINAL_ROUND_STARTED = auto()
    RECORD_BROKEN = auto()
    TURN_ADVANCED = auto()
    GAME_WON = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    player_index: int
    player_id: str
    data: dict[str, Any] = field(default_factory=dict)


def _payload(state: GameState, index: int, event: GameEvent, **data: Any) -> EventPayload:
    return EventPayload(
        event=event,
        player_index=index,
        player_id=state.players[index].id,
        data=data,
    )


def classify_turn_change(
    before: GameState, action: GameAction, after: GameState
) -> list[EventPayload]:
    """Events from an action that stayed within the current turn."""
    index = before.current_player_index
    turn = after.turn

    if isinstance(action, Roll):
        events = [_payload(after, index, GameEvent.DICE_ROLLED, dice=list(action.dice))]
        if turn.phase == TurnPhase.ENDED:
            events.append(_payload(
                after, index, GameEvent.PLAYER_BUST,
                lost=before.turn.turn_score,
            ))
        return events

    if isinstance(action, Keep):
        events = [_payload(
            after, index, GameEvent.DICE_KEPT,
            dice=list(action.dice), turn_score=turn.turn_score,
        )]
        if turn.is_hot_dice:
            events.append(_payload(after, index, GameEvent.HOT_DICE, turn_score=turn.turn_score))
        return events

    if isinstance(action, Bank):
        pot = after.carryover_pot
        return [_payload(
            after, index, GameEvent.TURN_BANKED,
            turn_score=turn.turn_score,
            dice_left=pot.dice_count if pot else 0,
        )]

    if isinstance(action, DeclineCarryover):
        return [_payload(
            after, index, GameEvent.CARRYOVER_DECLINED,
            points=before.turn.carryover_points,
        )]

    return []


def classify_rotation(before: GameState, after: GameState) -> list[EventPayload]:
    """Events from an END_TURN that settled scores and rotated seats."""
    index = before.current_player_index
    events: list[EventPayload] = []

    was = before.players[index]
    now = after.players[index]
    if now.is_on_board and not was.is_on_board:
        events.append(_payload(after, index, GameEvent.PLAYER_ENTERED, score=now.score))

    if after.is_final_round and not before.is_final_round:
        events.append(_payload(after, index, GameEvent.FINAL_ROUND_STARTED, score=now.score))
    elif (
        before.is_final_round
        and after.score_to_beat_player_index == index
        and after.score_to_beat != before.score_to_beat
    ):
        events.append(_payload(after, index, GameEvent.RECORD_BROKEN, score=now.score))

    if after.is_game_over:
        events.append(_payload(
            after, after.winner_index, GameEvent.GAME_WON,
            score=after.players[after.winner_index].score,
        ))
        return events

    next_index = after.current_player_index
    events.append(_payload(after, next_index, GameEvent.TURN_ADVANCED))
    if after.turn.has_carryover:
        events.append(_payload(
            after, next_index, GameEvent.CARRYOVER_OFFERED,
            points=after.turn.carryover_points,
            dice_count=after.turn.dice_remaining,
        ))
    return events


def classify_transition(
    before: GameState, action: GameAction, after: GameState
) -> list[EventPayload]:
    """Determine the game events produced by one reducer step."""
    if isinstance(action, EndTurn):
        return classify_rotation(before, after)
    return classify_turn_change(before, action, after)
