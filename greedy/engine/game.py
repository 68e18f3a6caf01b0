"""
Greedy - Game Orchestrator

Drives turn transitions and owns cross-turn bookkeeping for a session:
player rotation, entry-threshold enforcement, carryover pot custody,
final-round arbitration and win determination.

GameEngine.apply is the single reducer over the five game actions. It is
pure: the previous GameState is never modified, so a failed action leaves
the caller holding exactly the state it passed in. The reducer is not safe
for concurrent application to one session; callers serialize actions.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import TYPE_CHECKING, Sequence

from greedy.engine.actions import Bank, DeclineCarryover, EndTurn, GameAction, Keep, Roll
from greedy.engine.base import (
    GameConfig,
    GameState,
    PlayerState,
    TurnPhase,
)
from greedy.engine.errors import (
    BankNotAllowed,
    DeclineNotAllowed,
    EndTurnNotReady,
    GameOver,
)
from greedy.engine.turn import TurnEngine
from greedy.engine.validators import validate_player_count

if TYPE_CHECKING:
    from greedy.session.models import PlayerConfig

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Stateless multi-player orchestrator.

    All methods are class methods operating on immutable data.
    """

    @classmethod
    def create_game_state(
        cls,
        players: Sequence[PlayerConfig],
        config: GameConfig | None = None,
    ) -> GameState:
        """
        Create the initial state for a session.

        Args:
            players: Seat configurations in turn order
            config: Entry threshold and target score (defaults apply if None)

        Returns:
            GameState with seat 0 to play a fresh turn

        Raises:
            InsufficientPlayers: Fewer than two players
        """
        validate_player_count(len(players))
        config = config or GameConfig()

        seats = tuple(cls._create_player(player) for player in players)

        return GameState(
            players=seats,
            current_player_index=0,
            turn=TurnEngine.create_turn_state(),
            entry_threshold=config.entry_threshold,
            target_score=config.target_score,
        )

    @classmethod
    def _create_player(cls, player: PlayerConfig) -> PlayerState:
        """Build a seat from its configuration."""
        return PlayerState(
            id=player.id or str(uuid.uuid4()),
            name=player.name,
            is_ai=player.is_ai,
            ai_strategy=player.ai_strategy,
        )

    @classmethod
    def get_current_player(cls, state: GameState) -> PlayerState:
        """Get the player whose turn it is."""
        return state.players[state.current_player_index]

    @classmethod
    def get_winner(cls, state: GameState) -> PlayerState | None:
        """Get the winning player once the game is over."""
        if not state.is_game_over or state.winner_index is None:
            return None
        return state.players[state.winner_index]

    @classmethod
    def apply(cls, state: GameState, action: GameAction) -> GameState:
        """
        Apply one action for the current seat.

        Args:
            state: Current game state
            action: One of Roll, Keep, Bank, DeclineCarryover, EndTurn

        Returns:
            New GameState

        Raises:
            GameOver: The game has already ended
            GreedyError: Any other illegal transition
        """
        if state.is_game_over:
            raise GameOver("The game is over.")

        if isinstance(action, (Roll, Keep)):
            return replace(state, turn=TurnEngine.apply(state.turn, action))
        if isinstance(action, Bank):
            return cls._bank(state)
        if isinstance(action, DeclineCarryover):
            return cls._decline_carryover(state)
        if isinstance(action, EndTurn):
            return cls._end_turn(state)
        raise TypeError(f"Unsupported game action: {type(action).__name__}")

    @classmethod
    def _bank(cls, state: GameState) -> GameState:
        """Bank the turn, snapshotting any pot left on the table."""
        player = state.current_player
        if not TurnEngine.can_bank(state.turn, player.is_on_board, state.entry_threshold):
            if state.turn.phase != TurnPhase.DECIDING:
                raise BankNotAllowed(f"Cannot bank during {state.turn.phase.value}.")
            raise BankNotAllowed(
                f"{player.name} needs {state.entry_threshold} points of their own "
                f"to get on the board, has {state.turn.own_score}."
            )

        pot = TurnEngine.get_carryover_pot(state.turn)
        return replace(state, turn=TurnEngine.bank(state.turn), carryover_pot=pot)

    @classmethod
    def _decline_carryover(cls, state: GameState) -> GameState:
        """Refuse an inherited pot and start over with five dice."""
        if state.turn.phase != TurnPhase.STEAL_REQUIRED:
            raise DeclineNotAllowed("No carryover to decline.")

        return replace(state, turn=TurnEngine.create_turn_state(), carryover_pot=None)

    @classmethod
    def _end_turn(cls, state: GameState) -> GameState:
        """Commit an ended turn, arbitrate the final round and rotate."""
        turn = state.turn
        if turn.phase != TurnPhase.ENDED:
            raise EndTurnNotReady(f"Cannot end turn during {turn.phase.value}.")

        index = state.current_player_index
        player = state.players[index]
        players = list(state.players)

        if turn.turn_score > 0:
            own_points = turn.own_score
            entering = not player.is_on_board and own_points >= state.entry_threshold
            player = replace(
                player,
                score=player.score + turn.turn_score,
                is_on_board=player.is_on_board or entering,
            )
            players[index] = player

        is_final_round = state.is_final_round
        final_round_trigger_index = state.final_round_trigger_index
        score_to_beat = state.score_to_beat
        score_to_beat_player_index = state.score_to_beat_player_index
        high_score_beaten = state.high_score_beaten_this_round

        if not is_final_round and player.score >= state.target_score:
            is_final_round = True
            final_round_trigger_index = index
            score_to_beat = player.score
            score_to_beat_player_index = index
            high_score_beaten = False
            logger.info(
                "Final round: %s reached %d (target %d)",
                player.name, player.score, state.target_score,
            )
        elif is_final_round and score_to_beat is not None and player.score > score_to_beat:
            score_to_beat = player.score
            score_to_beat_player_index = index
            high_score_beaten = False
            logger.info("%s set a new score to beat: %d", player.name, player.score)

        pot = state.carryover_pot
        if turn.turn_score == 0 or turn.dice_remaining == 0:
            pot = None

        settled = replace(
            state,
            players=tuple(players),
            carryover_pot=pot,
            is_final_round=is_final_round,
            final_round_trigger_index=final_round_trigger_index,
            score_to_beat=score_to_beat,
            score_to_beat_player_index=score_to_beat_player_index,
            high_score_beaten_this_round=high_score_beaten,
        )
        return cls._advance_player(settled)

    @classmethod
    def _advance_player(cls, state: GameState) -> GameState:
        """
        Pass play to the next seat.

        The pot is offered only to an on-board next player; otherwise it is
        discarded. Either way it leaves GameState once the turn is created.
        """
        next_index = state.next_player_index
        next_player = state.players[next_index]

        if state.is_final_round and next_index == state.score_to_beat_player_index:
            if not state.high_score_beaten_this_round:
                logger.info(
                    "Game over: %s wins with %d",
                    next_player.name, next_player.score,
                )
                return replace(
                    state,
                    current_player_index=next_index,
                    carryover_pot=None,
                    is_game_over=True,
                    winner_index=next_index,
                )
            state = replace(state, high_score_beaten_this_round=False)

        offered = state.carryover_pot if next_player.is_on_board else None
        if state.carryover_pot is not None and offered is None:
            logger.debug(
                "Carryover of %d discarded: %s is not on the board",
                state.carryover_pot.points, next_player.name,
            )

        return replace(
            state,
            current_player_index=next_index,
            turn=TurnEngine.create_turn_state(offered),
            carryover_pot=None,
        )
