"""
Greedy - Session Models

Pydantic models for session creation parameters and for JSON-safe
snapshots of a GameState that a broadcast layer can send to clients.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from greedy.engine.base import (
    CarryoverPot,
    GameState,
    PlayerState,
    StrategyName,
    TurnPhase,
    TurnState,
)


class PlayerConfig(BaseModel):
    """A seat requested at session creation."""

    name: str = Field(min_length=1, max_length=30)
    is_ai: bool = False
    ai_strategy: StrategyName | None = None
    id: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _default_ai_strategy(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("is_ai") and data.get("ai_strategy") is None:
            return {**data, "ai_strategy": StrategyName.BALANCED}
        return data

    @model_validator(mode="after")
    def _strategy_for_ai_only(self) -> "PlayerConfig":
        if not self.is_ai and self.ai_strategy is not None:
            raise ValueError("Only AI seats can have a strategy.")
        return self


class CarryoverSnapshot(BaseModel):
    """Mirrors CarryoverPot."""

    points: int = Field(ge=0)
    dice_count: int = Field(ge=1, le=5)


class TurnSnapshot(BaseModel):
    """Mirrors TurnState."""

    phase: TurnPhase
    turn_score: int = Field(ge=0)
    dice_remaining: int = Field(ge=1, le=5)
    current_roll: list[int] | None = None
    kept_dice: list[int] = Field(default_factory=list)
    has_carryover: bool = False
    carryover_claimed: bool = False
    carryover_points: int = 0

    @classmethod
    def from_state(cls, turn: TurnState) -> "TurnSnapshot":
        return cls(
            phase=turn.phase,
            turn_score=turn.turn_score,
            dice_remaining=turn.dice_remaining,
            current_roll=list(turn.current_roll) if turn.current_roll is not None else None,
            kept_dice=list(turn.kept_dice),
            has_carryover=turn.has_carryover,
            carryover_claimed=turn.carryover_claimed,
            carryover_points=turn.carryover_points,
        )

    def to_state(self) -> TurnState:
        return TurnState(
            phase=self.phase,
            turn_score=self.turn_score,
            dice_remaining=self.dice_remaining,
            current_roll=tuple(self.current_roll) if self.current_roll is not None else None,
            kept_dice=tuple(self.kept_dice),
            has_carryover=self.has_carryover,
            carryover_claimed=self.carryover_claimed,
            carryover_points=self.carryover_points,
        )


class PlayerSnapshot(BaseModel):
    """Mirrors PlayerState."""

    id: str
    name: str
    score: int = 0
    is_on_board: bool = False
    is_ai: bool = False
    ai_strategy: StrategyName | None = None

    model_config = {"from_attributes": True}


class GameSnapshot(BaseModel):
    """Mirrors GameState."""

    players: list[PlayerSnapshot] = Field(min_length=2)
    current_player_index: int = 0
    turn: TurnSnapshot
    carryover_pot: CarryoverSnapshot | None = None
    is_final_round: bool = False
    final_round_trigger_index: int | None = None
    score_to_beat: int | None = None
    score_to_beat_player_index: int | None = None
    high_score_beaten_this_round: bool = False
    is_game_over: bool = False
    winner_index: int | None = None
    entry_threshold: int
    target_score: int

    @classmethod
    def from_state(cls, game: GameState) -> "GameSnapshot":
        """Build a snapshot of a game state."""
        pot = game.carryover_pot
        return cls(
            players=[PlayerSnapshot.model_validate(player) for player in game.players],
            current_player_index=game.current_player_index,
            turn=TurnSnapshot.from_state(game.turn),
            carryover_pot=(
                CarryoverSnapshot(points=pot.points, dice_count=pot.dice_count)
                if pot is not None else None
            ),
            is_final_round=game.is_final_round,
            final_round_trigger_index=game.final_round_trigger_index,
            score_to_beat=game.score_to_beat,
            score_to_beat_player_index=game.score_to_beat_player_index,
            high_score_beaten_this_round=game.high_score_beaten_this_round,
            is_game_over=game.is_game_over,
            winner_index=game.winner_index,
            entry_threshold=game.entry_threshold,
            target_score=game.target_score,
        )

    def to_state(self) -> GameState:
        """Rebuild the engine state this snapshot mirrors."""
        pot = self.carryover_pot
        return GameState(
            players=tuple(PlayerState(**player.model_dump()) for player in self.players),
            current_player_index=self.current_player_index,
            turn=self.turn.to_state(),
            carryover_pot=(
                CarryoverPot(points=pot.points, dice_count=pot.dice_count)
                if pot is not None else None
            ),
            is_final_round=self.is_final_round,
            final_round_trigger_index=self.final_round_trigger_index,
            score_to_beat=self.score_to_beat,
            score_to_beat_player_index=self.score_to_beat_player_index,
            high_score_beaten_this_round=self.high_score_beaten_this_round,
            is_game_over=self.is_game_over,
            winner_index=self.winner_index,
            entry_threshold=self.entry_threshold,
            target_score=self.target_score,
        )
