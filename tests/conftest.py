"""
Greedy - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from dataclasses import replace
from typing import Callable

import pytest

from greedy.engine.base import (
    CarryoverPot,
    GameState,
    PlayerState,
    StrategyName,
    TurnPhase,
    TurnState,
)
from greedy.engine.game import GameEngine
from greedy.session.models import PlayerConfig


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Common roll patterns with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        # Singles
        "single_one": ((1,), 100, "Single 1"),
        "single_five": ((5,), 50, "Single 5"),
        "two_ones": ((1, 1), 200, "Two 1s"),
        "two_fives": ((5, 5), 100, "Two 5s"),
        "one_and_five": ((1, 5), 150, "One 1 and one 5"),

        # Three of a kind
        "three_ones": ((1, 1, 1), 1000, "Three 1s"),
        "three_twos": ((2, 2, 2), 200, "Three 2s"),
        "three_sixes": ((6, 6, 6), 600, "Three 6s"),

        # Four and five of a kind
        "four_fives": ((5, 5, 5, 5), 1000, "Four 5s"),
        "four_ones": ((1, 1, 1, 1), 2000, "Four 1s"),
        "five_threes": ((3, 3, 3, 3, 3), 1200, "Five 3s"),
        "five_ones": ((1, 1, 1, 1, 1), 4000, "Five 1s"),

        # Straights
        "low_straight": ((1, 2, 3, 4, 5), 750, "Low straight 1-5"),
        "high_straight": ((2, 3, 4, 5, 6), 1500, "High straight 2-6"),
        "low_straight_shuffled": ((5, 3, 1, 4, 2), 750, "Low straight shuffled"),

        # Mixed combinations
        "three_ones_with_junk": ((1, 1, 1, 2, 2), 1000, "Three 1s, 2s ignored"),
        "three_fours_plus_one": ((4, 4, 4, 1), 500, "Three 4s + single 1"),
        "four_twos_plus_five": ((2, 2, 2, 2, 5), 450, "Four 2s + single 5"),
        "bust_roll": ((2, 3, 4, 6, 6), 0, "Bust roll"),
    }


@pytest.fixture
def bust_rolls() -> list[tuple[int, ...]]:
    """Five-dice rolls that should result in a bust."""
    return [
        (2, 2, 3, 3, 4),
        (2, 3, 4, 6, 6),
        (3, 3, 4, 4, 6),
        (2, 4, 4, 6, 6),
        (6, 4, 3, 2, 2),
    ]


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def player_configs() -> list[PlayerConfig]:
    """Two humans and an AI seat."""
    return [
        PlayerConfig(name="Alice", id="alice"),
        PlayerConfig(name="Bob", id="bob"),
        PlayerConfig(name="Robo", id="robo", is_ai=True, ai_strategy=StrategyName.CONSERVATIVE),
    ]


@pytest.fixture
def new_game(player_configs) -> GameState:
    """Freshly created three-seat game with default rules."""
    return GameEngine.create_game_state(player_configs)


@pytest.fixture
def make_game() -> Callable[..., GameState]:
    """
    Factory for a game with chosen scores and board status.

    Usage:
        make_game(scores=[9800, 4000], on_board=[True, True], turn=...)
    """
    def _make(
        scores: list[int],
        on_board: list[bool] | None = None,
        current: int = 0,
        turn: TurnState | None = None,
        **overrides,
    ) -> GameState:
        on_board = on_board if on_board is not None else [score > 0 for score in scores]
        players = tuple(
            PlayerState(
                id=f"p{i}",
                name=f"Player {i}",
                score=score,
                is_on_board=board,
            )
            for i, (score, board) in enumerate(zip(scores, on_board))
        )
        state = GameState(
            players=players,
            current_player_index=current,
            turn=turn or TurnState(),
            entry_threshold=650,
            target_score=10000,
        )
        return replace(state, **overrides)

    return _make


@pytest.fixture
def deciding_turn() -> Callable[..., TurnState]:
    """Factory for a turn waiting on the roll/bank choice."""
    def _make(turn_score: int, dice_remaining: int, carryover_points: int = 0) -> TurnState:
        return TurnState(
            phase=TurnPhase.DECIDING,
            turn_score=turn_score,
            dice_remaining=dice_remaining,
            has_carryover=carryover_points > 0,
            carryover_claimed=carryover_points > 0,
            carryover_points=carryover_points,
        )

    return _make


@pytest.fixture
def steal_turn() -> Callable[..., TurnState]:
    """Factory for a turn that inherited a pot and has not rolled yet."""
    def _make(points: int, dice_count: int) -> TurnState:
        return TurnState(
            phase=TurnPhase.STEAL_REQUIRED,
            dice_remaining=dice_count,
            has_carryover=True,
            carryover_points=points,
        )

    return _make


@pytest.fixture
def small_pot() -> CarryoverPot:
    return CarryoverPot(points=400, dice_count=2)
