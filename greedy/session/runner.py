"""
Greedy - Session Runner

Drives AI seats through the same reducer entry points a human input layer
uses. The runner owns a random source for dice and chaos choices, so a
seeded runner replays a session exactly.

It has no notion of time: a scheduler that times a human out calls
`step(game, takeover=True)` to have a strategy act for that seat.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Mapping

from greedy.ai.decision import build_game_context, make_decision
from greedy.ai.strategies import DEFAULT_STRATEGIES, Decision, Strategy
from greedy.engine.actions import Bank, DeclineCarryover, EndTurn, GameAction, Keep, Roll
from greedy.engine.base import GameState, StrategyName
from greedy.engine.events import EventPayload, classify_transition
from greedy.engine.game import GameEngine
from greedy.engine.scoring import ScoringEngine

if TYPE_CHECKING:
    from greedy.config.settings import Settings

logger = logging.getLogger(__name__)


class SessionRunner:
    """Applies AI decisions to a game, one reducer step at a time."""

    def __init__(
        self,
        rng: random.Random,
        strategies: Mapping[StrategyName, Strategy] = DEFAULT_STRATEGIES,
        default_strategy: StrategyName = StrategyName.BALANCED,
    ) -> None:
        self._rng = rng
        self._strategies = strategies
        self._default_strategy = default_strategy

    @classmethod
    def from_seed(cls, seed: int | None, **kwargs) -> "SessionRunner":
        """Build a runner with its own seeded random source."""
        return cls(random.Random(seed), **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "SessionRunner":
        """Build a runner from the configured seed and default strategy."""
        kwargs.setdefault("default_strategy", settings.default_ai_strategy)
        return cls.from_seed(settings.random_seed, **kwargs)

    def roll(self, game: GameState) -> Roll:
        """Roll the dice in hand for the current seat."""
        dice = ScoringEngine.roll_dice(game.turn.dice_remaining, self._rng)
        return Roll(dice=dice.values)

    def next_action(self, game: GameState, *, takeover: bool = False) -> GameAction:
        """
        Choose the reducer action for the current seat.

        Args:
            game: Current game state
            takeover: Act for a human seat (e.g. after a timeout)

        Raises:
            ValueError: The seat is human and takeover was not requested
        """
        player = game.current_player
        if not player.is_ai and not takeover:
            raise ValueError(f"{player.name} is not an AI player.")

        strategy_name = player.ai_strategy or self._default_strategy
        decision = make_decision(
            game.turn,
            player.is_on_board,
            strategy_name,
            game.entry_threshold,
            strategies=self._strategies,
            rng=self._rng,
            context=build_game_context(game),
        )

        if decision.action == Decision.ROLL:
            return self.roll(game)
        if decision.action == Decision.KEEP:
            return Keep(dice=decision.dice)
        if decision.action == Decision.BANK:
            return Bank()
        if decision.action == Decision.DECLINE_CARRYOVER:
            return DeclineCarryover()
        return EndTurn()

    def step(
        self, game: GameState, *, takeover: bool = False
    ) -> tuple[GameState, list[EventPayload]]:
        """Apply one AI action and report what happened."""
        action = self.next_action(game, takeover=takeover)
        new_game = GameEngine.apply(game, action)
        events = classify_transition(game, action, new_game)

        logger.debug(
            "%s: %s -> %s",
            game.current_player.name, action, [e.event.name for e in events],
        )
        return new_game, events

    def play_turn(
        self, game: GameState, *, takeover: bool = False
    ) -> tuple[GameState, list[EventPayload]]:
        """Play the current seat's turn through to the next seat."""
        seat = game.current_player_index
        events: list[EventPayload] = []

        while True:
            game, step_events = self.step(game, takeover=takeover)
            events.extend(step_events)
            if game.is_game_over or game.current_player_index != seat:
                return game, events

    def play_game(
        self, game: GameState, max_turns: int = 10_000
    ) -> tuple[GameState, list[EventPayload]]:
        """
        Play an all-AI session to completion.

        Raises:
            ValueError: A human seat comes up
            RuntimeError: The game did not finish within max_turns
        """
        events: list[EventPayload] = []

        for _ in range(max_turns):
            if game.is_game_over:
                break
            game, turn_events = self.play_turn(game)
            events.extend(turn_events)
        else:
            if not game.is_game_over:
                raise RuntimeError(f"Game did not finish within {max_turns} turns.")

        winner = GameEngine.get_winner(game)
        if winner is not None:
            logger.info("%s won with %d points", winner.name, winner.score)
        return game, events
