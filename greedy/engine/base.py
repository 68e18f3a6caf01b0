"""
Greedy - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so every
transition produces a new value and callers never observe mutation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from greedy.config.settings import Settings

# Game-wide constants
DICE_COUNT = 5
ENTRY_THRESHOLD = 650
TARGET_SCORE = 10000


class TurnPhase(Enum):
    """Phases of a single player's turn."""
    ROLLING = "ROLLING"                # Fresh turn, dice not yet rolled
    KEEPING = "KEEPING"                # Roll on the table, must keep scoring dice
    DECIDING = "DECIDING"              # Roll again or bank
    STEAL_REQUIRED = "STEAL_REQUIRED"  # Inherited carryover pot, must roll or decline
    ENDED = "ENDED"                    # Banked or bust


class ScoringCategory(Enum):
    """Categories of scoring combinations."""
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()
    THREE_OF_A_KIND = auto()
    FOUR_OF_A_KIND = auto()
    FIVE_OF_A_KIND = auto()
    LOW_STRAIGHT = auto()      # 1-2-3-4-5
    HIGH_STRAIGHT = auto()     # 2-3-4-5-6


class StrategyName(Enum):
    """AI strategies available to automated seats."""
    CONSERVATIVE = "conservative"
    AGGRESSIVE = "aggressive"
    BALANCED = "balanced"
    CHAOS = "chaos"


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a selection of dice.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice that contributed to this score
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a selection of dice.

    Attributes:
        score: Total points scored
        scoring_dice: Dice that contributed to the score, in input order
        remaining_dice: Dice that contributed nothing, in input order
        scoring_dice_indices: Input positions of the scoring dice
        breakdown: Individual scoring components
    """
    score: int
    scoring_dice: tuple[int, ...]
    remaining_dice: tuple[int, ...] = ()
    scoring_dice_indices: frozenset[int] = field(default_factory=frozenset)
    breakdown: tuple[ScoringBreakdown, ...] = ()

    @property
    def is_bust(self) -> bool:
        """Returns True if nothing in the selection scored."""
        return self.score == 0

    @property
    def all_dice_score(self) -> bool:
        """Returns True if every die in the selection contributed."""
        return self.score > 0 and not self.remaining_dice

    def __str__(self) -> str:
        if self.is_bust:
            return "BUST! No scoring dice."
        lines = [f"Total: {self.score} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a dice roll.

    Attributes:
        values: Tuple of dice face values
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        for value in self.values:
            if not (1 <= value <= 6):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and 6."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))


@dataclass(frozen=True)
class KeepValidation:
    """Outcome of checking a proposed keep against a roll."""
    valid: bool
    error: str | None = None


@dataclass(frozen=True)
class CarryoverPot:
    """
    Points and unused dice left on the table by a player who banked early.

    Attributes:
        points: The banker's turn score at the moment of banking
        dice_count: Dice the banker left unrolled
    """
    points: int
    dice_count: int

    def __post_init__(self) -> None:
        if not (1 <= self.dice_count <= DICE_COUNT):
            raise ValueError(
                f"Carryover dice count must be between 1 and {DICE_COUNT}, "
                f"got {self.dice_count}."
            )
        if self.points < 0:
            raise ValueError(f"Carryover points cannot be negative, got {self.points}.")


@dataclass(frozen=True)
class TurnState:
    """
    Complete state of a player's turn.

    Attributes:
        phase: Current phase of the turn
        turn_score: Points accumulated this turn, including claimed carryover
        dice_remaining: Dice available for the next roll
        current_roll: Most recent roll awaiting a keep decision
        kept_dice: Every die kept so far this turn, in keep order
        has_carryover: Whether this turn inherited a carryover pot
        carryover_claimed: Whether the pot has been folded into turn_score
        carryover_points: Points inherited from the previous banker
    """
    phase: TurnPhase = TurnPhase.ROLLING
    turn_score: int = 0
    dice_remaining: int = DICE_COUNT
    current_roll: tuple[int, ...] | None = None
    kept_dice: tuple[int, ...] = ()
    has_carryover: bool = False
    carryover_claimed: bool = False
    carryover_points: int = 0

    @property
    def own_score(self) -> int:
        """Points rolled by the player themself this turn."""
        if self.carryover_claimed:
            return self.turn_score - self.carryover_points
        return self.turn_score

    @property
    def is_hot_dice(self) -> bool:
        """All dice were used and a fresh set is in hand."""
        return self.dice_remaining == DICE_COUNT and self.turn_score > 0

    @property
    def is_bust(self) -> bool:
        """The turn ended on a roll with nothing to keep."""
        return self.phase == TurnPhase.ENDED and self.turn_score == 0


@dataclass(frozen=True)
class PlayerState:
    """
    A seat at the table.

    Attributes:
        id: Stable player identifier
        name: Display name
        score: Total banked score
        is_on_board: Whether the player has met the entry threshold
        is_ai: Whether this seat is driven by an AI strategy
        ai_strategy: Strategy used by an AI seat
    """
    id: str
    name: str
    score: int = 0
    is_on_board: bool = False
    is_ai: bool = False
    ai_strategy: StrategyName | None = None


@dataclass(frozen=True)
class GameConfig:
    """
    Rules configuration for a game session.

    Attributes:
        entry_threshold: Own points needed in one turn to get on the board
        target_score: Score that triggers the final round
    """
    entry_threshold: int = ENTRY_THRESHOLD
    target_score: int = TARGET_SCORE

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("entry_threshold", "target_score"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {type(value).__name__}.")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}.")

    @classmethod
    def from_settings(cls, settings: Settings) -> "GameConfig":
        """Build a config from application settings."""
        return cls(
            entry_threshold=settings.entry_threshold,
            target_score=settings.target_score,
        )


@dataclass(frozen=True)
class GameState:
    """
    Single source of truth for a session.

    Attributes:
        players: All seats, in turn order
        current_player_index: Seat whose turn it is
        turn: State of the current turn
        carryover_pot: Pot awaiting hand-off to the next player, if any
        is_final_round: Whether someone has reached the target score
        final_round_trigger_index: Seat that first reached the target
        score_to_beat: Current record once the final round started
        score_to_beat_player_index: Seat holding the record
        high_score_beaten_this_round: Whether the record fell during this lap
        is_game_over: Whether the game has ended
        winner_index: Winning seat once the game is over
        entry_threshold: Own points needed in one turn to get on the board
        target_score: Score that triggers the final round
    """
    players: tuple[PlayerState, ...]
    current_player_index: int = 0
    turn: TurnState = field(default_factory=TurnState)
    carryover_pot: CarryoverPot | None = None
    is_final_round: bool = False
    final_round_trigger_index: int | None = None
    score_to_beat: int | None = None
    score_to_beat_player_index: int | None = None
    high_score_beaten_this_round: bool = False
    is_game_over: bool = False
    winner_index: int | None = None
    entry_threshold: int = ENTRY_THRESHOLD
    target_score: int = TARGET_SCORE

    @property
    def current_player(self) -> PlayerState:
        """The player whose turn it is."""
        return self.players[self.current_player_index]

    @property
    def next_player_index(self) -> int:
        """Seat that plays after the current one."""
        return (self.current_player_index + 1) % len(self.players)
