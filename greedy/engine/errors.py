"""
Greedy - Rule Violation Errors

Every illegal transition raises one of these synchronously. They subclass
ValueError so callers that only care about "bad input" can catch that.
"""


class GreedyError(ValueError):
    """Base class for all game rule violations."""


class InvalidRoll(GreedyError):
    """Dice were rolled in the wrong phase or with the wrong dice count."""


class InvalidKeep(GreedyError):
    """The kept dice are not a legal, complete scoring selection."""


class NoCurrentRoll(GreedyError):
    """A keep was attempted with no pending roll."""


class BankNotAllowed(GreedyError):
    """Banking in the wrong phase or below the entry threshold."""


class DeclineNotAllowed(GreedyError):
    """A carryover was declined when no steal was pending."""


class EndTurnNotReady(GreedyError):
    """The turn was ended before it reached the ENDED phase."""


class InsufficientPlayers(GreedyError):
    """A session was created with fewer than two players."""


class GameOver(GreedyError):
    """An action was applied after the game ended."""
