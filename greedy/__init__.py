"""
Greedy - a push-your-luck dice game engine.

Scoring, keep validation, the turn state machine, the multi-player
reducer and AI strategies, as pure functions over immutable state.
"""

__version__ = "0.1.0"
