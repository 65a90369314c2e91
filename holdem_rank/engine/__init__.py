"""Drivers built on the hand rules.

This module provides:
- Deck: Deck construction, shuffling and dealing
- simulate: Monte-Carlo win probability per hand type
- find_improvements: Cards that improve a hand on the next street
"""

from .deck import Deck, new_shuffled_deck
from .simulation import (
    SimulationStats,
    DEFAULT_PLAYERS,
    DEFAULT_ITERATIONS,
    play_game,
    simulate,
)
from .improve import (
    Improvement,
    Exploration,
    DEFAULT_THRESHOLD,
    find_improvements,
    deal_and_explore,
)

__all__ = [
    "Deck",
    "new_shuffled_deck",
    "SimulationStats",
    "DEFAULT_PLAYERS",
    "DEFAULT_ITERATIONS",
    "play_game",
    "simulate",
    "Improvement",
    "Exploration",
    "DEFAULT_THRESHOLD",
    "find_improvements",
    "deal_and_explore",
]
