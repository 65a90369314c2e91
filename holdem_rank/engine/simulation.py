"""Monte-Carlo estimate of how often each hand type wins.

Each iteration shuffles a fresh deck, deals a full five-card table and two
cards to every player, and classifies every player's best hand. The
strongest hand under the total hand ordering wins; every other hand loses.
Results are tallied per hand type.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
import time

import numpy as np

from holdem_rank.rules import HAND_CARDS, HAND_NAMES, HandType, best_hand
from holdem_rank.engine.deck import new_shuffled_deck

# Community cards dealt in every simulated game
TABLE_CARDS = 5

# Default simulation size
DEFAULT_PLAYERS = 4
DEFAULT_ITERATIONS = 100_000

MIN_PLAYERS = 2
MAX_PLAYERS = (52 - TABLE_CARDS) // HAND_CARDS

# Progress reports over one simulation run
PROGRESS_STEPS = 10


@dataclass
class SimulationStats:
    """Win and loss tallies per hand type.

    Attributes:
        players: Players dealt in each game
        iterations: Number of games played
        wins: Games won, indexed by HandType
        losses: Games lost, indexed by HandType
        elapsed: Wall-clock seconds spent simulating
    """

    players: int
    iterations: int = 0
    wins: np.ndarray = field(default_factory=lambda: np.zeros(len(HandType), dtype=np.int64))
    losses: np.ndarray = field(default_factory=lambda: np.zeros(len(HandType), dtype=np.int64))
    elapsed: float = 0.0

    def record_game(self, hands: list) -> None:
        """Record one game given every player's best hand."""
        ordered = sorted(hands)
        winner = ordered.pop()
        self.wins[winner.hand_type] += 1
        for hand in ordered:
            self.losses[hand.hand_type] += 1
        self.iterations += 1

    def hand_probability(self, hand_type: HandType) -> float:
        """Fraction of games won with this hand type."""
        if self.iterations == 0:
            return 0.0
        return float(self.wins[hand_type]) / self.iterations

    def win_probability(self, hand_type: HandType) -> float:
        """Fraction of this hand type's appearances that won."""
        seen = int(self.wins[hand_type] + self.losses[hand_type])
        if seen == 0:
            return 0.0
        return float(self.wins[hand_type]) / seen

    def summary(self) -> str:
        """Format the per-hand-type table."""
        hand_title = "Hand"
        hand_probability_title = "Hand probability"
        win_title = "Probability to win"
        hp = len(hand_probability_title)
        pw = len(win_title)

        lines = [
            f"Players: {self.players}",
            f"{hand_title:<14}: {hand_probability_title:>{hp}}, {win_title:>{pw}}",
        ]
        for hand_type in HandType:
            hand_pct = self.hand_probability(hand_type) * 100.0
            win_pct = self.win_probability(hand_type) * 100.0
            lines.append(
                f"{HAND_NAMES[hand_type]:<14}: {hand_pct:>{hp - 1}.2f}%, {win_pct:>{pw - 1}.2f}%"
            )
        lines.append(f"Simulated {self.iterations} games in {self.elapsed:.2f}s")
        return "\n".join(lines)


def progress_checkpoints(iterations: int, steps: int = PROGRESS_STEPS) -> set:
    """Game counts at which progress is reported, evenly spread over the run.

    There are ``steps`` checkpoints, or one per game when there are fewer games.
    """
    return {(k * iterations) // steps for k in range(1, steps + 1)} - {0}


def play_game(players: int, rng: np.random.Generator) -> list:
    """Deal one game and return each player's best hand, in seat order."""
    deck = new_shuffled_deck(rng)
    table = deck.deal(TABLE_CARDS)
    hands = [deck.deal(HAND_CARDS) for _ in range(players)]
    return [best_hand(table.cards, hand.cards) for hand in hands]


def simulate(
    players: int = DEFAULT_PLAYERS,
    iterations: int = DEFAULT_ITERATIONS,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    progress: Callable[[int, int], None] | None = None,
) -> SimulationStats:
    """Play ``iterations`` random games and tally results per hand type.

    Args:
        players: Players per game (2-23)
        iterations: Number of games to play
        rng: Generator used for shuffling; built from ``seed`` if omitted
        seed: Seed for a new generator when ``rng`` is not given
        progress: Called as ``progress(done, iterations)`` ten times over the run
            (once per game when there are fewer than ten games)

    Returns:
        SimulationStats with the tallies

    Raises:
        ValueError: If players or iterations are out of range
    """
    if not MIN_PLAYERS <= players <= MAX_PLAYERS:
        raise ValueError(f"players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {players}")
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")

    if rng is None:
        rng = np.random.default_rng(seed)

    stats = SimulationStats(players=players)
    checkpoints = progress_checkpoints(iterations)
    start = time.perf_counter()

    for i in range(iterations):
        stats.record_game(play_game(players, rng))
        if progress is not None and i + 1 in checkpoints:
            progress(i + 1, iterations)

    stats.elapsed = time.perf_counter() - start
    return stats
