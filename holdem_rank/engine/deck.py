"""Deck construction, shuffling and dealing.

Randomness is always injected as a ``numpy.random.Generator`` so that the
classification rules never own or seed a random source.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

import numpy as np

from holdem_rank.rules import Card, create_short_deck, create_standard_deck, sort_cards

# Width of every card after the first in a formatted row
CARD_COLUMN_WIDTH = 5


@dataclass
class Deck:
    """An ordered pile of cards. Dealing takes cards from the front.

    Attributes:
        cards: Cards in deal order
    """

    cards: List[Card] = field(default_factory=list)

    @classmethod
    def standard(cls) -> "Deck":
        """The 52-card French deck, unshuffled."""
        return cls(create_standard_deck())

    @classmethod
    def short(cls) -> "Deck":
        """The 36-card deck (Six to Ace), unshuffled."""
        return cls(create_short_deck())

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def shuffle(self, rng: np.random.Generator) -> "Deck":
        """Shuffle in place with the given generator and return self."""
        rng.shuffle(self.cards)
        return self

    def sort(self) -> "Deck":
        """Sort in place by rank, then suit, and return self."""
        self.cards = sort_cards(self.cards)
        return self

    def deal(self, n: int) -> "Deck":
        """Remove the first ``n`` cards and return them as a new deck.

        Raises:
            ValueError: If fewer than ``n`` cards remain
        """
        if n < 0 or n > len(self.cards):
            raise ValueError(f"Cannot deal {n} cards from a deck of {len(self.cards)}")
        dealt, self.cards = self.cards[:n], self.cards[n:]
        return Deck(dealt)

    def merge(self, other: Iterable[Card]) -> "Deck":
        """Append another deck's cards and return self."""
        self.cards.extend(other)
        return self

    def format_rows(self, per_row: int) -> str:
        """Format the cards as a grid with ``per_row`` cards on each line.

        The first card of a row is left as is; the others are right-aligned
        in a column of CARD_COLUMN_WIDTH characters.
        """
        if per_row < 1:
            raise ValueError(f"per_row must be positive, got {per_row}")

        lines = []
        for start in range(0, len(self.cards), per_row):
            row = self.cards[start : start + per_row]
            line = str(row[0]) + "".join(f"{str(card):>{CARD_COLUMN_WIDTH}}" for card in row[1:])
            lines.append(line)
        return "\n".join(lines)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)


def new_shuffled_deck(rng: np.random.Generator) -> Deck:
    """Build and shuffle a standard deck."""
    return Deck.standard().shuffle(rng)
