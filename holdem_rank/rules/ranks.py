"""Card rank definitions and utilities.

Rank order (low to high): 2 < 3 < 4 < 5 < 6 < 7 < 8 < 9 < 10 < J < Q < K < A

This module provides:
- Rank and suit enumerations and their ordering
- Card representation (ordered by rank, then suit)
- Text encoding and parsing ("10 ♠", "A ♣")
- Standard and short deck construction
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank).

    The integer value is used for adjacency arithmetic when looking for
    straights, so it must stay contiguous from TWO to ACE.
    """

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Suit(IntEnum):
    """Card suits. The order carries no poker meaning but breaks ties between equal ranks."""

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3


# Rank tokens for display
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit glyphs for display
SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}

# Symbol to rank/suit mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Ranks removed from a standard deck to build the 36-card short deck
SHORT_DECK_EXCLUDED = frozenset([Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE])


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first (for sorting hands), then by suit.
    Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]} {SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a string like '3 ♥' or '10 ♠'.

        Args:
            s: Card string in format "RANK SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        card = parse_card(s)
        if card is None:
            raise ValueError(f"Invalid card: {s!r}")
        return card


def parse_card(s: str) -> Optional[Card]:
    """Parse a card from its text encoding, returning None if it is malformed.

    Unlike Card.from_string this never raises, so callers can skip or
    report bad tokens one at a time.
    """
    parts = s.split(" ")
    if len(parts) != 2:
        return None

    rank = SYMBOL_TO_RANK.get(parts[0])
    suit = SYMBOL_TO_SUIT.get(parts[1])
    if rank is None or suit is None:
        return None

    return Card(rank=rank, suit=suit)


def parse_cards(s: str) -> List[Card]:
    """Parse cards from a string like "10 ♠ J ♠ Q ♠".

    Args:
        s: Whitespace-separated rank and suit tokens, alternating

    Returns:
        List of Card objects

    Raises:
        ValueError: If the tokens do not pair up or a card is invalid
    """
    tokens = s.split()
    if len(tokens) % 2 != 0:
        raise ValueError(f"Expected rank/suit token pairs, got {len(tokens)} tokens")

    return [Card.from_string(f"{r} {u}") for r, u in zip(tokens[::2], tokens[1::2])]


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits), rank-major
    """
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def create_short_deck() -> List[Card]:
    """Create a 36-card deck with Two through Five removed."""
    return [card for card in create_standard_deck() if card.rank not in SHORT_DECK_EXCLUDED]


def sort_cards(cards: List[Card]) -> List[Card]:
    """Sort cards by rank (ascending), then by suit.

    Args:
        cards: List of Card objects

    Returns:
        New sorted list of cards
    """
    return sorted(cards)
