"""Hand categories and their total order.

Hand types, weakest to strongest:
- High card: the single highest card
- Pair: two cards of the same rank
- Two pair: the higher pair, then the lower pair
- Three of a kind
- Straight: five consecutive ranks, lowest first (A-2-3-4-5 allowed)
- Flush: five cards of one suit, lowest first
- Full house: the three of a kind, then the pair
- Four of a kind
- Straight flush
- Royal flush: Ten to Ace of one suit

Comparison rules:
- Different hand types: compare by hand type
- Same hand type: compare the captured cards one by one in stored order,
  each card by rank and then suit
- The Ace leading an ace-low straight counts below Two

Only the captured cards take part in comparisons; kickers are not tracked.
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Dict, Iterable, Tuple

from .ranks import Card, Rank


class HandType(IntEnum):
    """Poker hand categories, ordered by strength."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


# Display names used in hand text and simulation tables
HAND_NAMES: Dict[HandType, str] = {
    HandType.HIGH_CARD: "HighCard",
    HandType.PAIR: "Pair",
    HandType.TWO_PAIR: "TwoPair",
    HandType.THREE_OF_A_KIND: "ThreeOfAKind",
    HandType.STRAIGHT: "Straight",
    HandType.FLUSH: "Flush",
    HandType.FULL_HOUSE: "FullHouse",
    HandType.FOUR_OF_A_KIND: "FourOfAKind",
    HandType.STRAIGHT_FLUSH: "StraightFlush",
    HandType.ROYAL_FLUSH: "RoyalFlush",
}

NAME_TO_HAND_TYPE = {v: k for k, v in HAND_NAMES.items()}

# Card groups captured by each hand type
HAND_SHAPES: Dict[HandType, Tuple[int, ...]] = {
    HandType.HIGH_CARD: (1,),
    HandType.PAIR: (2,),
    HandType.TWO_PAIR: (2, 2),
    HandType.THREE_OF_A_KIND: (3,),
    HandType.STRAIGHT: (5,),
    HandType.FLUSH: (5,),
    HandType.FULL_HOUSE: (3, 2),
    HandType.FOUR_OF_A_KIND: (4,),
    HandType.STRAIGHT_FLUSH: (5,),
    HandType.ROYAL_FLUSH: (5,),
}

STRAIGHT_TYPES = frozenset([HandType.STRAIGHT, HandType.STRAIGHT_FLUSH, HandType.ROYAL_FLUSH])

# Rank value an Ace takes when it leads an ace-low straight
ACE_LOW_VALUE = -1


@total_ordering
@dataclass(frozen=True)
class Hand:
    """A classified poker hand.

    ``hand_type`` is the discriminator; ``cards`` holds exactly the cards
    that justify it, in the order the detector produced them. The number of
    cards and their grouping are fixed per hand type (see HAND_SHAPES).

    Attributes:
        hand_type: The category of the hand
        cards: Captured cards, groups concatenated
    """

    hand_type: HandType
    cards: Tuple[Card, ...]

    def __post_init__(self):
        expected = sum(HAND_SHAPES[self.hand_type])
        if len(self.cards) != expected:
            raise ValueError(
                f"{HAND_NAMES[self.hand_type]} takes {expected} cards, got {len(self.cards)}"
            )
        object.__setattr__(self, "cards", tuple(self.cards))

    @classmethod
    def from_groups(cls, hand_type: HandType, *groups: Iterable[Card]) -> "Hand":
        """Build a hand from its card groups, e.g. the two pairs of a TwoPair."""
        cards = tuple(card for group in groups for card in group)
        return cls(hand_type=hand_type, cards=cards)

    @property
    def groups(self) -> Tuple[Tuple[Card, ...], ...]:
        """Captured cards split into the groups of this hand type."""
        result = []
        start = 0
        for size in HAND_SHAPES[self.hand_type]:
            result.append(self.cards[start : start + size])
            start += size
        return tuple(result)

    @property
    def name(self) -> str:
        return HAND_NAMES[self.hand_type]

    @property
    def is_ace_low(self) -> bool:
        """Whether this is a straight whose first card is an Ace played low."""
        return (
            self.hand_type in STRAIGHT_TYPES
            and self.cards[0].rank == Rank.ACE
            and self.cards[1].rank == Rank.TWO
        )

    def sort_key(self) -> Tuple:
        """Key implementing the total order over hands."""
        ranks = [int(card.rank) for card in self.cards]
        if self.is_ace_low:
            ranks[0] = ACE_LOW_VALUE
        return (int(self.hand_type), tuple(zip(ranks, (int(c.suit) for c in self.cards))))

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.name}({cards_str})"


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 > hand2, negative if hand1 < hand2, zero if equal
    """
    key1, key2 = hand1.sort_key(), hand2.sort_key()
    return (key1 > key2) - (key1 < key2)


def hand_type_from_name(name: str) -> HandType:
    """Look up a hand type by display name ("TwoPair") or enum name ("TWO_PAIR").

    Raises:
        ValueError: If the name matches no hand type
    """
    if name in NAME_TO_HAND_TYPE:
        return NAME_TO_HAND_TYPE[name]
    try:
        return HandType[name.upper()]
    except KeyError:
        valid = ", ".join(HAND_NAMES.values())
        raise ValueError(f"Unknown hand type: {name}. Valid types: {valid}") from None
