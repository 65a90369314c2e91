"""Find the cards that would improve a hand on the next street.

For every card still in the deck, the card is added to the table and every
hand the player could then make is listed. Hands that beat the current best
hand and reach a minimum category count as improvements.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from holdem_rank.rules import (
    Card,
    Hand,
    HandType,
    HAND_CARDS,
    TABLE_MAX_CARDS,
    DealError,
    all_hands,
    best_hand,
)
from holdem_rank.engine.deck import Deck, new_shuffled_deck

# Table size dealt by deal_and_explore (turn, one card to come)
EXPLORE_TABLE_CARDS = 4

# Improving hands must be stronger than this category
DEFAULT_THRESHOLD = HandType.TWO_PAIR


@dataclass(frozen=True)
class Improvement:
    """A card that improves the hand, and the hands it makes possible.

    Attributes:
        card: The card that would come next
        hands: Improving hands, strongest category first
    """

    card: Card
    hands: Tuple[Hand, ...]

    @property
    def best(self) -> Hand:
        return self.hands[0]


def find_improvements(
    table: Sequence[Card],
    hand: Sequence[Card],
    remaining: Sequence[Card],
    threshold: HandType = DEFAULT_THRESHOLD,
) -> List[Improvement]:
    """List the remaining cards that improve the player's hand.

    Args:
        table: Current table (3 or 4 cards)
        hand: The player's 2 cards
        remaining: Candidate next cards
        threshold: Improving hands must be of a higher category than this

    Returns:
        Improvements sorted by their strongest improving hand, weakest first

    Raises:
        DealError: If the table is already full or the card counts are invalid
    """
    if len(table) >= TABLE_MAX_CARDS:
        raise DealError(f"Table must have fewer than {TABLE_MAX_CARDS} cards to add another")

    current = best_hand(table, hand)
    table = list(table)

    improvements = []
    for card in remaining:
        better = tuple(
            h
            for h in all_hands(table + [card], hand)
            if h > current and h.hand_type > threshold
        )
        if better:
            improvements.append(Improvement(card=card, hands=better))

    improvements.sort(key=lambda imp: imp.best)
    return improvements


@dataclass
class Exploration:
    """A random deal and the cards that improve it."""

    table: Deck
    hand: Deck
    current: Hand
    improvements: List[Improvement]


def deal_and_explore(
    rng: np.random.Generator,
    threshold: HandType = DEFAULT_THRESHOLD,
) -> Exploration:
    """Deal a four-card table and a hand, then explore the rest of the deck."""
    deck = new_shuffled_deck(rng)
    table = deck.deal(EXPLORE_TABLE_CARDS)
    hand = deck.deal(HAND_CARDS)

    return Exploration(
        table=table,
        hand=hand,
        current=best_hand(table.cards, hand.cards),
        improvements=find_improvements(table.cards, hand.cards, deck.cards, threshold),
    )
