"""Best-hand classification for a table plus a two-card hand.

The table (3-5 cards) and the hand (2 cards) are merged into one working
set sorted ascending by rank and suit. Each category detector looks at the
working set and returns a Hand or None; detectors run strongest first and
the first success is the best hand.
"""

from typing import Callable, Iterator, List, Optional, Sequence

from .hands import Hand, HandType
from .ranks import Card, Rank, sort_cards
from .scanners import consecutive, same_rank, same_suit

# Cards in a player's hand
HAND_CARDS = 2

# Allowed table sizes (flop to river)
TABLE_MIN_CARDS = 3
TABLE_MAX_CARDS = 5

# Cards in a straight or flush
RUN_LENGTH = 5


class DealError(ValueError):
    """Raised when the table or hand has the wrong number of cards.

    This signals caller misuse, not a condition to recover from.
    """


def working_set(table: Sequence[Card], hand: Sequence[Card]) -> List[Card]:
    """Validate card counts and merge table and hand into a sorted list.

    Raises:
        DealError: If hand is not exactly 2 cards or table is not 3-5 cards
    """
    if len(hand) != HAND_CARDS:
        raise DealError(f"Hand must have exactly {HAND_CARDS} cards, got {len(hand)}")
    if not TABLE_MIN_CARDS <= len(table) <= TABLE_MAX_CARDS:
        raise DealError(
            f"Table must have between {TABLE_MIN_CARDS} and {TABLE_MAX_CARDS} cards, got {len(table)}"
        )
    return sort_cards(list(table) + list(hand))


def highest_card(cards: List[Card]) -> Optional[Hand]:
    if not cards:
        return None
    return Hand(HandType.HIGH_CARD, (cards[-1],))


def pair(cards: List[Card]) -> Optional[Hand]:
    found = same_rank(cards, 2)
    if found is None:
        return None
    return Hand(HandType.PAIR, found)


def two_pair(cards: List[Card]) -> Optional[Hand]:
    """Highest pair first, then the highest pair among the other ranks."""
    first = same_rank(cards, 2)
    if first is None:
        return None

    rest = [card for card in cards if card.rank != first[0].rank]
    second = same_rank(rest, 2)
    if second is None:
        return None

    return Hand.from_groups(HandType.TWO_PAIR, first, second)


def three_of_a_kind(cards: List[Card]) -> Optional[Hand]:
    found = same_rank(cards, 3)
    if found is None:
        return None
    return Hand(HandType.THREE_OF_A_KIND, found)


def _straight_cards(cards: List[Card]):
    run = consecutive(cards, RUN_LENGTH)
    if run is not None:
        return run

    # Ace-low: move the Ace in front of the Two and look again
    if cards and cards[0].rank == Rank.TWO and cards[-1].rank == Rank.ACE:
        rotated = [cards[-1]] + cards[:-1]
        return consecutive(rotated, RUN_LENGTH)

    return None


def straight(cards: List[Card]) -> Optional[Hand]:
    run = _straight_cards(cards)
    if run is None:
        return None
    return Hand(HandType.STRAIGHT, run)


def flush(cards: List[Card]) -> Optional[Hand]:
    found = same_suit(cards, RUN_LENGTH)
    if found is None:
        return None
    return Hand(HandType.FLUSH, found)


def full_house(cards: List[Card]) -> Optional[Hand]:
    """Highest three of a kind, then the highest pair among the other ranks."""
    three = same_rank(cards, 3)
    if three is None:
        return None

    rest = [card for card in cards if card.rank != three[0].rank]
    two = same_rank(rest, 2)
    if two is None:
        return None

    return Hand.from_groups(HandType.FULL_HOUSE, three, two)


def four_of_a_kind(cards: List[Card]) -> Optional[Hand]:
    # First match is enough: seven cards hold at most one four of a kind
    for i in range(len(cards) - 3):
        window = cards[i : i + 4]
        if all(card.rank == window[0].rank for card in window):
            return Hand(HandType.FOUR_OF_A_KIND, tuple(window))
    return None


def straight_flush(cards: List[Card]) -> Optional[Hand]:
    """A straight inside the five cards picked as the flush."""
    suited = same_suit(cards, RUN_LENGTH)
    if suited is None:
        return None

    run = _straight_cards(list(suited))
    if run is None:
        return None
    return Hand(HandType.STRAIGHT_FLUSH, run)


def royal_flush(cards: List[Card]) -> Optional[Hand]:
    found = straight_flush(cards)
    if found is None or found.cards[0].rank != Rank.TEN:
        return None
    return Hand(HandType.ROYAL_FLUSH, found.cards)


# Detectors in priority order, strongest first
DETECTORS: List[Callable[[List[Card]], Optional[Hand]]] = [
    royal_flush,
    straight_flush,
    four_of_a_kind,
    full_house,
    flush,
    straight,
    three_of_a_kind,
    two_pair,
    pair,
    highest_card,
]


def iter_hands(table: Sequence[Card], hand: Sequence[Card]) -> Iterator[Hand]:
    """Iterate over every hand the cards make, in detector priority order.

    Raises:
        DealError: If the card counts are invalid (checked eagerly, before iteration)
    """
    cards = working_set(table, hand)
    return (found for found in (detect(cards) for detect in DETECTORS) if found is not None)


def best_hand(table: Sequence[Card], hand: Sequence[Card]) -> Hand:
    """Return the strongest hand made by the table and the player's two cards.

    Args:
        table: 3 to 5 community cards, any order
        hand: Exactly 2 hole cards

    Returns:
        The first hand found in priority order (HighCard at worst)

    Raises:
        DealError: If the card counts are invalid
    """
    return next(iter_hands(table, hand))


def all_hands(table: Sequence[Card], hand: Sequence[Card]) -> List[Hand]:
    """Return every hand the cards make, strongest category first.

    The list follows detector priority order and is not re-sorted by the
    full hand ordering.

    Raises:
        DealError: If the card counts are invalid
    """
    return list(iter_hands(table, hand))
