"""Fixed-width run scanners shared by the category detectors.

Every scanner slides a window of width ``n`` over a card sequence that is
already sorted ascending (see ``sort_cards``) and keeps the LAST window that
satisfies its predicate. Because later windows hold higher cards, the last
match is the highest-ranked instance of the pattern.

Scanners return a tuple of exactly ``n`` cards, or None when no window
matches (including when fewer than ``n`` cards are given).
"""

from typing import List, Optional, Sequence, Tuple

from .ranks import Card

# Rank delta between an Ace moved in front of a Two and that Two
WRAPAROUND_DELTA = -12


def _windows(seq: Sequence, n: int) -> List[Sequence]:
    return [seq[i : i + n] for i in range(len(seq) - n + 1)]


def _last_window(cards: Sequence[Card], n: int, key) -> Optional[Tuple[Card, ...]]:
    matches = [w for w in _windows(cards, n) if all(key(c) == key(w[0]) for c in w)]
    if not matches:
        return None
    return tuple(matches[-1])


def same_rank(cards: Sequence[Card], n: int) -> Optional[Tuple[Card, ...]]:
    """Find the last run of ``n`` cards sharing one rank.

    Args:
        cards: Cards sorted ascending by rank, then suit
        n: Run length

    Returns:
        The highest-ranked run, or None
    """
    return _last_window(cards, n, lambda card: card.rank)


def same_suit(cards: Sequence[Card], n: int) -> Optional[Tuple[Card, ...]]:
    """Find the last run of ``n`` cards sharing one suit.

    The input is re-sorted by suit first. The sort is stable, so cards keep
    their ascending rank order inside each suit group and the selected run is
    the highest-ranked one of its suit.
    """
    by_suit = sorted(cards, key=lambda card: card.suit)
    return _last_window(by_suit, n, lambda card: card.suit)


def consecutive(cards: Sequence[Card], n: int) -> Optional[Tuple[Card, ...]]:
    """Find the last run of ``n`` cards whose ranks step up by exactly one.

    A step of -12 (Ace followed by Two) also counts, which lets the ace-low
    straight be found once the Ace has been rotated to the front.

    Note:
        Repeated ranks break a run: 5-6-6-7-8-9 contains no run of five.
    """
    deltas = [int(b.rank) - int(a.rank) for a, b in zip(cards, cards[1:])]

    start = None
    for i, window in enumerate(_windows(deltas, n - 1)):
        if all(d == 1 or d == WRAPAROUND_DELTA for d in window):
            start = i

    if start is None:
        return None
    return tuple(cards[start : start + n])
