"""Hand classification and ranking rules.

This module provides:
- Card and rank definitions (ranks.py)
- Fixed-width run scanners (scanners.py)
- Hand types and their total order (hands.py)
- Category detectors and best-hand classification (classifier.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    parse_card,
    parse_cards,
    create_standard_deck,
    create_short_deck,
    sort_cards,
)

from .scanners import (
    same_rank,
    same_suit,
    consecutive,
)

from .hands import (
    HandType,
    Hand,
    HAND_NAMES,
    HAND_SHAPES,
    compare_hands,
    hand_type_from_name,
)

from .classifier import (
    DealError,
    HAND_CARDS,
    TABLE_MIN_CARDS,
    TABLE_MAX_CARDS,
    DETECTORS,
    working_set,
    best_hand,
    all_hands,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "parse_card",
    "parse_cards",
    "create_standard_deck",
    "create_short_deck",
    "sort_cards",
    # Scanners
    "same_rank",
    "same_suit",
    "consecutive",
    # Hands
    "HandType",
    "Hand",
    "HAND_NAMES",
    "HAND_SHAPES",
    "compare_hands",
    "hand_type_from_name",
    # Classification
    "DealError",
    "HAND_CARDS",
    "TABLE_MIN_CARDS",
    "TABLE_MAX_CARDS",
    "DETECTORS",
    "working_set",
    "best_hand",
    "all_hands",
]
