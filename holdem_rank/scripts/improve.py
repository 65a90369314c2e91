#!/usr/bin/env python
"""Show which next cards would improve a hand.

A four-card table and a two-card hand are either dealt at random or given
on the command line. Every card left in the deck is tried as the river and
the hands it would make are listed when they beat the current best hand.

Usage:
    python -m holdem_rank.scripts.improve --seed 7
    python -m holdem_rank.scripts.improve --table "2 ♠ 3 ♠ 9 ♦ K ♥" --hand "4 ♠ 5 ♠"
    python -m holdem_rank.scripts.improve --threshold Pair
"""

import argparse
import sys

from holdem_rank.rules import Card, HandType, HAND_NAMES, best_hand, hand_type_from_name, parse_card
from holdem_rank.utils.seeding import make_rng
from holdem_rank.engine.deck import Deck
from holdem_rank.engine.improve import (
    DEFAULT_THRESHOLD,
    Exploration,
    deal_and_explore,
    find_improvements,
)

# Cards per row when printing the table and the hand
TABLE_ROW = 5
HAND_ROW = 2


def parse_card_list(text: str) -> tuple[list[Card], list[str]]:
    """Parse "RANK SUIT RANK SUIT ..." leniently.

    Returns:
        Tuple of (parsed cards, rejected tokens)
    """
    tokens = text.split()
    cards = []
    bad = []
    for i in range(0, len(tokens), 2):
        token = " ".join(tokens[i : i + 2])
        card = parse_card(token)
        if card is None:
            bad.append(token)
        else:
            cards.append(card)
    return cards, bad


def remaining_cards(table: list[Card], hand: list[Card]) -> list[Card]:
    """Standard deck minus the cards already on the table and in the hand."""
    used = set(table) | set(hand)
    if len(used) != len(table) + len(hand):
        raise ValueError("Table and hand contain duplicate cards")
    return [card for card in Deck.standard() if card not in used]


def explore_given(table: list[Card], hand: list[Card], threshold: HandType) -> Exploration:
    """Explore a fixed deal; the rest of the standard deck is the candidate pool."""
    remaining = remaining_cards(table, hand)

    return Exploration(
        table=Deck(list(table)),
        hand=Deck(list(hand)),
        current=best_hand(table, hand),
        improvements=find_improvements(table, hand, remaining, threshold),
    )


def print_exploration(exploration: Exploration) -> None:
    print(f"Table({exploration.table.format_rows(TABLE_ROW)})")
    print(f"Hand({exploration.hand.format_rows(HAND_ROW)}), {exploration.current}")

    for improvement in exploration.improvements:
        hands = ", ".join(str(h) for h in improvement.hands)
        print(f"{str(improvement.card):>4}: {hands}")

    print(f"Better hands: {len(exploration.improvements)}")


def main():
    """Main entry point for the improvement explorer."""
    parser = argparse.ArgumentParser(
        description="List the river cards that improve a hand",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m holdem_rank.scripts.improve --seed 7
  python -m holdem_rank.scripts.improve --table "2 ♠ 3 ♠ 9 ♦ K ♥" --hand "4 ♠ 5 ♠"
        """,
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for the deal"
    )

    parser.add_argument(
        "--table",
        "-t",
        type=str,
        default=None,
        help='Table cards, e.g. "2 ♠ 3 ♠ 9 ♦ K ♥" (requires --hand)',
    )

    parser.add_argument(
        "--hand",
        type=str,
        default=None,
        help='Hand cards, e.g. "4 ♠ 5 ♠" (requires --table)',
    )

    parser.add_argument(
        "--threshold",
        type=str,
        default=HAND_NAMES[DEFAULT_THRESHOLD],
        help=f"Only report hands above this type (default: {HAND_NAMES[DEFAULT_THRESHOLD]})",
    )

    args = parser.parse_args()

    if (args.table is None) != (args.hand is None):
        print("Error: --table and --hand must be given together")
        sys.exit(1)

    try:
        threshold = hand_type_from_name(args.threshold)

        if args.table is not None:
            table, bad_table = parse_card_list(args.table)
            hand, bad_hand = parse_card_list(args.hand)
            bad = bad_table + bad_hand
            if bad:
                for token in bad:
                    print(f"Error: Invalid card {token!r}")
                sys.exit(1)
            exploration = explore_given(table, hand, threshold)
        else:
            seed, rng = make_rng(args.seed)
            print(f"Dealing with seed={seed}")
            exploration = deal_and_explore(rng, threshold)

        print_exploration(exploration)
    except KeyboardInterrupt:
        print("\nExploration interrupted by user.")
        sys.exit(0)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
