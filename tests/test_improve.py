"""Tests for the hand improvement explorer."""

import numpy as np
import pytest
from holdem_rank.rules import Card, HandType, DealError, parse_cards
from holdem_rank.engine.deck import Deck
from holdem_rank.engine.improve import deal_and_explore, find_improvements


def explore(table, hand, threshold=HandType.TWO_PAIR):
    table, hand = parse_cards(table), parse_cards(hand)
    used = set(table) | set(hand)
    remaining = [card for card in Deck.standard() if card not in used]
    return find_improvements(table, hand, remaining, threshold)


class TestFindImprovements:
    def test_open_ended_straight_flush_draw(self):
        improvements = explore("2 ♠ 3 ♠ 9 ♦ K ♥", "4 ♠ 5 ♠")

        # 9 remaining spades make a flush or better, 3 more Sixes and 3 more Aces a straight
        assert len(improvements) == 15
        assert all(
            h.hand_type > HandType.TWO_PAIR for imp in improvements for h in imp.hands
        )

    def test_sorted_by_best_improvement(self):
        improvements = explore("2 ♠ 3 ♠ 9 ♦ K ♥", "4 ♠ 5 ♠")
        bests = [imp.best for imp in improvements]
        assert bests == sorted(bests)

        # Ace-low straights are the weakest improvement, Six of spades the strongest
        assert bests[0].hand_type == HandType.STRAIGHT
        assert bests[0].is_ace_low
        assert improvements[-1].card == Card.from_string("6 ♠")
        assert bests[-1].hand_type == HandType.STRAIGHT_FLUSH

    def test_hands_listed_strongest_first(self):
        improvements = explore("2 ♠ 3 ♠ 9 ♦ K ♥", "4 ♠ 5 ♠")
        six_of_spades = next(i for i in improvements if i.card == Card.from_string("6 ♠"))
        assert [h.hand_type for h in six_of_spades.hands] == [
            HandType.STRAIGHT_FLUSH,
            HandType.FLUSH,
            HandType.STRAIGHT,
        ]

    def test_lower_threshold_includes_pairs(self):
        improvements = explore("2 ♠ 3 ♠ 9 ♦ K ♥", "4 ♠ 5 ♠", threshold=HandType.HIGH_CARD)
        nine = next(i for i in improvements if i.card == Card.from_string("9 ♥"))
        assert nine.best.hand_type == HandType.PAIR
        assert len(improvements) > 15

    def test_nothing_improves_quads(self):
        assert explore("7 ♠ 7 ♥ 7 ♦ 2 ♣", "7 ♣ 3 ♦", threshold=HandType.FULL_HOUSE) == []

    def test_full_table_rejected(self):
        with pytest.raises(DealError):
            explore("2 ♠ 3 ♠ 9 ♦ K ♥ Q ♣", "4 ♠ 5 ♠")

    def test_three_card_table(self):
        improvements = explore("2 ♠ 3 ♠ 9 ♦", "4 ♠ 5 ♠")
        assert any(i.card == Card.from_string("6 ♠") for i in improvements)


class TestDealAndExplore:
    def test_deal_sizes(self):
        exploration = deal_and_explore(np.random.default_rng(11))
        assert len(exploration.table) == 4
        assert len(exploration.hand) == 2

    def test_improving_cards_not_dealt(self):
        exploration = deal_and_explore(np.random.default_rng(11))
        dealt = set(exploration.table) | set(exploration.hand)
        assert not {imp.card for imp in exploration.improvements} & dealt

    def test_improvements_beat_current(self):
        exploration = deal_and_explore(np.random.default_rng(5))
        for imp in exploration.improvements:
            assert all(h > exploration.current for h in imp.hands)

    def test_deterministic(self):
        e1 = deal_and_explore(np.random.default_rng(8))
        e2 = deal_and_explore(np.random.default_rng(8))
        assert e1.table.cards == e2.table.cards
        assert e1.improvements == e2.improvements
