"""Tests for the Hand type and the total order over hands.

Test coverage:
- Shape checks per hand type
- Ordering by hand type first
- Lexicographic ordering of captured cards within a hand type
- Ace-low straights rank below Two-to-Six straights
- Suits break ties between otherwise equal hands
"""

import pytest
from holdem_rank.rules import (
    HandType,
    Hand,
    HAND_NAMES,
    compare_hands,
    hand_type_from_name,
    parse_cards,
)


def make(hand_type, *groups):
    return Hand.from_groups(hand_type, *(parse_cards(g) for g in groups))


class TestHandShape:
    def test_card_count_checked(self):
        with pytest.raises(ValueError, match="Pair takes 2 cards"):
            Hand(HandType.PAIR, tuple(parse_cards("Q ♥ Q ♣ Q ♦")))

    def test_cards_stored_as_tuple(self):
        hand = Hand(HandType.PAIR, parse_cards("Q ♥ Q ♣"))
        assert isinstance(hand.cards, tuple)

    def test_groups(self):
        hand = make(HandType.FULL_HOUSE, "2 ♠ 2 ♥ 2 ♦", "8 ♠ 8 ♦")
        assert hand.groups == (
            tuple(parse_cards("2 ♠ 2 ♥ 2 ♦")),
            tuple(parse_cards("8 ♠ 8 ♦")),
        )

    def test_str(self):
        hand = make(HandType.TWO_PAIR, "Q ♥ Q ♣", "8 ♠ 8 ♦")
        assert str(hand) == "TwoPair(Q ♥ Q ♣ 8 ♠ 8 ♦)"
        assert str(make(HandType.HIGH_CARD, "A ♣")) == "HighCard(A ♣)"

    def test_every_type_has_a_name(self):
        assert set(HAND_NAMES) == set(HandType)

    def test_hashable(self):
        h1 = make(HandType.PAIR, "Q ♥ Q ♣")
        h2 = make(HandType.PAIR, "Q ♥ Q ♣")
        assert len({h1, h2}) == 1


class TestHandTypeOrdering:
    def test_hand_type_dominates_cards(self):
        high_card = make(HandType.HIGH_CARD, "A ♣")
        low_pair = make(HandType.PAIR, "2 ♠ 2 ♥")
        assert low_pair > high_card

    def test_full_ladder(self):
        hands = [
            make(HandType.HIGH_CARD, "A ♣"),
            make(HandType.PAIR, "2 ♠ 2 ♥"),
            make(HandType.TWO_PAIR, "3 ♠ 3 ♥", "2 ♠ 2 ♥"),
            make(HandType.THREE_OF_A_KIND, "2 ♠ 2 ♥ 2 ♦"),
            make(HandType.STRAIGHT, "A ♣ 2 ♠ 3 ♠ 4 ♦ 5 ♦"),
            make(HandType.FLUSH, "2 ♠ 3 ♠ 4 ♠ 5 ♠ 7 ♠"),
            make(HandType.FULL_HOUSE, "2 ♠ 2 ♥ 2 ♦", "3 ♠ 3 ♥"),
            make(HandType.FOUR_OF_A_KIND, "2 ♠ 2 ♥ 2 ♦ 2 ♣"),
            make(HandType.STRAIGHT_FLUSH, "2 ♠ 3 ♠ 4 ♠ 5 ♠ 6 ♠"),
            make(HandType.ROYAL_FLUSH, "10 ♠ J ♠ Q ♠ K ♠ A ♠"),
        ]
        assert sorted(reversed(hands)) == hands


class TestWithinTypeOrdering:
    def test_pair_by_rank(self):
        assert make(HandType.PAIR, "K ♠ K ♥") > make(HandType.PAIR, "Q ♦ Q ♣")

    def test_two_pair_higher_pair_first(self):
        kings_threes = make(HandType.TWO_PAIR, "K ♠ K ♥", "3 ♠ 3 ♥")
        queens_jacks = make(HandType.TWO_PAIR, "Q ♠ Q ♥", "J ♠ J ♥")
        assert kings_threes > queens_jacks

    def test_full_house_three_first(self):
        threes_full = make(HandType.FULL_HOUSE, "3 ♠ 3 ♥ 3 ♦", "A ♠ A ♥")
        twos_full = make(HandType.FULL_HOUSE, "2 ♠ 2 ♥ 2 ♦", "A ♦ A ♣")
        assert threes_full > twos_full

    def test_straights_by_run(self):
        low = make(HandType.STRAIGHT, "2 ♠ 3 ♠ 4 ♦ 5 ♦ 6 ♥")
        high = make(HandType.STRAIGHT, "3 ♠ 4 ♦ 5 ♦ 6 ♥ 7 ♥")
        broadway = make(HandType.STRAIGHT, "10 ♠ J ♦ Q ♦ K ♥ A ♥")
        assert low < high < broadway

    def test_ace_low_straight_below_two_to_six(self):
        wheel = make(HandType.STRAIGHT, "A ♣ 2 ♠ 3 ♠ 4 ♦ 5 ♦")
        six_high = make(HandType.STRAIGHT, "2 ♠ 3 ♠ 4 ♦ 5 ♦ 6 ♥")
        assert wheel.is_ace_low
        assert not six_high.is_ace_low
        assert wheel < six_high

    def test_ace_low_straight_flush_below_six_high(self):
        wheel = make(HandType.STRAIGHT_FLUSH, "A ♥ 2 ♥ 3 ♥ 4 ♥ 5 ♥")
        six_high = make(HandType.STRAIGHT_FLUSH, "2 ♠ 3 ♠ 4 ♠ 5 ♠ 6 ♠")
        assert wheel < six_high

    def test_ace_low_only_for_straights(self):
        flush = make(HandType.FLUSH, "A ♥ 2 ♥ 3 ♥ 4 ♥ 9 ♥")
        assert not flush.is_ace_low

    def test_flush_compares_lowest_card_first(self):
        low_start = make(HandType.FLUSH, "2 ♠ 9 ♠ J ♠ K ♠ A ♠")
        high_start = make(HandType.FLUSH, "3 ♥ 4 ♥ 5 ♥ 6 ♥ 8 ♥")
        assert low_start < high_start


class TestSuitTieBreak:
    def test_suits_break_ties(self):
        spades_hearts = make(HandType.PAIR, "Q ♠ Q ♥")
        diamonds_clubs = make(HandType.PAIR, "Q ♦ Q ♣")
        assert spades_hearts != diamonds_clubs
        assert spades_hearts < diamonds_clubs

    def test_identical_hands_equal(self):
        assert make(HandType.PAIR, "Q ♠ Q ♥") == make(HandType.PAIR, "Q ♠ Q ♥")


class TestCompareHands:
    def test_sign(self):
        low = make(HandType.PAIR, "2 ♠ 2 ♥")
        high = make(HandType.PAIR, "3 ♠ 3 ♥")
        assert compare_hands(high, low) > 0
        assert compare_hands(low, high) < 0
        assert compare_hands(low, make(HandType.PAIR, "2 ♠ 2 ♥")) == 0


class TestHandTypeFromName:
    def test_display_name(self):
        assert hand_type_from_name("TwoPair") == HandType.TWO_PAIR

    def test_enum_name(self):
        assert hand_type_from_name("straight_flush") == HandType.STRAIGHT_FLUSH

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown hand type"):
            hand_type_from_name("Quads")
