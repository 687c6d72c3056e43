from __future__ import annotations

import itertools

import pytest

from poker_hands.cards import parse_cards
from poker_hands.poker_eval import (
    CATEGORIES,
    Classification,
    Hand,
    classify,
    compare_hands,
    describe,
    make_hand,
)


def hand(s: str) -> Hand:
    return make_hand(parse_cards(s.split()))


def cls(s: str) -> Classification:
    return classify(parse_cards(s.split()))


# One hand per category, strongest first.
CATEGORY_CASES = [
    ("TH JH QH KH AH", 10, 14, "royal_flush"),
    ("5C 6C 7C 8C 9C", 9, 9, "straight_flush"),
    ("7S 7H 7D 7C 2H", 8, 7, "four_of_a_kind"),
    ("3S 3H 3D 9C 9H", 7, 3, "full_house"),
    ("2D 6D 7D TD QD", 6, 12, "flush"),
    ("4S 5H 6D 7C 8H", 5, 8, "straight"),
    ("2D 9C AS AH AC", 4, 14, "three_of_a_kind"),
    ("4S 4H KD KC 9H", 3, 13, "two_pair"),
    ("5H 5C 6S 7S KD", 2, 5, "pair"),
    ("2H 5C 8S JD KH", 1, 13, "high_card"),
]


@pytest.mark.parametrize("cards,category,tiebreak,name", CATEGORY_CASES)
def test_classify_each_category(cards: str, category: int, tiebreak: int, name: str):
    c = cls(cards)
    assert c == Classification(category, tiebreak)
    assert c.name == name
    assert CATEGORIES[category - 1] == name


@pytest.mark.parametrize("cards,category,tiebreak,name", CATEGORY_CASES)
def test_classification_ignores_card_order(cards: str, category: int, tiebreak: int, name: str):
    parsed = parse_cards(cards.split())
    for perm in itertools.permutations(parsed):
        assert classify(perm) == Classification(category, tiebreak)


def test_royal_flush_is_not_reported_as_straight_flush_or_flush():
    assert cls("AS KS QS JS TS").category == 10


def test_straight_flush_beats_flush_and_straight_in_cascade():
    assert cls("9D TD JD QD KD") == Classification(9, 13)


def test_unsuited_broadway_is_a_straight():
    assert cls("TH JH QH KH AS") == Classification(5, 14)


def test_four_of_a_kind_is_not_a_pair_or_trips():
    assert cls("KS KH KD KC 2H").category == 8


def test_full_house_is_not_trips_or_pair():
    c = cls("QS QH 4D 4C QD")
    assert c == Classification(7, 12)


def test_full_house_tiebreak_is_the_triple_even_when_pair_is_higher():
    assert cls("2S 2H 2D AC AH") == Classification(7, 2)


def test_two_pair_tiebreak_is_higher_pair():
    assert cls("9S 9H 3D 3C AH") == Classification(3, 9)


def test_ace_is_always_high_so_wheel_is_not_a_straight():
    assert cls("AH 2C 3D 4S 5H") == Classification(1, 14)


def test_flush_with_gap_is_not_a_straight_flush():
    assert cls("2S 3S 4S 5S 7S") == Classification(6, 7)


def test_classify_requires_five_cards():
    with pytest.raises(ValueError):
        classify(parse_cards("2S 3S 4S 5S".split()))


def test_hand_keeps_original_card_order():
    h = hand("KD 2C 9H 2S AD")
    assert [str(c) for c in h.cards] == ["KD", "2C", "9H", "2S", "AD"]
    assert h.ranks_desc == (14, 13, 9, 2, 2)


def test_describe():
    assert describe(hand("5H 5C 6S 7S KD")) == "5H 5C 6S 7S KD -> pair (5)"


def test_higher_category_wins():
    assert compare_hands(hand("2D 6D 7D TD QD"), hand("2D 9C AS AH AC")) == 1
    assert compare_hands(hand("2D 9C AS AH AC"), hand("2D 6D 7D TD QD")) == -1


def test_same_category_higher_tiebreak_wins():
    assert compare_hands(hand("5H 5C 6S 7S KD"), hand("2C 3S 8S 8D TD")) == -1


def test_same_pair_decided_by_kickers_descending():
    a = hand("4D 6S 9H QH QC")
    b = hand("3D 6D 7H QD QS")
    assert compare_hands(a, b) == 1
    assert compare_hands(b, a) == -1


def test_last_kicker_decides():
    a = hand("2H 5C 8S JD KH")
    b = hand("3C 5D 8H JS KD")
    assert compare_hands(a, b) == -1


def test_true_tie_ignores_suits():
    a = hand("TH KH QH JH AH")
    b = hand("TS KS QS JS AS")
    assert compare_hands(a, b) == 0
    c = hand("2H 5C 8S JD KH")
    d = hand("2S 5D 8H JC KS")
    assert compare_hands(c, d) == 0


RANKED = [
    "2H 5C 8S JD KH",
    "5H 5C 6S 7S KD",
    "4S 4H KD KC 9H",
    "2D 9C AS AH AC",
    "4S 5H 6D 7C 8H",
    "2D 6D 7D TD QD",
    "3S 3H 3D 9C 9H",
    "7S 7H 7D 7C 2H",
    "5C 6C 7C 8C 9C",
    "TH JH QH KH AH",
]


def test_comparator_is_reflexive():
    for s in RANKED:
        assert compare_hands(hand(s), hand(s)) == 0


def test_comparator_is_antisymmetric():
    hands = [hand(s) for s in RANKED]
    for a, b in itertools.product(hands, repeat=2):
        assert compare_hands(a, b) == -compare_hands(b, a)


def test_comparator_is_transitive():
    hands = [hand(s) for s in RANKED]
    for a, b, c in itertools.combinations(hands, 3):
        # combinations keep RANKED order, weakest first
        assert compare_hands(b, a) == 1
        assert compare_hands(c, b) == 1
        assert compare_hands(c, a) == 1
