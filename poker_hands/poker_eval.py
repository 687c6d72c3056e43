from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .cards import Card

CATEGORIES = [
    "high_card",
    "pair",
    "two_pair",
    "three_of_a_kind",
    "straight",
    "flush",
    "full_house",
    "four_of_a_kind",
    "straight_flush",
    "royal_flush",
]

HIGH_CARD = 1
PAIR = 2
TWO_PAIR = 3
THREE_OF_A_KIND = 4
STRAIGHT = 5
FLUSH = 6
FULL_HOUSE = 7
FOUR_OF_A_KIND = 8
STRAIGHT_FLUSH = 9
ROYAL_FLUSH = 10


@dataclass(frozen=True)
class Classification:
    category: int  # 1 (high card) .. 10 (royal flush)
    tiebreak: int

    @property
    def name(self) -> str:
        return CATEGORIES[self.category - 1]


@dataclass(frozen=True)
class Hand:
    cards: tuple[Card, ...]
    classification: Classification

    @property
    def category(self) -> int:
        return self.classification.category

    @property
    def tiebreak(self) -> int:
        return self.classification.tiebreak

    @property
    def ranks_desc(self) -> tuple[int, ...]:
        return tuple(sorted((c.rank for c in self.cards), reverse=True))


def _rank_counts(ranks: Sequence[int]) -> list[int]:
    # counts[rank - 2] for ranks 2..14
    counts = [0] * 13
    for r in ranks:
        counts[r - 2] += 1
    return counts


def _ranks_with_count(counts: list[int], n: int) -> list[int]:
    return [i + 2 for i, cnt in enumerate(counts) if cnt == n]


def classify(cards: Sequence[Card]) -> Classification:
    """Classify five cards into a category and the rank that breaks ties within it.

    Categories are tested strongest first and the first match wins, so a
    four of a kind is never reported as a pair and a royal flush is never
    reported as a plain flush.
    """
    if len(cards) != 5:
        raise ValueError(f"classify requires 5 cards, got {len(cards)}")

    ranks = sorted(c.rank for c in cards)
    counts = _rank_counts(ranks)
    high = ranks[-1]

    is_flush = len({c.suit for c in cards}) == 1
    is_straight = all(ranks[i + 1] == ranks[i] + 1 for i in range(4))

    quads = _ranks_with_count(counts, 4)
    trips = _ranks_with_count(counts, 3)
    pairs = _ranks_with_count(counts, 2)

    if is_flush and is_straight and ranks[0] == 10:
        return Classification(ROYAL_FLUSH, 14)

    if is_flush and is_straight:
        return Classification(STRAIGHT_FLUSH, high)

    if quads:
        return Classification(FOUR_OF_A_KIND, quads[0])

    if trips and pairs:
        return Classification(FULL_HOUSE, trips[0])

    if is_flush:
        return Classification(FLUSH, high)

    if is_straight:
        return Classification(STRAIGHT, high)

    if trips:
        return Classification(THREE_OF_A_KIND, trips[0])

    if len(pairs) == 2:
        return Classification(TWO_PAIR, max(pairs))

    if len(pairs) == 1:
        return Classification(PAIR, pairs[0])

    return Classification(HIGH_CARD, high)


def make_hand(cards: Sequence[Card]) -> Hand:
    cards = tuple(cards)
    return Hand(cards=cards, classification=classify(cards))


def compare_hands(a: Hand, b: Hand) -> int:
    """Return 1 if ``a`` beats ``b``, -1 if ``b`` beats ``a`` and 0 on a true tie.

    Category decides first, then the category's tiebreak rank, then every
    card rank from highest to lowest. Suits never break ties.
    """
    if a.category != b.category:
        return 1 if a.category > b.category else -1
    if a.tiebreak != b.tiebreak:
        return 1 if a.tiebreak > b.tiebreak else -1
    for ra, rb in zip(a.ranks_desc, b.ranks_desc):
        if ra != rb:
            return 1 if ra > rb else -1
    return 0


def describe(hand: Hand) -> str:
    cards = " ".join(str(c) for c in hand.cards)
    return f"{cards} -> {hand.classification.name} ({hand.tiebreak})"
