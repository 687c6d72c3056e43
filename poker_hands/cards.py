from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidCardToken

RANKS = "23456789TJQKA"
RANK_VALUES = {r: i + 2 for i, r in enumerate(RANKS)}


@dataclass(frozen=True)
class Card:
    rank: int  # 2..14, Ace high
    suit: str

    def __str__(self) -> str:
        return f"{RANKS[self.rank - 2]}{self.suit}"


def parse_card(token: str) -> Card:
    # Suit is carried through unchecked; only equality within a hand matters.
    if len(token) != 2:
        raise InvalidCardToken(token)
    r, s = token[0], token[1]
    if r not in RANK_VALUES:
        raise InvalidCardToken(token)
    return Card(RANK_VALUES[r], s)


def parse_cards(tokens: Iterable[str]) -> tuple[Card, ...]:
    return tuple(parse_card(t) for t in tokens)
