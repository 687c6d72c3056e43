"""Classify and compare five-card poker hands."""

from .cards import Card, parse_card
from .errors import InvalidCardToken, MalformedLineError, PokerInputError
from .poker_eval import Classification, Hand, classify, compare_hands, make_hand
from .tournament import MatchConfig, MatchResult, run_match

__all__ = [
    "Card",
    "Classification",
    "Hand",
    "InvalidCardToken",
    "MalformedLineError",
    "MatchConfig",
    "MatchResult",
    "PokerInputError",
    "classify",
    "compare_hands",
    "make_hand",
    "parse_card",
    "run_match",
]
