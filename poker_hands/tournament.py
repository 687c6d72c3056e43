from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .cards import parse_cards
from .errors import MalformedLineError, PokerInputError
from .poker_eval import Hand, compare_hands, describe, make_hand

logger = logging.getLogger(__name__)

TIE_POLICIES = ("both", "none")
ERROR_POLICIES = ("abort", "skip")


@dataclass(frozen=True)
class MatchConfig:
    # "both": a tie scores a point for each player; "none": for neither.
    tie_policy: str = "both"
    # "abort": first bad line stops the run; "skip": log it and carry on.
    on_error: str = "abort"

    def __post_init__(self) -> None:
        if self.tie_policy not in TIE_POLICIES:
            raise ValueError(f"tie_policy must be one of {TIE_POLICIES}, got {self.tie_policy!r}")
        if self.on_error not in ERROR_POLICIES:
            raise ValueError(f"on_error must be one of {ERROR_POLICIES}, got {self.on_error!r}")


@dataclass(frozen=True)
class LineResult:
    hand_a: Hand
    hand_b: Hand
    outcome: int  # compare_hands(hand_a, hand_b)


@dataclass(frozen=True)
class MatchResult:
    player_one: int
    player_two: int
    ties: int
    hands: int
    skipped: int


def parse_line(line: str) -> tuple[Hand, Hand]:
    tokens = line.split()
    if len(tokens) != 10:
        raise MalformedLineError(line, len(tokens))
    return make_hand(parse_cards(tokens[:5])), make_hand(parse_cards(tokens[5:]))


def play_line(line: str) -> LineResult:
    hand_a, hand_b = parse_line(line)
    return LineResult(hand_a=hand_a, hand_b=hand_b, outcome=compare_hands(hand_a, hand_b))


def run_match(lines: Iterable[str], match_config: MatchConfig | None = None) -> MatchResult:
    """Play every line and tally wins for player one (first five cards) and player two.

    Blank lines are ignored. A malformed line either raises (``on_error="abort"``)
    with its 1-based line number attached, or is logged and counted as skipped.
    """
    cfg = match_config or MatchConfig()

    p1 = p2 = ties = hands = skipped = 0

    for n, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            res = play_line(line)
        except PokerInputError as e:
            e.line_number = n
            if cfg.on_error == "abort":
                raise
            logger.warning("Skipping %s", e)
            skipped += 1
            continue

        hands += 1
        logger.debug(
            "line %d: A=%s B=%s outcome=%d",
            n,
            describe(res.hand_a),
            describe(res.hand_b),
            res.outcome,
        )
        if res.outcome > 0:
            p1 += 1
        elif res.outcome < 0:
            p2 += 1
        else:
            ties += 1
            if cfg.tie_policy == "both":
                p1 += 1
                p2 += 1

    logger.info("Played %d hands (%d ties, %d skipped): %d - %d", hands, ties, skipped, p1, p2)
    return MatchResult(player_one=p1, player_two=p2, ties=ties, hands=hands, skipped=skipped)
