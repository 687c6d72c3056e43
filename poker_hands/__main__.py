"""CLI entrypoint: python -m poker_hands [FILE]."""

from __future__ import annotations

import argparse
import logging
import sys

from poker_hands.config import LOG_FORMAT, settings_from_env
from poker_hands.errors import PokerInputError
from poker_hands.tournament import ERROR_POLICIES, TIE_POLICIES, MatchConfig, run_match

logger = logging.getLogger("poker_hands")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="poker-hands",
        description="Score two five-card poker hands per line: 'P1 P1 P1 P1 P1 P2 P2 P2 P2 P2'.",
    )
    p.add_argument("file", nargs="?", default="-", help="input file (default: stdin)")
    p.add_argument("--tie-policy", choices=TIE_POLICIES, default=None,
                   help="both: a tie scores for both players; none: for neither")
    p.add_argument("--on-error", choices=ERROR_POLICIES, default=None,
                   help="abort: stop on the first bad line; skip: log it and continue")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR, CRITICAL; anything else falls back to WARNING")
    p.add_argument("-v", "--verbose", action="store_true", help="shorthand for --log-level DEBUG")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = settings_from_env()

    requested = "DEBUG" if args.verbose else (args.log_level or settings.log_level).upper()
    level = requested if requested in LOG_LEVELS else "WARNING"
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)
    if level != requested:
        logger.warning("Unknown log level %r, using WARNING", requested)

    try:
        cfg = MatchConfig(
            tie_policy=args.tie_policy or settings.tie_policy,
            on_error=args.on_error or settings.on_error,
        )
    except ValueError as e:
        logger.error("%s", e)
        return 2

    try:
        if args.file == "-":
            result = run_match(sys.stdin, cfg)
        else:
            with open(args.file, encoding="utf-8") as fh:
                result = run_match(fh, cfg)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 2
    except PokerInputError as e:
        logger.error("%s", e)
        return 1
    except UnicodeDecodeError as e:
        logger.error("Cannot decode %s: %s", args.file, e)
        return 1

    print(f"Player 1: {result.player_one}")
    print(f"Player 2: {result.player_two}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
