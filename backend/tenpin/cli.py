#!/usr/bin/env python3
"""Score a bowling game from the console.

Interactive by default: prompts for each roll, re-asking on bad input, then
prints the scoreboard. Pass ``--rolls`` to score a fixed sequence instead::

    python -m tenpin.cli --rolls 10 10 10 10 10 10 10 10 10 10 10 10
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from .config import configure_logging
from .scoring import BowlingGame, RollSlot
from .services import ValidationError, parse_roll, render_board, validate_roll_sequence

logger = logging.getLogger(__name__)

EXAMPLE_ROLLS = (1, 4, 4, 5, 6, 4, 5, 5, 10, 0, 1, 7, 3, 6, 4, 10, 2, 8, 6)


def _prompt(slot: RollSlot) -> str:
    if slot.extra:
        return "Enter Extra Roll: "
    return f"Enter Roll {slot.roll}: "


def collect_rolls(
    game: BowlingGame,
    read: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> BowlingGame:
    """Prompt for rolls until the game is over or input runs out."""
    out = out or sys.stdout
    err = err or sys.stderr
    announced = 0
    while True:
        slot = game.next_roll()
        if slot is None:
            break
        if slot.frame != announced:
            print(f"-----> Roll for frame {slot.frame}", file=out)
            announced = slot.frame
        try:
            raw = read(_prompt(slot))
        except EOFError:
            logger.info("input closed before the game was over")
            break
        try:
            pins = parse_roll(raw, pins_standing=slot.pins_standing)
        except ValidationError:
            print(
                f"Invalid input! Enter a number between 0 and {slot.pins_standing}.",
                file=err,
            )
            continue
        game.roll(pins)
    return game


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score a single game of ten-pin bowling and print the scoreboard."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--rolls",
        nargs="+",
        metavar="PINS",
        help="Pins knocked down by each roll, in order.",
    )
    source.add_argument(
        "--example",
        action="store_true",
        help="Score a built-in sample game.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (defaults to the LOG_LEVEL environment variable).",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.example:
        game = BowlingGame(EXAMPLE_ROLLS)
    elif args.rolls:
        try:
            game = BowlingGame(validate_roll_sequence(args.rolls))
        except ValidationError as exc:
            print(f"error: {exc.detail}", file=sys.stderr)
            return 2
    else:
        game = collect_rolls(BowlingGame())

    game.calculate_score()
    print()
    print(render_board(game.frames, game.scoreboard))
    return 0


if __name__ == "__main__":
    sys.exit(main())
