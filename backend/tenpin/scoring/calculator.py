"""Cumulative scoring with strike and spare look-ahead."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .frames import Frame, FrameKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBoard:
    """Running totals, one per scored frame."""

    cumulative: Tuple[int, ...] = ()
    total: int = 0

    @property
    def frame_scores(self) -> Tuple[int, ...]:
        scores = []
        previous = 0
        for running in self.cumulative:
            scores.append(running - previous)
            previous = running
        return tuple(scores)


def _roll_at(rolls: Sequence[int], index: int) -> int:
    # Bonus balls that have not been thrown yet count as zero.
    if index < len(rolls):
        return rolls[index]
    return 0


def strike_bonus(rolls: Sequence[int], roll_index: int) -> int:
    return _roll_at(rolls, roll_index + 1) + _roll_at(rolls, roll_index + 2)


def spare_bonus(rolls: Sequence[int], roll_index: int) -> int:
    return _roll_at(rolls, roll_index + 2)


def calculate_scores(frames: Sequence[Frame], rolls: Sequence[int]) -> ScoreBoard:
    """Score ``frames`` against the raw ``rolls`` they were cut from.

    Bonuses are read from the roll sequence by position because a strike can
    reach into the next two frames, or into the tenth frame's extra balls.
    Scoring stops at a frame that is still waiting for its closing roll.
    """
    total = 0
    roll_index = 0
    cumulative: List[int] = []

    for frame in frames:
        if frame.is_pending:
            break

        frame_score = frame.score()
        if frame.kind is FrameKind.STRIKE:
            frame_score += strike_bonus(rolls, roll_index)
        elif frame.kind is FrameKind.SPARE:
            frame_score += spare_bonus(rolls, roll_index)

        total += frame_score
        cumulative.append(total)
        roll_index += 1 if frame.is_strike else 2

    logger.debug("scored %d frame(s), total %d", len(cumulative), total)
    return ScoreBoard(cumulative=tuple(cumulative), total=total)
