"""Frame variants for ten-pin bowling."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

PINS = 10
FRAMES = 10
# Strikes and spares score a flat ten before look-ahead bonuses.
BASE_SCORE = 10


class FrameKind(str, Enum):
    NORMAL = "normal"
    SPARE = "spare"
    STRIKE = "strike"
    TENTH = "tenth"


@dataclass(frozen=True)
class Frame:
    """A single frame and the rolls it owns.

    ``number`` is 1-based. Rolls that have not been recorded yet are ``None``;
    a strike in frames 1-9 owns only its first roll.
    """

    number: int
    kind: FrameKind
    roll1: int
    roll2: Optional[int] = None
    roll3: Optional[int] = None

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(r for r in (self.roll1, self.roll2, self.roll3) if r is not None)

    @property
    def is_strike(self) -> bool:
        return self.roll1 == PINS

    @property
    def is_spare(self) -> bool:
        return (
            self.roll1 != PINS
            and self.roll2 is not None
            and self.roll1 + self.roll2 == PINS
        )

    @property
    def allows_third_roll(self) -> bool:
        return self.kind is FrameKind.TENTH and (self.is_strike or self.is_spare)

    @property
    def is_pending(self) -> bool:
        """True while the roll that closes the frame is still missing."""
        if self.kind is FrameKind.STRIKE:
            return False
        return self.roll2 is None

    @property
    def is_complete(self) -> bool:
        if self.is_pending:
            return False
        if self.allows_third_roll:
            return self.roll3 is not None
        return True

    def score(self) -> int:
        """Pins credited to the frame itself, without look-ahead bonuses."""
        if self.kind is FrameKind.TENTH:
            return self.roll1 + (self.roll2 or 0) + (self.roll3 or 0)
        if self.kind in (FrameKind.STRIKE, FrameKind.SPARE):
            return BASE_SCORE
        return self.roll1 + (self.roll2 or 0)

    def label(self) -> str:
        if self.kind is FrameKind.STRIKE:
            return "X"
        if self.kind is FrameKind.SPARE:
            return f"{self.roll1} /"
        if self.kind is FrameKind.NORMAL:
            if self.roll2 is None:
                return f"{self.roll1} -"
            return f"{self.roll1} {self.roll2}"
        return " ".join(_tenth_marks(self))


def _mark(pins: int) -> str:
    return "X" if pins == PINS else str(pins)


def _tenth_marks(frame: Frame) -> list[str]:
    marks = [_mark(frame.roll1)]
    if frame.roll2 is None:
        return marks
    marks.append("/" if frame.is_spare else _mark(frame.roll2))
    if frame.roll3 is None:
        return marks
    # The third ball is thrown at a fresh rack unless the second ball left pins.
    fresh_rack = frame.is_spare or frame.roll2 == PINS
    if fresh_rack:
        marks.append(_mark(frame.roll3))
    elif frame.roll2 + frame.roll3 == PINS:
        marks.append("/")
    else:
        marks.append(str(frame.roll3))
    return marks


def build_frame(
    position: int,
    roll1: int,
    roll2: Optional[int] = None,
    roll3: Optional[int] = None,
) -> Frame:
    """Pick the frame variant for a 0-based ``position`` and its rolls.

    The tenth position always yields a tenth frame, even for a strike, since
    its bonus balls are owned by the frame instead of looked up afterwards.
    """
    number = position + 1
    if position == FRAMES - 1:
        return Frame(number, FrameKind.TENTH, roll1, roll2, roll3)
    if roll1 == PINS:
        return Frame(number, FrameKind.STRIKE, roll1)
    if roll2 is not None and roll1 + roll2 == PINS:
        return Frame(number, FrameKind.SPARE, roll1, roll2)
    return Frame(number, FrameKind.NORMAL, roll1, roll2)
