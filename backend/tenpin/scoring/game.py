"""Game controller owning the roll sequence of a single game."""
from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .calculator import ScoreBoard, calculate_scores
from .frames import PINS, Frame, FrameKind
from .segmenter import segment_frames

logger = logging.getLogger(__name__)


class RollSlot(NamedTuple):
    """Where the next roll lands and how many pins are standing for it."""

    frame: int
    roll: int
    pins_standing: int
    # Bonus ball the tenth frame grants after a strike or spare.
    extra: bool = False


class BowlingGame:
    """Records rolls and recomputes frames and scores from them on demand.

    Rolls are expected to be validated before they are recorded; see
    :func:`tenpin.services.validation.validate_roll_sequence`.
    """

    def __init__(self, rolls: Iterable[int] = ()) -> None:
        self._rolls: List[int] = []
        self._frames: List[Frame] = []
        self._scoreboard = ScoreBoard()
        for pins in rolls:
            self.roll(pins)

    def roll(self, pins: int) -> None:
        self._rolls.append(pins)

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def frames(self) -> List[Frame]:
        return list(self._frames)

    @property
    def scoreboard(self) -> ScoreBoard:
        return self._scoreboard

    def process_frames(self) -> List[Frame]:
        self._frames = segment_frames(self._rolls)
        return self.frames

    def calculate_score(self) -> int:
        """Rebuild frames and the scoreboard from scratch and return the total."""
        self.process_frames()
        self._scoreboard = calculate_scores(self._frames, self._rolls)
        return self._scoreboard.total

    def next_roll(self) -> Optional[RollSlot]:
        """Return the slot the next roll fills, or ``None`` once the game is over."""
        frames = segment_frames(self._rolls)
        if not frames:
            return RollSlot(1, 1, PINS)

        last = frames[-1]
        if last.kind is FrameKind.TENTH:
            if last.roll2 is None:
                standing = PINS if last.is_strike else PINS - last.roll1
                return RollSlot(last.number, 2, standing, extra=last.is_strike)
            if last.allows_third_roll and last.roll3 is None:
                if last.is_spare or last.roll2 == PINS:
                    return RollSlot(last.number, 3, PINS, extra=True)
                return RollSlot(last.number, 3, PINS - last.roll2, extra=True)
            return None

        if last.is_pending:
            return RollSlot(last.number, 2, PINS - last.roll1)
        return RollSlot(last.number + 1, 1, PINS)

    @property
    def is_complete(self) -> bool:
        return self.next_roll() is None
