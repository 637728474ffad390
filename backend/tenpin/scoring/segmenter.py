"""Split a flat roll sequence into bowling frames."""
from __future__ import annotations

import logging
from typing import List, Sequence

from .frames import FRAMES, PINS, Frame, build_frame

logger = logging.getLogger(__name__)


def segment_frames(rolls: Sequence[int]) -> List[Frame]:
    """Return up to ten frames for ``rolls``.

    A game in progress yields fewer frames, and the last one may be missing
    its closing roll. Rolls past the tenth frame are ignored.
    """
    frames: List[Frame] = []
    i = 0

    while len(frames) < FRAMES - 1 and i < len(rolls):
        r1 = rolls[i]
        i += 1
        r2 = None
        if r1 != PINS and i < len(rolls):
            r2 = rolls[i]
            i += 1
        frames.append(build_frame(len(frames), r1, r2))

    if i < len(rolls):
        r1 = rolls[i]
        i += 1
        r2 = None
        r3 = None
        if i < len(rolls):
            r2 = rolls[i]
            i += 1
            if i < len(rolls) and (r1 == PINS or r1 + r2 == PINS):
                r3 = rolls[i]
                i += 1
        frames.append(build_frame(FRAMES - 1, r1, r2, r3))

    if i < len(rolls):
        logger.debug("ignoring %d roll(s) past the tenth frame", len(rolls) - i)
    logger.debug("segmented %d roll(s) into %d frame(s)", len(rolls), len(frames))
    return frames
