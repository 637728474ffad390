"""Ten-pin bowling scoring engine."""

from .calculator import ScoreBoard, calculate_scores
from .frames import FRAMES, PINS, Frame, FrameKind, build_frame
from .game import BowlingGame, RollSlot
from .segmenter import segment_frames

__all__ = [
    "BowlingGame",
    "FRAMES",
    "Frame",
    "FrameKind",
    "PINS",
    "RollSlot",
    "ScoreBoard",
    "build_frame",
    "calculate_scores",
    "segment_frames",
]
