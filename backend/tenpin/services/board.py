"""Plain-text scoreboard rendering."""
from __future__ import annotations

from typing import Sequence

from ..scoring import FRAMES, Frame, ScoreBoard

CELL_WIDTH = 5
HEADER_WIDTH = 5


def _row(title: str, cells: Sequence[str]) -> str:
    padded = list(cells) + [""] * (FRAMES - len(cells))
    body = "".join(f" {cell:>{CELL_WIDTH}} |" for cell in padded)
    return f"{title:<{HEADER_WIDTH}} |{body}"


def render_board(frames: Sequence[Frame], scoreboard: ScoreBoard) -> str:
    """Render frames and running totals as a three-row table.

    Columns for frames that have not been bowled yet are left blank, as are
    score cells for frames that cannot be scored yet.
    """
    header = _row("Frame", [str(n) for n in range(1, FRAMES + 1)])
    rule = "-" * len(header)
    lines = [
        header,
        rule,
        _row("Rolls", [frame.label() for frame in frames]),
        rule,
        _row("Score", [str(score) for score in scoreboard.cumulative]),
        "",
        f"Total score: {scoreboard.total}",
    ]
    return "\n".join(lines)
