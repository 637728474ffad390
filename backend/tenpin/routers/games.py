# backend/tenpin/routers/games.py
import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..exceptions import InvalidRollSequence
from ..schemas import FrameOut, GameScoreOut, RollSlotOut, RollsIn
from ..scoring import BowlingGame
from ..services import ValidationError, render_board, validate_roll_sequence

logger = logging.getLogger(__name__)

# Resource-only prefix; versioning is added in main.py
router = APIRouter(prefix="/games", tags=["games"])


def _load_game(body: RollsIn) -> BowlingGame:
    try:
        rolls = validate_roll_sequence(body.rolls)
    except ValidationError as exc:
        logger.info("rejected roll sequence: %s", exc.detail)
        raise InvalidRollSequence(exc.detail)
    game = BowlingGame(rolls)
    game.calculate_score()
    return game


# POST /api/v0/games/score
@router.post("/score", response_model=GameScoreOut)
def score_game(body: RollsIn) -> GameScoreOut:
    game = _load_game(body)
    board = game.scoreboard
    frame_scores = board.frame_scores

    frames: list[FrameOut] = []
    for index, frame in enumerate(game.frames):
        scored = index < len(board.cumulative)
        frames.append(
            FrameOut(
                frame=frame.number,
                kind=frame.kind.value,
                rolls=list(frame.rolls),
                label=frame.label(),
                pending=frame.is_pending,
                score=frame_scores[index] if scored else None,
                cumulative=board.cumulative[index] if scored else None,
            )
        )

    slot = game.next_roll()
    next_roll = None
    if slot is not None:
        next_roll = RollSlotOut(
            frame=slot.frame,
            roll=slot.roll,
            pinsStanding=slot.pins_standing,
            extra=slot.extra,
        )

    return GameScoreOut(
        rolls=list(game.rolls),
        frames=frames,
        scores=list(board.cumulative),
        total=board.total,
        complete=slot is None,
        nextRoll=next_roll,
    )


# POST /api/v0/games/board
@router.post("/board", response_class=PlainTextResponse)
def game_board(body: RollsIn) -> str:
    game = _load_game(body)
    return render_board(game.frames, game.scoreboard)
