from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, WithJsonSchema

# Items are left as received; validate_roll_sequence rejects booleans and
# fractions. Only the documented schema is narrowed.
RollValue = Annotated[
    Any,
    WithJsonSchema(
        {
            "anyOf": [
                {"type": "integer", "minimum": 0, "maximum": 10},
                {"type": "string", "pattern": "^\\s*[0-9]+\\s*$"},
            ]
        }
    ),
]


class RollsIn(BaseModel):
    """Rolls of a single game, in the order they were bowled."""

    rolls: List[RollValue] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class FrameOut(BaseModel):
    frame: int
    kind: str
    rolls: List[int]
    label: str
    pending: bool
    score: Optional[int] = None
    cumulative: Optional[int] = None


class RollSlotOut(BaseModel):
    frame: int
    roll: int
    pinsStanding: int
    extra: bool = False


class GameScoreOut(BaseModel):
    rolls: List[int]
    frames: List[FrameOut]
    scores: List[int]
    total: int
    complete: bool
    nextRoll: Optional[RollSlotOut] = None
