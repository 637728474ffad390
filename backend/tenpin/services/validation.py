import re
from typing import Any, List, Sequence

from ..scoring import PINS, BowlingGame

# Plain ASCII digits: no signs, underscores or non-ASCII numerals.
_ROLL_TEXT = re.compile(r"[0-9]+")


class ValidationError(Exception):
    """Raised when submitted rolls are invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def parse_roll(raw: Any, *, pins_standing: int = PINS) -> int:
    """Coerce a single roll to an int between 0 and ``pins_standing``.

    Accepts ints and numeric strings (surrounding whitespace is ignored).
    Booleans and floats with a fractional part are rejected.
    """

    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(raw, bool):
        raise ValidationError("Roll must be an integer (not a boolean).")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValidationError("Roll must be a whole number of pins.")

    if isinstance(raw, str):
        raw = raw.strip()
        if not _ROLL_TEXT.fullmatch(raw):
            raise ValidationError(
                f"Roll must be an integer between 0 and {pins_standing}."
            )

    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Roll must be an integer between 0 and {pins_standing}.")

    if value < 0 or value > pins_standing:
        raise ValidationError(f"Roll must be between 0 and {pins_standing}.")
    return value


def validate_roll_sequence(rolls: Sequence[Any]) -> List[int]:
    """Validate a game's rolls and return them as ints.

    Rules:
    - ``rolls`` must be a list or tuple (strings are rejected)
    - Each roll must be an integer between 0 and 10
    - Rolls in one frame cannot knock down more pins than are standing
    - The tenth frame gets a third ball only after a strike or spare
    - No rolls are allowed once the game is over

    An incomplete game is valid.
    """

    if not isinstance(rolls, (list, tuple)):
        raise ValidationError("Rolls must be provided as a list of integers.")

    game = BowlingGame()
    normalized: List[int] = []
    for index, raw in enumerate(rolls, start=1):
        slot = game.next_roll()
        if slot is None:
            raise ValidationError(f"Roll #{index} comes after the game is over.")
        try:
            value = parse_roll(raw)
        except ValidationError as exc:
            raise ValidationError(f"Roll #{index}: {exc.detail}")
        if value > slot.pins_standing:
            raise ValidationError(
                f"Roll #{index} knocks down {value} pins but only "
                f"{slot.pins_standing} are standing in frame {slot.frame}."
            )
        game.roll(value)
        normalized.append(value)

    return normalized
