import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from tenpin.scoring import BowlingGame, FrameKind, RollSlot


def test_calculate_score_recomputes_from_rolls(example_rolls):
    game = BowlingGame()
    for pins in example_rolls:
        game.roll(pins)
    assert game.calculate_score() == 133
    assert len(game.frames) == 10
    assert game.frames[8].kind is FrameKind.STRIKE
    assert game.scoreboard.total == 133
    assert game.is_complete


def test_repeated_scoring_is_idempotent(example_rolls):
    game = BowlingGame(example_rolls)
    first_total = game.calculate_score()
    first_frames = game.frames
    first_board = game.scoreboard
    assert game.calculate_score() == first_total
    assert game.frames == first_frames
    assert game.scoreboard == first_board


def test_scores_follow_appended_rolls():
    game = BowlingGame([10])
    assert game.calculate_score() == 10
    game.roll(3)
    game.roll(4)
    assert game.calculate_score() == 24
    assert game.scoreboard.cumulative == (17, 24)


def test_rolls_view_is_read_only():
    game = BowlingGame([3, 4])
    assert game.rolls == (3, 4)
    assert isinstance(game.rolls, tuple)


def test_scoreboard_is_empty_before_scoring():
    game = BowlingGame([3, 4])
    assert game.scoreboard.total == 0
    assert game.frames == []


@pytest.mark.parametrize(
    "rolls, slot",
    [
        ([], RollSlot(1, 1, 10)),
        ([3], RollSlot(1, 2, 7)),
        ([3, 4], RollSlot(2, 1, 10)),
        ([10], RollSlot(2, 1, 10)),
        ([0, 0] * 9, RollSlot(10, 1, 10)),
        ([0, 0] * 9 + [10], RollSlot(10, 2, 10, extra=True)),
        ([0, 0] * 9 + [10, 4], RollSlot(10, 3, 6, extra=True)),
        ([0, 0] * 9 + [10, 10], RollSlot(10, 3, 10, extra=True)),
        ([0, 0] * 9 + [0], RollSlot(10, 2, 10)),
        ([0, 0] * 9 + [6, 4], RollSlot(10, 3, 10, extra=True)),
        ([0, 0] * 9 + [6, 3], None),
        ([10] * 12, None),
    ],
    ids=[
        "new-game",
        "second-ball",
        "next-frame",
        "after-strike",
        "tenth-first-ball",
        "tenth-after-strike",
        "tenth-strike-then-four",
        "tenth-double",
        "tenth-gutter",
        "tenth-spare",
        "tenth-open",
        "perfect-game",
    ],
)
def test_next_roll(rolls, slot):
    assert BowlingGame(rolls).next_roll() == slot


def test_incomplete_game_is_not_complete():
    game = BowlingGame([10] * 11)
    assert not game.is_complete
    assert game.calculate_score() == 290
