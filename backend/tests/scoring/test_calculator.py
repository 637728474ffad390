import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from tenpin.scoring import calculate_scores, segment_frames


def _score(rolls):
    return calculate_scores(segment_frames(rolls), rolls)


@pytest.mark.parametrize(
    "rolls",
    [
        [0] * 20,
        [9, 0] * 10,
        [0, 9] * 10,
        [4, 5] * 10,
        [1, 2, 3, 4, 5, 4, 0, 9, 8, 1, 7, 2, 6, 3, 4, 5, 2, 7, 0, 0],
        [3, 3, 8, 0, 0, 0, 2, 6, 1, 1, 5, 4, 9, 0, 7, 1, 0, 3, 6, 2],
    ],
    ids=["gutters", "nine-zero", "zero-nine", "four-five", "mixed", "mixed-low"],
)
def test_open_frames_sum_all_rolls(rolls):
    board = _score(rolls)
    assert board.total == sum(rolls)
    assert len(board.cumulative) == 10


def test_perfect_game_is_300():
    board = _score([10] * 12)
    assert board.cumulative == (30, 60, 90, 120, 150, 180, 210, 240, 270, 300)
    assert board.total == 300


def test_spare_bonus_counts_next_roll():
    rolls = [5, 5, 3] + [0] * 17
    board = _score(rolls)
    assert board.cumulative[0] == 13
    assert board.cumulative[1] == 16
    assert board.total == 16


def test_example_game(example_rolls):
    board = _score(example_rolls)
    assert board.cumulative == (5, 14, 29, 49, 60, 61, 77, 97, 117, 133)
    assert board.total == 133
    assert board.frame_scores == (5, 9, 15, 20, 11, 1, 16, 20, 20, 16)


def test_tenth_frame_strike_has_no_external_bonus():
    board = _score([0, 0] * 9 + [10, 4, 3])
    assert board.frame_scores[9] == 17
    assert board.total == 17


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([9, 1] * 9 + [9, 1, 9], (19, 38, 57, 76, 95, 114, 133, 152, 171, 190)),
        ([0, 0] * 8 + [7, 3] + [10, 10, 10], (0, 0, 0, 0, 0, 0, 0, 0, 20, 50)),
        ([10, 7, 3, 7, 2] + [0, 0] * 7, (20, 37, 46, 46, 46, 46, 46, 46, 46, 46)),
        ([0, 0] * 8 + [10] + [10, 10, 10], (0, 0, 0, 0, 0, 0, 0, 0, 30, 60)),
    ],
    ids=["all-spares", "spare-into-tenth", "strike-then-spare", "strike-into-tenth"],
)
def test_complete_games(rolls, expected):
    assert _score(rolls).cumulative == expected


def test_single_roll_scores_nothing():
    board = _score([7])
    assert board.cumulative == ()
    assert board.total == 0


def test_missing_bonus_rolls_count_as_zero():
    assert _score([10]).cumulative == (10,)
    assert _score([10, 3]).cumulative == (13,)
    assert _score([4, 6]).cumulative == (10,)


def test_pending_frame_stops_scoring():
    board = _score([10, 3])
    # The strike is scored with the one bonus ball available; frame 2 waits.
    assert len(board.cumulative) == 1
    assert _score([3, 4, 5]).cumulative == (7,)


def test_tenth_frame_owing_bonus_is_scored_without_it():
    board = _score([0, 0] * 9 + [10, 4])
    assert board.cumulative[-1] == 14
    assert len(board.cumulative) == 10


def test_scoring_is_repeatable(example_rolls):
    assert _score(example_rolls) == _score(example_rolls)
