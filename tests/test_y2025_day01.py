from itertools import islice

import pytest

from adventpuzzles.y2025_day01 import Dial, part1, part2

TEST = """L68
L30
R48
L5
R60
L55
L1
L99
R14
L82"""


def test_part1():
    assert part1(TEST) == 3


def test_part2():
    assert part2(TEST) == 6


def test_dial_starts_at_fifty():
    dial = Dial()
    assert dial.value == 50
    assert dial.points_to_zero_times == 0


def test_right_wraps_without_counting():
    dial = Dial(99)
    assert dial.right() == 0
    assert dial.points_to_zero_times == 0


def test_left_counts_zero():
    dial = Dial(1)
    assert dial.left() == 0
    assert dial.points_to_zero_times == 1
    assert dial.left() == 99
    assert dial.points_to_zero_times == 1


def test_right_by_counts_landing_on_zero():
    dial = Dial(50)
    assert dial.right_by(50) == 0
    assert dial.points_to_zero_times == 1
    assert dial.right_by(250) == 50
    assert dial.points_to_zero_times == 1


def test_left_by_wraps():
    dial = Dial(50)
    assert dial.left_by(150) == 0
    assert dial.points_to_zero_times == 1
    assert dial.left_by(1) == 99


def test_iteration_turns_right():
    dial = Dial(98)
    assert list(islice(dial, 4)) == [99, 0, 1, 2]


def test_bad_direction():
    with pytest.raises(ValueError):
        part1("X5")


def test_bad_steps():
    with pytest.raises(ValueError):
        part1("Labc")


def test_empty_line_rejected():
    with pytest.raises(ValueError):
        part2("L5\n\nR3")