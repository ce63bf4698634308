import pytest

from adventpuzzles.y2024_day02 import is_report_valid, part1, part2

INPUT = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""


def test_it_works():
    assert part1(INPUT) == 2


def test_it_works2():
    assert part1("10 7 4 2 1") == 1


def test_it_works3():
    assert part2(INPUT) == 4


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([10, 7, 4, 2, 1], True),
        ([5], False),
        ([], False),
    ],
)
def test_is_report_valid(report, expected):
    assert is_report_valid(report) is expected


def test_part2_never_below_part1():
    assert part2(INPUT) >= part1(INPUT)


def test_negative_level_rejected():
    with pytest.raises(ValueError):
        part1("1 -2 3")