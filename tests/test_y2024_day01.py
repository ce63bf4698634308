import pytest

from adventpuzzles.y2024_day01 import part1, part2

SAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3"""


def test_part1_sample():
    assert part1(SAMPLE) == 11


def test_part2_sample():
    assert part2(SAMPLE) == 31


def test_part1_identical_columns_is_zero():
    assert part1("5 5\n1 1\n9 9") == 0


def test_part1_same_multisets_is_zero():
    assert part1("1 3\n2 1\n3 2") == 0


def test_part1_swapping_columns_keeps_result():
    swapped = "\n".join(" ".join(reversed(line.split())) for line in SAMPLE.splitlines())
    assert part1(swapped) == part1(SAMPLE)


def test_part2_no_common_ids_is_zero():
    assert part2("1 2\n3 4") == 0


def test_extra_columns_are_ignored():
    assert part1(SAMPLE.replace("\n", " 100\n")) == part1(SAMPLE)


def test_missing_column_raises():
    with pytest.raises(ValueError):
        part1("1\n2 3")