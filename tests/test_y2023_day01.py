import pytest

from adventpuzzles.y2023_day01 import left_digit, main, part_1, part_2, right_digit

DIGITS_ONLY = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"

DIGITS_AND_WORDS = (
    "two1nine\n"
    "eightwothree\n"
    "abcone2threexyz\n"
    "xtwone3four\n"
    "4nineeightseven2\n"
    "zoneight234\n"
    "7pqrstsixteen"
)


def test_part_1():
    assert part_1(DIGITS_ONLY) == 142


def test_part_2():
    assert part_2(DIGITS_AND_WORDS) == 281


@pytest.mark.parametrize(
    "line, left, right",
    [
        ("two1nine", 2, 9),
        ("eightwothree", 8, 3),
        ("abcone2threexyz", 1, 3),
        ("xtwone3four", 2, 4),
        ("4nineeightseven2", 4, 2),
        ("zoneight234", 1, 4),
        ("7pqrstsixteen", 7, 6),
    ],
)
def test_left_and_right_digits(line, left, right):
    assert left_digit(line) == left
    assert right_digit(line) == right


def test_no_digit_gives_zero():
    assert left_digit("abc") == 0
    assert right_digit("abc") == 0


def test_overlapping_words_at_end():
    assert right_digit("xoneight") == 8
    assert left_digit("xoneight") == 1


def test_part_1_without_digits_raises():
    with pytest.raises(ValueError):
        part_1("abc")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DIGITS_ONLY)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Part 1 answer: 142", "Part 2 answer: 142"]