import pytest

from adventpuzzles.y2023_day03 import main, part1, part2

INPUT = (
    "467..114..\n"
    "...*......\n"
    "..35..633.\n"
    "......#...\n"
    "617*......\n"
    ".....+.58.\n"
    "..592.....\n"
    "......755.\n"
    "...$.*....\n"
    ".664.598.."
)


def test_part1_small():
    assert part1(INPUT) == 4361


def test_obvious():
    cont_input = "...&3..501.13..195......&.........\n........./....*.........11........"
    assert part1(cont_input) == 710


def test_part2():
    assert part2(INPUT) == 467835


def test_number_at_line_end_counts():
    assert part1("..*\n.12") == 12


def test_gear_needs_exactly_two_numbers():
    assert part2("1.2\n.*.\n3..") == 0
    assert part2("1.2\n.*.\n...") == 2


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part1("")
    with pytest.raises(ValueError):
        part2("")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(INPUT)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Part 1 answer: 4361",
        "Part 2 answer: 467835",
    ]