import pytest

from adventpuzzles.y2023_day04 import Card, CardParseError, main, parse_cards, part1, part2

TEST = (
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53\n"
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19\n"
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1\n"
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83\n"
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36\n"
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"
)


def test_part1():
    assert part1(TEST) == 13


def test_multiple_spaces():
    assert part1("Card    1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53") == 8


def test_part2():
    assert part2(TEST) == 30


def test_parse_sorts_numbers():
    card = Card.parse("Card 7: 5 3 9 | 8 1 3")
    assert card.id == 7
    assert card.win == (3, 5, 9)
    assert card.hand == (1, 3, 8)
    assert str(card) == "Card 7: [3, 5, 9] | [1, 3, 8]"


def test_points_and_matches():
    cards = parse_cards(TEST)
    assert [card.matches_count() for card in cards] == [4, 2, 2, 1, 0, 0]
    assert [card.points() for card in cards] == [8, 2, 2, 1, 0, 0]


def test_missing_colon_raises():
    with pytest.raises(CardParseError):
        Card.parse("Card 1 41 | 41")


def test_missing_pipe_raises():
    with pytest.raises(CardParseError):
        Card.parse("Card 1: 41 48")


def test_bad_number_raises():
    with pytest.raises(CardParseError):
        Card.parse("Card 1: 41 x | 41")
    with pytest.raises(CardParseError):
        Card.parse("Card x: 41 | 41")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(TEST)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Part 1 answer: 13", "Part 2 answer: 30"]