import pytest

from adventpuzzles.y2023_day02 import CubeSet, main, parse_game, part1, part2

BAG_LIMIT = CubeSet(red=12, green=13, blue=14)

SAMPLE = (
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green\n"
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue\n"
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red\n"
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red\n"
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"
)


def test_part1():
    assert part1(SAMPLE, BAG_LIMIT) == 8


@pytest.mark.parametrize("index, expected", [(0, 48), (1, 12), (2, 1560), (3, 630), (4, 36)])
def test_single_game_power(index, expected):
    assert part2(SAMPLE.splitlines()[index]) == expected


def test_part2():
    assert part2(SAMPLE) == 2286


def test_parse_game_fields():
    game = parse_game(SAMPLE.splitlines()[0])
    assert game.id == 1
    assert game.sets == (
        CubeSet(red=4, blue=3),
        CubeSet(red=1, green=2, blue=6),
        CubeSet(green=2),
    )
    assert game.min_set == CubeSet(red=4, green=2, blue=6)


def test_in_bounds_and_maximum():
    assert CubeSet(1, 2, 3).in_bounds(CubeSet(1, 2, 3))
    assert not CubeSet(1, 3, 3).in_bounds(CubeSet(1, 2, 3))
    assert CubeSet(5, 1, 2).maximum(CubeSet(1, 4, 2)) == CubeSet(5, 4, 2)


def test_all_sets_in_bounds():
    assert not parse_game(SAMPLE.splitlines()[2]).all_sets_in_bounds(BAG_LIMIT)
    assert parse_game(SAMPLE.splitlines()[1]).all_sets_in_bounds(BAG_LIMIT)


def test_unknown_colour_raises():
    with pytest.raises(ValueError):
        parse_game("Game 1: 3 purple")


def test_missing_colon_raises():
    with pytest.raises(ValueError):
        parse_game("Game 1 3 blue")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Part 1 answer: 8", "Part 2 answer: 2286"]