"""Scratchcards: score winning numbers and count won copies."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

_U32 = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


class CardParseError(ValueError):
    """A scratchcard line could not be parsed."""


def _parse_u32(text: str) -> int:
    if not _U32.fullmatch(text) or int(text) > _U32_MAX:
        raise CardParseError(f"Card number could not be parsed {text}")
    return int(text)


def _numbers(text: str) -> list[int]:
    return [_parse_u32(word) for word in text.split()]


@dataclass(frozen=True)
class Card:
    id: int
    win: tuple[int, ...]
    hand: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Card:
        """Parse ``Card N: winning numbers | numbers in hand``."""
        header, sep, numbers = line.partition(":")
        if not sep:
            raise CardParseError(f"Card must start from the Card N: syntax, found {line}")
        id_text = header
        while id_text.startswith("Card"):
            id_text = id_text[len("Card"):]
        try:
            card_id = _parse_u32(id_text.lstrip())
        except CardParseError:
            raise CardParseError(f"Card number could not be parsed {header}") from None

        win, sep, hand = numbers.partition("|")
        if not sep:
            raise CardParseError("Should be only one pipe symbol")
        return cls(card_id, tuple(sorted(_numbers(win))), tuple(sorted(_numbers(hand))))

    def matches_count(self) -> int:
        """How many winning numbers appear in the hand."""
        hand = set(self.hand)
        return sum(1 for number in self.win if number in hand)

    def points(self) -> int:
        """One point for the first match, doubled for each further match."""
        matches = self.matches_count()
        return 2 ** (matches - 1) if matches else 0

    def __str__(self) -> str:
        return f"Card {self.id}: {list(self.win)} | {list(self.hand)}"


def parse_cards(text: str) -> list[Card]:
    return [Card.parse(line) for line in text.splitlines()]


def part1(text: str) -> int:
    """Total points of all cards."""
    return sum(card.points() for card in parse_cards(text))


def part2(text: str) -> int:
    """Total number of cards once all won copies are counted."""
    cards = parse_cards(text)
    amounts = [1] * len(cards)
    for index, card in enumerate(cards):
        copies = amounts[index]
        for target in range(card.id, card.id + card.matches_count()):
            if target < len(amounts):
                amounts[target] += copies
    return sum(amounts)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scratchcard scoring.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1 answer: {part1(text)}")
    print(f"Part 2 answer: {part2(text)}")
    return 0