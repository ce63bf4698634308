"""Camel Cards: rank hands and total the winnings, with or without jokers."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from dataclasses import dataclass
from functools import cmp_to_key
from pathlib import Path

from adventpuzzles.y2023_day07_cards import Card, HandError, HandKind, HandType

NO_JOKER = False
WITH_JOKER = True

_JOKER = Card("J")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1

_KIND_BY_COUNTS = {
    (5,): HandKind.FIVE_OF_A_KIND,
    (4, 1): HandKind.FOUR_OF_A_KIND,
    (3, 2): HandKind.FULL_HOUSE,
    (3, 1, 1): HandKind.THREE_OF_A_KIND,
    (2, 2, 1): HandKind.TWO_PAIR,
    (2, 1, 1, 1): HandKind.ONE_PAIR,
    (1, 1, 1, 1, 1): HandKind.HIGH_CARD,
}


def _cmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _parse_bid(text: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > _USIZE_MAX:
        raise HandError(f"Failed to parse bid {text!r}")
    return int(text)


@dataclass(frozen=True)
class Hand:
    cards: tuple[Card, ...]
    bid: int

    @classmethod
    def parse(cls, line: str) -> Hand:
        """Parse ``CARDS BID``; only the first five card symbols are read."""
        hand_text, sep, bid_text = line.partition(" ")
        if not sep:
            raise HandError(f"Failed to split at space: {line}")
        symbols = iter(hand_text)
        cards = []
        for _ in range(5):
            symbol = next(symbols, None)
            if symbol is None:
                raise HandError("Not enough cards in hand")
            cards.append(Card.parse(symbol))
        return cls(tuple(cards), _parse_bid(bid_text))

    def mask_joker(self) -> tuple[Card, ...]:
        """Cards with every joker replaced by the card that makes the best hand."""
        if _JOKER not in self.cards:
            return self.cards
        highest_non_joker = max(
            (card for card in self.cards if card != _JOKER), default=_JOKER
        )
        hand_type = self.hand_type(NO_JOKER)
        kind = hand_type.kind
        if kind is HandKind.FIVE_OF_A_KIND:
            return self.cards
        if kind in (HandKind.TWO_PAIR, HandKind.FULL_HOUSE):
            first, second = hand_type.cards
            replace_with = second if first == _JOKER else first
        else:
            (card,) = hand_type.cards
            replace_with = highest_non_joker if card == _JOKER else card
        return tuple(replace_with if card == _JOKER else card for card in self.cards)

    def hand_type(self, use_joker: bool) -> HandType:
        """Classify the hand, optionally letting jokers stand in for other cards."""
        cards = self.mask_joker() if use_joker else self.cards
        counts = Counter(cards)
        kind = _KIND_BY_COUNTS[tuple(sorted(counts.values(), reverse=True))]

        def with_count(n: int) -> Card:
            return next(card for card, count in counts.items() if count == n)

        if kind is HandKind.FIVE_OF_A_KIND:
            defining: tuple[Card, ...] = (cards[0],)
        elif kind is HandKind.FOUR_OF_A_KIND:
            defining = (with_count(4),)
        elif kind is HandKind.FULL_HOUSE:
            defining = (with_count(3), with_count(2))
        elif kind is HandKind.THREE_OF_A_KIND:
            defining = (with_count(3),)
        elif kind is HandKind.TWO_PAIR:
            pairs = sorted((card for card, count in counts.items() if count == 2), reverse=True)
            defining = (pairs[0], pairs[1])
        elif kind is HandKind.ONE_PAIR:
            defining = (with_count(2),)
        else:
            # Judged on the original cards; a joker counts as the weakest card.
            originals = (
                Card("2") if use_joker and card == _JOKER else card for card in self.cards
            )
            defining = (max(originals),)
        return HandType(kind, defining)

    def compare_no_joker(self, other: Hand) -> int:
        """-1, 0 or 1 as this hand ranks below, level with or above ``other``."""
        result = _cmp(self.hand_type(NO_JOKER).kind, other.hand_type(NO_JOKER).kind)
        return result or self.compare_high_card(other, NO_JOKER)

    def compare_with_joker(self, other: Hand) -> int:
        """Like ``compare_no_joker`` but with J acting as a joker."""
        result = _cmp(self.hand_type(WITH_JOKER).kind, other.hand_type(WITH_JOKER).kind)
        return result or self.compare_high_card(other, WITH_JOKER)

    def compare_high_card(self, other: Hand, use_joker: bool) -> int:
        """Compare card by card; with jokers a J is worth 1."""
        for card, other_card in zip(self.cards, other.cards):
            if card == other_card:
                continue
            if use_joker and card == _JOKER:
                return _cmp(1, other_card.value())
            if use_joker and other_card == _JOKER:
                return _cmp(card.value(), 1)
            return _cmp(card.value(), other_card.value())
        return 0

    def __str__(self) -> str:
        return f'"{"".join(str(card) for card in self.cards)}" - {self.bid}'


def parse_hands(text: str) -> list[Hand]:
    return [Hand.parse(line) for line in text.splitlines()]


def _winnings(hands: list[Hand]) -> int:
    return sum(rank * hand.bid for rank, hand in enumerate(hands, start=1))


def part1(text: str) -> int:
    """Total winnings with J as a jack."""
    hands = sorted(parse_hands(text), key=cmp_to_key(Hand.compare_no_joker))
    return _winnings(hands)


def part2(text: str) -> int:
    """Total winnings with J as a joker."""
    hands = sorted(parse_hands(text), key=cmp_to_key(Hand.compare_with_joker))
    return _winnings(hands)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Camel Cards winnings.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    if args.part in (None, 1):
        print(f"Part 1 answer: {part1(text)}")
    if args.part in (None, 2):
        print(f"Part 2 answer: {part2(text)}")
    return 0