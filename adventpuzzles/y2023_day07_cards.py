"""Camel Cards building blocks: single cards and hand types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering

_FACE_VALUES = {"T": 10, "J": 11, "Q": 12, "K": 13, "A": 14}
_SYMBOLS = frozenset("23456789") | frozenset(_FACE_VALUES)


class HandError(ValueError):
    """A card or a hand line could not be parsed."""

    def __init__(self, message: str, symbol: str | None = None) -> None:
        super().__init__(message)
        self.symbol = symbol


@total_ordering
@dataclass(frozen=True)
class Card:
    """One card label; cards order by their strength."""

    symbol: str

    @classmethod
    def parse(cls, symbol: str) -> Card:
        if symbol not in _SYMBOLS:
            raise HandError(f"No such card: {symbol}", symbol)
        return cls(symbol)

    def value(self) -> int:
        """Strength of the card: 2 to 9, then T=10, J=11, Q=12, K=13, A=14."""
        face = _FACE_VALUES.get(self.symbol)
        return face if face is not None else int(self.symbol)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value() < other.value()

    def __str__(self) -> str:
        return self.symbol


class HandKind(IntEnum):
    """Kinds of hand from weakest to strongest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6

    @property
    def label(self) -> str:
        return "".join(word.capitalize() for word in self.name.split("_"))


@total_ordering
@dataclass(frozen=True, eq=False)
class HandType:
    """A hand kind with the cards that define it.

    Equality and ordering look at the kind only.
    """

    kind: HandKind
    cards: tuple[Card, ...]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandType):
            return NotImplemented
        return self.kind == other.kind

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandType):
            return NotImplemented
        return self.kind < other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __str__(self) -> str:
        return f"{self.kind.label}({','.join(str(card) for card in self.cards)})"