"""A small first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """FIFO queue; ``dequeue`` and ``peek`` give None when it is empty."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._elements: deque[T] = deque(items)

    def enqueue(self, element: T) -> None:
        """Add an element at the back."""
        self._elements.append(element)

    def dequeue(self) -> T | None:
        """Remove and return the front element, or None if empty."""
        return self._elements.popleft() if self._elements else None

    def peek(self) -> T | None:
        """Return the front element without removing it, or None if empty."""
        return self._elements[0] if self._elements else None

    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"Queue({list(self._elements)!r})"