"""Simple integer queue, stack and a set with uniform random choice."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator
from typing import Optional


class IntQueue:
    """First-in, first-out queue of integers."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IntQueue({list(self._items)})"

    def push(self, x: int) -> None:
        """Add ``x`` at the back."""
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def empty(self) -> bool:
        """Whether the queue holds no items."""
        return not self._items


class IntStack:
    """Last-in, first-out stack of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IntStack({self._items})"

    def push(self, x: int) -> None:
        """Put ``x`` on top."""
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Whether the stack holds no items."""
        return not self._items


class RandomizedSet:
    """Set of integers with constant-time insert, remove and random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._values: list[int] = []
        self._positions: dict[int, int] = {}
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"RandomizedSet({self._values})"

    def insert(self, val: int) -> bool:
        """Add ``val``; return False if it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return False if it was absent."""
        position = self._positions.pop(val, None)
        if position is None:
            return False
        last = self._values.pop()
        if position < len(self._values):
            self._values[position] = last
            self._positions[last] = position
        return True

    def get_random(self) -> int:
        """Return a member chosen uniformly at random."""
        if not self._values:
            raise IndexError("choice from empty set")
        return self._rng.choice(self._values)