"""The WorkStack: the single last-in-first-out value stack of a session."""

from __future__ import annotations

from typing import Iterator

from uforth import Value
from uforth.types.errors import UForthStackUnderflow


class WorkStack:
    """LIFO sequence of runtime values.

    Values are stored bottom-first in a list; iteration, indexing and rendering
    are top-first.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[Value] | None = None):
        # items are given top-first, like everything else this class returns
        self._items: list[Value] = list(reversed(items)) if items else []

    def push(self, value: Value) -> None:
        self._items.append(value)

    def pop(self) -> Value:
        if not self._items:
            raise UForthStackUnderflow("Cannot pop from an empty stack")
        return self._items.pop()

    def peek(self, depth: int = 0) -> Value:
        """Value `depth` places below the top without removing it."""
        if depth >= len(self._items):
            raise UForthStackUnderflow(
                f"Cannot peek {depth + 1} deep into a stack of {len(self._items)}"
            )
        return self._items[-1 - depth]

    def require(self, count: int, operation: str) -> None:
        if len(self._items) < count:
            raise UForthStackUnderflow(
                f"{operation} requires {count} value(s) but the stack holds {len(self._items)}"
            )

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> tuple[Value, ...]:
        return tuple(self._items)

    def restore(self, snapshot: tuple[Value, ...]) -> None:
        self._items = list(snapshot)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Value]:
        return reversed(self._items)

    def __getitem__(self, depth: int) -> Value:
        return self.peek(depth)

    def to_list(self) -> list[Value]:
        """Values top-first."""
        return list(reversed(self._items))

    def __repr__(self):
        return f"WorkStack({self.to_list()!r})"
