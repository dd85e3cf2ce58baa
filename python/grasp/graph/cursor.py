"""Repositionable forward cursor over one sequence."""

from __future__ import annotations

from typing import Sequence


class Cursor:
    """Index into a shared, read-only sequence.

    Copies share the backing sequence and only duplicate the index, so
    speculative lookahead costs nothing until it is committed with ``set``.
    """

    __slots__ = ("_items", "_index")

    def __init__(self, items: Sequence[int], index: int = 0) -> None:
        self._items = items
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def has_next(self) -> bool:
        return self._index < len(self._items)

    def next(self) -> int:
        """Consume and return the next item."""
        if self._index >= len(self._items):
            raise IndexError("next past the end of the sequence")
        item = self._items[self._index]
        self._index += 1
        return item

    def peek(self) -> int:
        """Return the next item without consuming it."""
        if self._index >= len(self._items):
            raise IndexError("peek past the end of the sequence")
        return self._items[self._index]

    def copy(self) -> Cursor:
        return Cursor(self._items, self._index)

    def set(self, other: Cursor) -> None:
        """Move this cursor to the position of ``other``."""
        if other._items is not self._items:
            raise ValueError("Cursors traverse different sequences")
        self._index = other._index

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self) -> str:
        return f"Cursor(index={self._index}, length={len(self._items)})"
