"""A bounded, ordered list of game objects compared by identity."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

MAX_OBJECTS = 1000


class ObjectListFullError(Exception):
    """Raised when inserting into a full ObjectList."""


class ObjectList:
    """An ordered collection of at most ``capacity`` objects."""

    def __init__(self, items: Iterable[Any] = (), capacity: int = MAX_OBJECTS) -> None:
        self._capacity = capacity
        self._items: list[Any] = []
        for item in items:
            self.insert(item)

    def insert(self, obj: Any) -> None:
        """Append ``obj``; raise ObjectListFullError if the list is full."""
        if self.is_full():
            raise ObjectListFullError(f"object list holds at most {self._capacity} objects")
        self._items.append(obj)

    def remove(self, obj: Any) -> None:
        """Remove ``obj``, keeping the order of the rest; raise ValueError if absent."""
        for index, item in enumerate(self._items):
            if item is obj:
                del self._items[index]
                return
        raise ValueError("object not in list")

    def clear(self) -> None:
        """Remove every object."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self._items):
            raise IndexError("Invalid index!")
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __contains__(self, obj: object) -> bool:
        return any(item is obj for item in self._items)

    def __repr__(self) -> str:
        return f"ObjectList({self._items!r})"