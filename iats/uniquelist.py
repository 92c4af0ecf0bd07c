"""An ordered collection that holds each object at most once."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class UniqueList:
    """Insertion-ordered list of distinct objects, compared by identity."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def add(self, item: Any) -> None:
        """Append ``item`` unless the same object is already present."""
        if item not in self:
            self._items.append(item)

    def remove(self, item: Any) -> None:
        """Remove ``item`` if present; do nothing otherwise."""
        self._items = [existing for existing in self._items if existing is not item]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)