"""A bounded list of keyed elements with 1-based positional access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

MAX_SIZE = 100


class ListFullError(Exception):
    """Raised when adding to a list that already holds MAX_SIZE elements."""


@dataclass
class Element:
    """An integer key with an optional attached value."""

    key: int
    value: Any = None


def _as_element(item: Element | int) -> Element:
    return item if isinstance(item, Element) else Element(item)


class KeyList:
    """Ordered list of Element objects holding at most MAX_SIZE items.

    Positions are 1-based, as in the exercises that use it.
    """

    def __init__(self, elements: Iterable[Element | int] = ()) -> None:
        self._items: list[Element] = []
        for item in elements:
            self.append(item)

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when the list holds MAX_SIZE elements."""
        return len(self._items) >= MAX_SIZE

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"KeyList({self.keys()!r})"

    def keys(self) -> list[int]:
        """Return the keys of the elements in order."""
        return [element.key for element in self._items]

    def append(self, element: Element | int) -> None:
        """Add an element at the end; an int is wrapped as a key."""
        if self.is_full():
            raise ListFullError(f"list already holds {MAX_SIZE} elements")
        self._items.append(_as_element(element))

    def remove_key(self, key: int) -> bool:
        """Remove every element with key; return True if any was removed."""
        kept = [element for element in self._items if element.key != key]
        removed = len(kept) != len(self._items)
        self._items = kept
        return removed

    def find(self, key: int) -> Element | None:
        """Return the first element with key, or None."""
        return next((element for element in self._items if element.key == key), None)

    def insert(self, element: Element | int, position: int) -> bool:
        """Insert element at a 1-based position.

        A position past the end appends the element instead and returns False;
        otherwise returns True.
        """
        if self.is_full():
            raise ListFullError(f"list already holds {MAX_SIZE} elements")
        if position < 1:
            raise IndexError(f"position must be at least 1, got {position}")
        if position > len(self._items):
            self.append(element)
            return False
        self._items.insert(position - 1, _as_element(element))
        return True

    def delete_at(self, position: int) -> Element:
        """Remove and return the element at a 1-based position."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range")
        return self._items.pop(position - 1)

    def get(self, position: int) -> Element:
        """Return the element at a 1-based position."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range")
        return self._items[position - 1]

    def show(self) -> None:
        """Print the keys of the list on one line."""
        body = "".join(f"{key} " for key in self.keys())
        print(f"Contenido de la lista: {body}")