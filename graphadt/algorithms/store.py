"""Frontier stores for the search engine.

A store holds pending ``(edge, path_state)`` items. The search engine only
needs four capabilities: build an empty store, add a batch of items, take one
item out, and test for emptiness. Store strategies are zero-argument
factories, usually the store class itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, Dict, Generic, Iterable, Type, TypeVar

from graphadt.types.base import SearchStrategy

T = TypeVar("T")


class Store(ABC, Generic[T]):
    """Ordered container of pending search items.

    The search engine relies on `add`, `take` and `is_empty` only.
    """

    @abstractmethod
    def add(self, items: Iterable[T]) -> None:
        """Add a batch of items."""

    @abstractmethod
    def take(self) -> T:
        """Remove and return the next item."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if no item is pending."""


class _DequeStore(Store[T]):
    """Store backed by a deque; items are always taken from the front."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def take(self) -> T:
        """Remove and return the next item.

        Raises:
            IndexError: If the store is empty.
        """
        if not self._items:
            raise IndexError(f"take from an empty {type(self).__name__}")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class QueueStore(_DequeStore[T]):
    """FIFO store: breadth-first enumeration."""

    def add(self, items: Iterable[T]) -> None:
        self._items.extend(items)


class StackStore(_DequeStore[T]):
    """LIFO store: depth-first enumeration.

    A batch is pushed in front of the existing items with its own order kept,
    so the first item of the batch is the next one taken.
    """

    def add(self, items: Iterable[T]) -> None:
        # extendleft reverses its argument
        self._items.extendleft(reversed(list(items)))


StoreFactory = Callable[[], Store]

_STORES: Dict[SearchStrategy, Type[Store]] = {
    SearchStrategy.BFS: QueueStore,
    SearchStrategy.DFS: StackStore,
}


def store_for(strategy: SearchStrategy | str) -> Type[Store]:
    """Return the store class implementing a search strategy.

    Args:
        strategy: SearchStrategy member or its case-insensitive name.

    Raises:
        ValueError: If a string names no strategy.
    """
    return _STORES[SearchStrategy.coerce(strategy)]
