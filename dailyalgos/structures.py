"""Small container types: a min-stack, an LRU cache, a trie and a running median."""

from __future__ import annotations

import heapq
from collections import OrderedDict
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any


class MinStack:
    """A stack that reports its smallest item in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._mins: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        self._items.append(val)
        if not self._mins or val <= self._mins[-1]:
            self._mins.append(val)

    def pop(self) -> int:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty MinStack")
        value = self._items.pop()
        if value == self._mins[-1]:
            self._mins.pop()
        return value

    def top(self) -> int:
        """The top item."""
        if not self._items:
            raise IndexError("top of an empty MinStack")
        return self._items[-1]

    def get_min(self) -> int:
        """The smallest item on the stack."""
        if not self._mins:
            raise IndexError("minimum of an empty MinStack")
        return self._mins[-1]


class LRUCache:
    """A fixed-size mapping that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._data: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: Hashable) -> Any:
        """The value for ``key``, marking it most recently used, or ``None``."""
        if key not in self._data:
            return None
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest key when full."""
        if key in self._data:
            del self._data[key]
        elif len(self._data) == self.capacity:
            self._data.popitem(last=False)
        self._data[key] = value


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Whether ``word`` itself was inserted."""
        node = self._walk(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)


class MedianFinder:
    """Running median of a stream of numbers."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap of the lower half, negated
        self._high: list[int] = []  # min-heap of the upper half

    def __len__(self) -> int:
        return len(self._low) + len(self._high)

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        heapq.heappush(self._high, -heapq.heappushpop(self._low, -num))
        if len(self._high) > len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """The median of all numbers added so far."""
        if not self._low:
            raise ValueError("no numbers have been added")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return (-self._low[0] + self._high[0]) / 2.0