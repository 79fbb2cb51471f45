"""Binary min-heap priority queue with decrease-key.

``MinHeap`` stores hashable items in an array-backed binary heap ordered by a
numeric key. A live item -> array index map is updated on every swap, which
makes ``decrease_key`` safe at any point after construction.

Ties between children are resolved by position: the left child is preferred,
and a parent equal to its smallest child stays in place.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, Tuple, TypeVar

from lsgraph.exceptions import EmptyHeapError, InvalidKeyUpdateError

T = TypeVar("T", bound=Hashable)

INF = float("inf")


def _parent(index: int) -> int:
    return (index - 1) // 2


def _left(index: int) -> int:
    return 2 * index + 1


def _right(index: int) -> int:
    return 2 * index + 2


class MinHeap(Generic[T]):
    """Array-backed binary min-heap keyed by float.

    Each item may be queued at most once.

    Example:
        >>> heap = MinHeap()
        >>> heap.build([("a", 3.0), ("b", 1.0), ("c", 2.0)])
        >>> heap.extract_min()
        'b'
        >>> heap.decrease_key("a", 0.5)
        >>> heap.extract_min()
        'a'
    """

    def __init__(self, entries: Iterable[Tuple[T, float]] = ()) -> None:
        self._items: List[T] = []
        self._keys: List[float] = []
        self._pos: Dict[T, int] = {}
        self.build(entries)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._pos

    def __repr__(self) -> str:
        return f"MinHeap(size={len(self._items)})"

    def build(self, entries: Iterable[Tuple[T, float]]) -> None:
        """Replace the heap content and heapify bottom-up in O(n).

        Args:
            entries: ``(item, key)`` pairs in arbitrary order.

        Raises:
            ValueError: If an item appears more than once.
        """
        self._items = []
        self._keys = []
        self._pos = {}
        for item, key in entries:
            if item in self._pos:
                raise ValueError(f"Item '{item}' is already in the heap.")
            self._pos[item] = len(self._items)
            self._items.append(item)
            self._keys.append(key)

        for index in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(index)

    def peek(self) -> T:
        """Return the item with the smallest key without removing it."""
        if not self._items:
            raise EmptyHeapError()
        return self._items[0]

    def key_of(self, item: T) -> float:
        """Return the current key of a queued item.

        Raises:
            KeyError: If the item is not in the heap.
        """
        return self._keys[self._pos[item]]

    def items(self) -> List[Tuple[T, float]]:
        """Return ``(item, key)`` pairs in array order."""
        return list(zip(self._items, self._keys))

    def extract_min(self) -> T:
        """Remove and return the item with the smallest key.

        Raises:
            EmptyHeapError: If the heap is empty.
        """
        if not self._items:
            raise EmptyHeapError()

        last = len(self._items) - 1
        self._swap(0, last)
        item = self._items.pop()
        self._keys.pop()
        del self._pos[item]

        if self._items:
            self._sift_down(0)
        return item

    def decrease_key(self, item: T, new_key: float) -> None:
        """Lower the key of a queued item and restore heap order.

        Args:
            item: Item already in the heap.
            new_key: Replacement key; must not exceed the current key.

        Raises:
            KeyError: If the item is not in the heap.
            InvalidKeyUpdateError: If ``new_key`` is greater than the current
                key. The heap is left unchanged.
        """
        index = self._pos[item]
        current = self._keys[index]
        if new_key > current:
            raise InvalidKeyUpdateError(item, current, new_key)

        self._keys[index] = new_key
        self._sift_up(index)

    def insert(self, item: T, key: float) -> None:
        """Add an item: append with an infinite key, then decrease it to ``key``.

        Raises:
            ValueError: If the item is already in the heap.
        """
        if item in self._pos:
            raise ValueError(f"Item '{item}' is already in the heap.")

        self._pos[item] = len(self._items)
        self._items.append(item)
        self._keys.append(INF)
        self.decrease_key(item, key)

    #
    # Internal helpers
    #
    def _swap(self, i: int, j: int) -> None:
        items, keys = self._items, self._keys
        items[i], items[j] = items[j], items[i]
        keys[i], keys[j] = keys[j], keys[i]
        self._pos[items[i]] = i
        self._pos[items[j]] = j

    def _sift_up(self, index: int) -> None:
        keys = self._keys
        while index > 0 and keys[_parent(index)] > keys[index]:
            self._swap(index, _parent(index))
            index = _parent(index)

    def _sift_down(self, index: int) -> None:
        keys = self._keys
        size = len(keys)
        while True:
            smallest = index
            left, right = _left(index), _right(index)
            if left < size and keys[left] < keys[smallest]:
                smallest = left
            if right < size and keys[right] < keys[smallest]:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest
