"""Indexed binary min-heap keyed by vertex.

The heap holds at most one live entry per vertex. A vertex -> slot index is
maintained across every swap, which turns "push a better key for a vertex that
is already queued" into an in-place decrease-key instead of a duplicate entry.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from pathgraph.lib.graph import VertexID

#: Slot value for vertices that are not in the heap.
_ABSENT = -1


class HeapEntry(NamedTuple):
    """A queued vertex with its tentative key and the vertex it was reached from."""

    vertex: VertexID
    key: float
    predecessor: Optional[VertexID]


class IndexedMinHeap:
    """
    Min-priority queue over the vertices ``0 .. capacity - 1``.

    Operations:
      - ``add``: insert a vertex, or lower its key if it is already queued.
        A key that is not strictly smaller than the queued one is ignored.
      - ``peek``: the minimum-key entry, without removing it.
      - ``remove``: drop the minimum-key entry.
      - ``pop``: ``peek`` followed by ``remove``.

    Capacity equals the number of distinct vertices, so the heap can never
    overflow: a vertex outside the index range is rejected instead.
    """

    def __init__(self, capacity: int) -> None:
        """
        Args:
            capacity: Number of distinct vertices the heap indexes; must be > 0.

        Raises:
            ValueError: If capacity is not a positive integer.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"Heap capacity must be an integer, got {capacity!r}.")
        if capacity <= 0:
            raise ValueError(f"Heap capacity must be positive, got {capacity}.")
        self._capacity = capacity
        self._entries: List[HeapEntry] = []
        self._slots: List[int] = [_ABSENT] * capacity

    @property
    def capacity(self) -> int:
        """Number of distinct vertices the heap indexes."""
        return self._capacity

    def __len__(self) -> int:
        """Number of queued entries."""
        return len(self._entries)

    def __contains__(self, vertex: object) -> bool:
        """True if ``vertex`` is currently queued."""
        return (
            self._is_index(vertex)
            and self._slots[int(vertex)] != _ABSENT
        )

    def empty(self) -> bool:
        """True if no entry is queued."""
        return not self._entries

    def _is_index(self, vertex: object) -> bool:
        return (
            isinstance(vertex, (int, np.integer))
            and not isinstance(vertex, bool)
            and 0 <= vertex < self._capacity
        )

    def _check_index(self, vertex: object) -> int:
        if not self._is_index(vertex):
            raise ValueError(
                f"Vertex {vertex!r} is out of range for a heap of capacity "
                f"{self._capacity}."
            )
        return int(vertex)

    def add(self, entry: HeapEntry) -> bool:
        """
        Insert ``entry``, or decrease the key of its vertex if already queued.

        Args:
            entry: ``(vertex, key, predecessor)``.

        Returns:
            True if the heap changed, False if the entry was ignored because the
            queued key for that vertex is already as small or smaller.

        Raises:
            ValueError: If the vertex is outside ``[0, capacity)``.
        """
        vertex = self._check_index(entry.vertex)
        if type(entry.vertex) is not int:
            entry = entry._replace(vertex=vertex)

        slot = self._slots[vertex]
        if slot == _ABSENT:
            slot = len(self._entries)
            self._entries.append(entry)
            self._slots[vertex] = slot
        elif entry.key < self._entries[slot].key:
            self._entries[slot] = entry
        else:
            return False

        self._sift_up(slot)
        return True

    def peek(self) -> HeapEntry:
        """
        Return the minimum-key entry.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._entries:
            raise IndexError("peek from an empty heap")
        return self._entries[0]

    def remove(self) -> None:
        """
        Remove the minimum-key entry.

        The last entry moves to the root and sinks toward the smaller child;
        on equal children the left one is taken.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._entries:
            raise IndexError("remove from an empty heap")

        root = self._entries[0]
        last = self._entries.pop()
        self._slots[root.vertex] = _ABSENT
        if self._entries:
            self._entries[0] = last
            self._slots[last.vertex] = 0
            self._sift_down(0)

    def pop(self) -> HeapEntry:
        """Remove and return the minimum-key entry."""
        entry = self.peek()
        self.remove()
        return entry

    def entries(self) -> Tuple[HeapEntry, ...]:
        """Live entries in slot order (slot 0 is the minimum)."""
        return tuple(self._entries)

    def slot_of(self, vertex: VertexID) -> Optional[int]:
        """
        Current slot of ``vertex``, or None if it is not queued.

        Raises:
            ValueError: If the vertex is outside ``[0, capacity)``.
        """
        slot = self._slots[self._check_index(vertex)]
        return None if slot == _ABSENT else slot

    def is_valid(self) -> bool:
        """Check the heap order and that the slot index mirrors the entries."""
        entries = self._entries
        for i in range(1, len(entries)):
            if entries[(i - 1) // 2].key > entries[i].key:
                return False
        for i, entry in enumerate(entries):
            if self._slots[entry.vertex] != i:
                return False
        return sum(1 for s in self._slots if s != _ABSENT) == len(entries)

    def _swap(self, i: int, j: int) -> None:
        entries = self._entries
        entries[i], entries[j] = entries[j], entries[i]
        self._slots[entries[i].vertex] = i
        self._slots[entries[j].vertex] = j

    def _sift_up(self, i: int) -> None:
        entries = self._entries
        while i > 0:
            parent = (i - 1) // 2
            if not entries[i].key < entries[parent].key:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        entries = self._entries
        size = len(entries)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i
            if left < size and entries[left].key < entries[smallest].key:
                smallest = left
            if right < size and entries[right].key < entries[smallest].key:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def __repr__(self) -> str:
        items = ", ".join(
            f"({e.vertex}, {e.key:g}, {e.predecessor})" for e in self._entries
        )
        return f"IndexedMinHeap([{items}])"
