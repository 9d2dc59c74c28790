"""Binary min-heap priority queue used by A* search."""

import heapq
import itertools
from dataclasses import dataclass
from typing import List, Optional

from .types import Point


@dataclass
class HeapNode:
    """
    Entry in the priority queue.

    Comparison order:
    1. priority (lower is better)
    2. sequence (insertion order, for determinism)
    """
    point: Point
    priority: float
    sequence: int
    removed: bool = False  # set once popped or superseded

    def __lt__(self, other: 'HeapNode') -> bool:
        """Define comparison for heap ordering."""
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.sequence < other.sequence


class PriorityQueue:
    """
    Min-priority queue over grid points backed by a binary heap.

    The same point may be pushed several times; callers that need only the
    best entry per point discard stale pops themselves.
    """

    def __init__(self):
        self._heap: List[HeapNode] = []
        self._counter = itertools.count()
        self._live = 0

    def __len__(self) -> int:
        return self._live

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return self._live == 0

    def size(self) -> int:
        """Get the number of live items in the queue."""
        return self._live

    def push(self, point: Point, priority: float) -> HeapNode:
        """Insert a point with the given priority and return its entry."""
        node = HeapNode(point, float(priority), next(self._counter))
        heapq.heappush(self._heap, node)
        self._live += 1
        return node

    def pop(self) -> HeapNode:
        """
        Remove and return the entry with the lowest priority.

        Raises:
            IndexError: If the queue is empty
        """
        while self._heap:
            node = heapq.heappop(self._heap)
            if not node.removed:
                node.removed = True
                self._live -= 1
                return node
        raise IndexError("pop from an empty priority queue")

    def peek(self) -> Optional[HeapNode]:
        """Look at the next entry without removing it, or None if empty."""
        while self._heap:
            node = self._heap[0]
            if not node.removed:
                return node
            # Drop stale entry and continue
            heapq.heappop(self._heap)
        return None

    def update(self, node: HeapNode, priority: float) -> HeapNode:
        """
        Change the priority of an entry still in the queue.
        The old entry is marked removed and a replacement is pushed; the
        replacement is returned and must be used for later updates.
        """
        if node.removed:
            raise ValueError(f"entry for {node.point} is no longer in the queue")
        node.removed = True
        self._live -= 1
        return self.push(node.point, priority)

    def clear(self):
        """Remove all items from the queue."""
        self._heap.clear()
        self._live = 0
