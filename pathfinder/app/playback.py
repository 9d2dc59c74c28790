"""Step-by-step replay of a finished search result."""

from typing import Optional, Set

from ..domain.types import Point, SearchResult


class Playback:
    """
    Reveals a result's expansion order one node per tick, then its path.
    """

    def __init__(self, result: Optional[SearchResult] = None):
        self.result = result or SearchResult()
        self.visited_count = 0
        self.show_path = False
        self._visited: Set[Point] = set()

    @property
    def total(self) -> int:
        return len(self.result.visited_order)

    def is_done(self) -> bool:
        return self.visited_count >= self.total

    def advance(self) -> bool:
        """
        Reveal the next expanded node.
        Returns True once every node has been revealed.
        """
        if not self.is_done():
            self._visited.add(self.result.visited_order[self.visited_count])
            self.visited_count += 1
        if self.is_done():
            self.show_path = len(self.result.path) > 0
            return True
        return False

    def skip(self):
        """Reveal everything at once."""
        self._visited.update(self.result.visited_order)
        self.visited_count = self.total
        self.show_path = len(self.result.path) > 0

    def visited_points(self) -> Set[Point]:
        return self._visited

    def path_points(self) -> Set[Point]:
        return set(self.result.path) if self.show_path else set()

    def current_point(self) -> Optional[Point]:
        """The most recently revealed node, if any."""
        if self.visited_count == 0:
            return None
        return self.result.visited_order[self.visited_count - 1]
