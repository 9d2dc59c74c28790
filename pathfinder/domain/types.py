"""Core type definitions for grid search and maze generation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Sequence


class Point(NamedTuple):
    """Grid coordinate; x grows rightward and y grows downward."""
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(int(data["x"]), int(data["y"]))


# Rows of cell codes, indexed grid[y][x]
Grid = Sequence[Sequence[int]]

# Cell codes
WALKABLE = 0
WALL = 1


@dataclass
class SearchResult:
    """Result of a single search run."""
    found: bool = False
    path: List[Point] = field(default_factory=list)
    visited_order: List[Point] = field(default_factory=list)
    expanded_nodes: int = 0
    path_length: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "found": self.found,
            "path": [p.to_dict() for p in self.path],
            "visitedOrder": [p.to_dict() for p in self.visited_order],
            "expandedNodes": self.expanded_nodes,
            "pathLength": self.path_length,
        }


@dataclass
class MazeResult:
    """A generated maze; width and height describe the output grid."""
    width: int
    height: int
    grid: List[List[int]]
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "width": self.width,
            "height": self.height,
            "grid": self.grid,
        }
        if self.seed is not None:
            data["seed"] = self.seed
        return data
