"""Grid tile graphics items for search visualization."""

from PySide6.QtWidgets import QGraphicsRectItem
from PySide6.QtGui import QBrush, QPen, QColor
from PySide6.QtCore import Qt


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single grid cell."""

    # Color scheme for different cell states
    COLORS = {
        "empty": QColor(240, 240, 240),      # Light gray
        "wall": QColor(64, 64, 64),          # Dark gray
        "start": QColor(0, 200, 0),          # Green
        "goal": QColor(255, 215, 0),         # Gold
        "visited": QColor(173, 216, 230),    # Light blue
        "current": QColor(255, 0, 0),        # Red
        "path": QColor(255, 140, 0),         # Orange
    }

    def __init__(self, x: int, y: int, size: float, state: str = "empty"):
        super().__init__(0, 0, size, size)
        self.grid_x = x
        self.grid_y = y
        self.state = None

        self.setPos(x * size, y * size)
        self.set_state(state)

    def set_state(self, state: str):
        """Update the tile appearance when its state changes."""
        if state == self.state:
            return
        self.state = state
        self.setBrush(QBrush(self.COLORS.get(state, self.COLORS["empty"])))

        # Border color
        if state == "wall":
            self.setPen(QPen(Qt.black, 1))
        else:
            self.setPen(QPen(Qt.gray, 0.5))
