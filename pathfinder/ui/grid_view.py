"""Grid view for search visualization."""

from typing import Dict, Tuple

from PySide6.QtWidgets import QGraphicsView, QGraphicsScene
from PySide6.QtGui import QPainter
from PySide6.QtCore import Qt

from ..app.controller import PathfinderController
from ..domain.neighbors import grid_dimensions, in_bounds
from ..domain.types import Point
from .tiles import GridTile


class GridView(QGraphicsView):
    """Graphics view for displaying and editing the grid."""

    def __init__(self, controller: PathfinderController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tiles: Dict[Tuple[int, int], GridTile] = {}
        self.tile_size = 18.0
        self.edit_mode = "wall"  # "wall", "start", "goal"
        self._dimensions = (0, 0)

        self.setRenderHint(QPainter.Antialiasing)

        self.controller.grid_updated.connect(self.update_grid)
        self.update_grid()

    def update_grid(self):
        """Rebuild tiles when the grid size changes, else just restyle them."""
        grid = self.controller.grid
        if not grid:
            return

        dimensions = grid_dimensions(grid)
        if dimensions != self._dimensions:
            self._rebuild(*dimensions)

        for (x, y), tile in self.tiles.items():
            tile.set_state(self.controller.cell_state(Point(x, y)))

    def _rebuild(self, width: int, height: int):
        self.scene.clear()
        self.tiles.clear()
        self._dimensions = (width, height)
        self.scene.setSceneRect(0, 0, width * self.tile_size, height * self.tile_size)

        for y in range(height):
            for x in range(width):
                tile = GridTile(x, y, self.tile_size)
                self.scene.addItem(tile)
                self.tiles[(x, y)] = tile

        self.fit_in_view()

    def set_edit_mode(self, mode: str):
        """Set the current edit mode."""
        self.edit_mode = mode

    def mousePressEvent(self, event):
        """Handle mouse press events for tile editing."""
        if event.button() == Qt.LeftButton:
            scene_pos = self.mapToScene(event.position().toPoint())
            point = Point(int(scene_pos.x() // self.tile_size), int(scene_pos.y() // self.tile_size))
            if in_bounds(self.controller.grid, point):
                self.controller.set_cell(point, self.edit_mode)

        super().mousePressEvent(event)

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit the entire grid in the view."""
        if self.scene.items():
            self.fitInView(self.scene.itemsBoundingRect(), Qt.KeepAspectRatio)
