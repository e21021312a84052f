"""Uniform grid used to find objects close enough to collide."""

from __future__ import annotations

from typing import Any

from .geometry import clamp


class SpatialGrid:
    """Buckets objects by the grid cells their hitboxes cover.

    Objects placed in the grid must have a ``hitbox()`` method returning a
    rectangle with ``x``, ``y``, ``width`` and ``height``.
    """

    def __init__(self, width: int, height: int, cell_size: int) -> None:
        if cell_size <= 0:
            raise ValueError("cell size must be positive")
        self.cell_size = cell_size
        self.cols = (width + cell_size - 1) // cell_size
        self.rows = (height + cell_size - 1) // cell_size
        self._cells: list[dict[int, Any]] = [{} for _ in range(self.cols * self.rows)]

    def clear(self) -> None:
        """Remove every object from the grid."""
        for cell in self._cells:
            cell.clear()

    def insert(self, obj: Any) -> None:
        """Add an object to every cell its hitbox touches."""
        for index in self._covered_cells(obj):
            self._cells[index][id(obj)] = obj

    def nearby(self, obj: Any) -> list[Any]:
        """Objects sharing at least one cell with obj, without obj itself."""
        found: dict[int, Any] = {}
        for index in self._covered_cells(obj):
            found.update(self._cells[index])
        found.pop(id(obj), None)
        return list(found.values())

    def _covered_cells(self, obj: Any) -> list[int]:
        box = obj.hitbox()
        min_col = clamp(int(box.x / self.cell_size), 0, self.cols - 1)
        max_col = clamp(int((box.x + box.width) / self.cell_size), 0, self.cols - 1)
        min_row = clamp(int(box.y / self.cell_size), 0, self.rows - 1)
        max_row = clamp(int((box.y + box.height) / self.cell_size), 0, self.rows - 1)
        return [
            col + self.cols * row
            for row in range(min_row, max_row + 1)
            for col in range(min_col, max_col + 1)
        ]