"""Fixed-size, write-once tile grid addressed with 1-indexed coordinates."""

from __future__ import annotations

from collections.abc import Iterator

from ant_terrain.config.constants import GRID_HEIGHT, GRID_WIDTH
from ant_terrain.domain.errors import GridIncompleteError
from ant_terrain.domain.tiles import Tile


class Grid:
    """Write-once grid of optional tiles.

    A cell, once occupied, is never overwritten or cleared. Out-of-range
    coordinates are treated as unplaceable rather than as errors.
    """

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.width = width
        self.height = height
        self._cells: list[Tile | None] = [None] * (width * height)
        self._occupied = 0

    def _index(self, x: int, y: int) -> int:
        return (y - 1) * self.width + (x - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def get(self, x: int, y: int) -> Tile | None:
        """Return the occupant of (x, y), or None if empty or out of range."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[self._index(x, y)]

    def try_place(self, x: int, y: int, tile: Tile) -> bool:
        """Store *tile* at (x, y) if that cell exists and is empty."""
        if not self.in_bounds(x, y):
            return False
        idx = self._index(x, y)
        if self._cells[idx] is not None:
            return False
        self._cells[idx] = tile
        self._occupied += 1
        return True

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def occupied_count(self) -> int:
        return self._occupied

    def is_full(self) -> bool:
        return self._occupied == self.size

    def empty_cells(self) -> list[tuple[int, int]]:
        """Row-major list of unoccupied coordinates."""
        return [(x, y) for x, y, tile in self.cells() if tile is None]

    def cells(self) -> Iterator[tuple[int, int, Tile | None]]:
        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                yield x, y, self._cells[self._index(x, y)]

    def rows(self) -> tuple[tuple[Tile, ...], ...]:
        """Finished grid as ``height`` rows of ``width`` tiles, row y=1 first."""
        if not self.is_full():
            raise GridIncompleteError(f"grid has {self.size - self._occupied} empty cells")
        w = self.width
        return tuple(
            tuple(self._cells[row * w : (row + 1) * w])  # type: ignore[arg-type]
            for row in range(self.height)
        )
