"""Export a finished grid as an Arrow table / Parquet file."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from ant_terrain.domain.grid import Grid
from ant_terrain.io.schemas import GRID_CELL_SCHEMA


def grid_to_table(grid: Grid) -> pa.Table:
    """One row per occupied cell in row-major order."""
    columns: dict[str, list[int | str]] = {name: [] for name in GRID_CELL_SCHEMA.names}
    for x, y, tile in grid.cells():
        if tile is None:
            continue
        columns["x"].append(x)
        columns["y"].append(y)
        columns["tile"].append(tile.name)
        columns["color"].append(tile.color.to_hex())
        columns["inner_color"].append(tile.inner_color.to_hex())
    return pa.Table.from_pydict(columns, schema=GRID_CELL_SCHEMA)


def write_grid_parquet(grid: Grid, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(grid_to_table(grid), path)
    return path
