"""I/O layer: cell-table schema, Parquet export, and output paths."""

from ant_terrain.io.export import grid_to_table, write_grid_parquet
from ant_terrain.io.paths import default_cells_path, default_image_path, resolve_output_path
from ant_terrain.io.schemas import GRID_CELL_SCHEMA, GRID_SCHEMA_VERSION

__all__ = [
    "GRID_CELL_SCHEMA",
    "GRID_SCHEMA_VERSION",
    "default_cells_path",
    "default_image_path",
    "grid_to_table",
    "resolve_output_path",
    "write_grid_parquet",
]
