"""Tests for Parquet export of generated grids."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq
import pytest

from ant_terrain.domain.grid import Grid
from ant_terrain.domain.tiles import Color, Tile
from ant_terrain.io.export import grid_to_table, write_grid_parquet
from ant_terrain.io.paths import default_cells_path, default_image_path, resolve_output_path
from ant_terrain.io.schemas import GRID_CELL_SCHEMA

GRASS = Tile("grass", Color(0x3A, 0x7D, 0x23), Color(0xFF, 0xD7, 0x00))


def _full_grid() -> Grid:
    grid = Grid()
    for y in range(1, 21):
        for x in range(1, 21):
            grid.try_place(x, y, GRASS)
    return grid


def test_table_has_one_row_per_cell() -> None:
    table = grid_to_table(_full_grid())
    assert table.num_rows == 400
    assert table.schema.equals(GRID_CELL_SCHEMA)


def test_table_rows_carry_hex_colors() -> None:
    row = grid_to_table(_full_grid()).slice(0, 1).to_pylist()[0]
    assert row == {"x": 1, "y": 1, "tile": "grass", "color": "#3a7d23", "inner_color": "#ffd700"}


def test_partial_grid_exports_occupied_cells_only() -> None:
    grid = Grid()
    grid.try_place(4, 2, GRASS)
    table = grid_to_table(grid)
    assert table.num_rows == 1
    assert table.column("x").to_pylist() == [4]


def test_write_grid_parquet(tmp_path: Path) -> None:
    out = write_grid_parquet(_full_grid(), tmp_path / "nested" / "cells.parquet")
    assert out.exists()
    table = pq.read_table(out)
    assert table.num_rows == 400
    assert set(table.column("tile").to_pylist()) == {"grass"}


def test_default_paths(tmp_path: Path) -> None:
    assert default_image_path(tmp_path) == tmp_path / "image.png"
    assert default_cells_path(tmp_path) == tmp_path / "cells.parquet"


class TestResolveOutputPath:
    def test_relative_path_lands_in_base(self, tmp_path: Path) -> None:
        resolved = resolve_output_path(Path("out/image.png"), tmp_path)
        assert resolved == tmp_path.resolve() / "out" / "image.png"

    def test_absolute_path_inside_base_is_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "cells.parquet"
        assert resolve_output_path(target, tmp_path) == target.resolve()

    def test_parent_escape_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="outside base dir"):
            resolve_output_path(Path("../out.png"), tmp_path)

    def test_absolute_path_outside_base_rejected(self, tmp_path: Path) -> None:
        base = tmp_path / "base"
        base.mkdir()
        with pytest.raises(ValueError, match="outside base dir"):
            resolve_output_path(tmp_path / "elsewhere.png", base)
