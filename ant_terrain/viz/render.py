"""Rasterize a finished grid into pixels, PNG files, and legend previews."""

from __future__ import annotations

from pathlib import Path

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Patch

from ant_terrain.config.types import RenderConfig
from ant_terrain.domain.grid import Grid
from ant_terrain.domain.tiles import TileRegistry

DEFAULT_RENDER = RenderConfig()


def grid_to_pixels(grid: Grid, config: RenderConfig = DEFAULT_RENDER) -> np.ndarray:
    """Return an (H*cell, W*cell, 3) uint8 image of *grid*.

    Each cell is filled with its outer colour, then the central square
    ``[margin, cell - margin - 1]`` on both axes with its inner colour.
    Row y=1 is drawn at the top. Raises GridIncompleteError on empty cells.
    """
    rows = grid.rows()
    cell = config.cell_pixels
    lo, hi = config.inner_margin, cell - config.inner_margin
    pixels = np.zeros((grid.height * cell, grid.width * cell, 3), dtype=np.uint8)
    for row_idx, row in enumerate(rows):
        for col_idx, tile in enumerate(row):
            top, left = row_idx * cell, col_idx * cell
            block = pixels[top : top + cell, left : left + cell]
            block[:, :] = tile.color
            block[lo:hi, lo:hi] = tile.inner_color
    return pixels


def save_grid_png(grid: Grid, output_path: Path, config: RenderConfig = DEFAULT_RENDER) -> Path:
    """Write the rasterized grid as a PNG at native resolution."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    mpimg.imsave(output_path, grid_to_pixels(grid, config), format="png")
    return output_path


def _build_tile_legend_handles(grid: Grid, registry: TileRegistry) -> list[Patch]:
    """One legend patch per tile type present, in registry order."""
    present = {tile.name for _, _, tile in grid.cells() if tile is not None}
    handles = []
    for definition in registry:
        if definition.name not in present:
            continue
        handles.append(
            Patch(
                facecolor=np.array(definition.color) / 255.0,
                edgecolor="gray",
                label=definition.name,
            )
        )
    return handles


def render_legend_figure(
    grid: Grid,
    registry: TileRegistry,
    output_path: Path,
    config: RenderConfig = DEFAULT_RENDER,
    title: str | None = None,
) -> Path:
    """Save a preview figure: the terrain image plus a tile legend."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(6, 5))
    ax.imshow(grid_to_pixels(grid, config), origin="upper", interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)
    ax.legend(
        handles=_build_tile_legend_handles(grid, registry),
        loc="center left",
        bbox_to_anchor=(1.02, 0.5),
        fontsize=8,
        frameon=False,
    )
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
