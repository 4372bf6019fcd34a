"""Configuration dataclasses for generation and rendering runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ant_terrain.config.constants import (
    CELL_PIXELS,
    CITY_RADIUS,
    GRID_HEIGHT,
    GRID_WIDTH,
    INNER_MARGIN,
)

__all__ = [
    "CorruptionPolicy",
    "GenerationConfig",
    "RenderConfig",
]


class CorruptionPolicy(Enum):
    """Quota accounting applied to the corruption fallback tile."""

    DECREMENT = "decrement"
    INEXHAUSTIBLE = "inexhaustible"


@dataclass(frozen=True)
class GenerationConfig:
    """Runtime parameters for one terrain generation run."""

    num_villages: int = 1
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    seed: int | None = None
    max_ticks: int | None = None
    """Growth tick cap; ``None`` runs until the grid is full."""

    def __post_init__(self) -> None:
        if self.num_villages < 1:
            raise ValueError("num_villages must be >= 1")
        min_edge = 2 * CITY_RADIUS + 1
        if self.grid_width < min_edge or self.grid_height < min_edge:
            raise ValueError(f"grid dimensions must be >= {min_edge}")
        city_cells = min_edge * min_edge
        if self.num_villages > self.grid_width * self.grid_height - city_cells:
            raise ValueError("num_villages cannot exceed cells left after city placement")
        if self.max_ticks is not None and self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")


@dataclass(frozen=True)
class RenderConfig:
    """Raster geometry for turning a finished grid into pixels."""

    cell_pixels: int = CELL_PIXELS
    inner_margin: int = INNER_MARGIN

    def __post_init__(self) -> None:
        if self.cell_pixels < 1:
            raise ValueError("cell_pixels must be >= 1")
        if self.inner_margin < 0:
            raise ValueError("inner_margin must be >= 0")
        if 2 * self.inner_margin >= self.cell_pixels:
            raise ValueError("inner_margin leaves no room for the inner colour")
