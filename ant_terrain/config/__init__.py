"""Configuration layer: constants and typed config dataclasses.

Tile-definition loading lives in :mod:`ant_terrain.config.loader` and is not
re-exported here, since it depends on the domain layer.
"""

from ant_terrain.config.constants import (
    CELL_PIXELS,
    D4_SIDES,
    D20_SIDES,
    GRID_HEIGHT,
    GRID_WIDTH,
    INNER_MARGIN,
    MAX_MOVE_ATTEMPTS,
    MAX_SEED_ATTEMPTS,
    WILDCARD_ROLLS,
)
from ant_terrain.config.types import CorruptionPolicy, GenerationConfig, RenderConfig

__all__ = [
    "CELL_PIXELS",
    "CorruptionPolicy",
    "D4_SIDES",
    "D20_SIDES",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GenerationConfig",
    "INNER_MARGIN",
    "MAX_MOVE_ATTEMPTS",
    "MAX_SEED_ATTEMPTS",
    "RenderConfig",
    "WILDCARD_ROLLS",
]
