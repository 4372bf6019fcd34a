"""Domain layer: dice, tiles, transitions, ants, and the grid."""

from ant_terrain.domain.ant import Ant
from ant_terrain.domain.dice import d4_to_offset, roll_d4, roll_d20
from ant_terrain.domain.errors import (
    GenerationError,
    GenerationStalledError,
    GridIncompleteError,
    MissingRoleTileError,
    MovementExhaustedError,
    TileConfigError,
    UnknownTileError,
)
from ant_terrain.domain.grid import Grid
from ant_terrain.domain.tiles import Color, Tile, TileDefinition, TileRegistry, TransitionEntry
from ant_terrain.domain.transitions import resolve_next_tile, roll_transition, scan_table

__all__ = [
    "Ant",
    "Color",
    "GenerationError",
    "GenerationStalledError",
    "Grid",
    "GridIncompleteError",
    "MissingRoleTileError",
    "MovementExhaustedError",
    "Tile",
    "TileConfigError",
    "TileDefinition",
    "TileRegistry",
    "TransitionEntry",
    "UnknownTileError",
    "d4_to_offset",
    "resolve_next_tile",
    "roll_d4",
    "roll_d20",
    "roll_transition",
    "scan_table",
]
