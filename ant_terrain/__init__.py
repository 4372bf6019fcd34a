"""Ant-driven procedural tile terrain generation."""

from ant_terrain.config.types import CorruptionPolicy, GenerationConfig, RenderConfig
from ant_terrain.domain.grid import Grid
from ant_terrain.domain.tiles import Tile, TileDefinition, TileRegistry
from ant_terrain.simulation.engine import GenerationResult, TerrainGenerator, generate_terrain

__all__ = [
    "CorruptionPolicy",
    "GenerationConfig",
    "GenerationResult",
    "Grid",
    "RenderConfig",
    "TerrainGenerator",
    "Tile",
    "TileDefinition",
    "TileRegistry",
    "generate_terrain",
]
