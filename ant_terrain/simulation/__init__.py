"""Simulation layer: the terrain generation driver."""

from ant_terrain.simulation.engine import (
    GenerationPhase,
    GenerationResult,
    TerrainGenerator,
    generate_terrain,
)

__all__ = [
    "GenerationPhase",
    "GenerationResult",
    "TerrainGenerator",
    "generate_terrain",
]
