"""Generation driver: city placement, village seeding, and ant-driven growth."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from ant_terrain.config.constants import CITY_RADIUS, MAX_SEED_ATTEMPTS
from ant_terrain.config.types import GenerationConfig
from ant_terrain.domain.ant import Ant
from ant_terrain.domain.dice import roll_d20
from ant_terrain.domain.errors import GenerationError, GenerationStalledError
from ant_terrain.domain.grid import Grid
from ant_terrain.domain.tiles import TileRegistry
from ant_terrain.domain.transitions import resolve_next_tile

logger = logging.getLogger(__name__)


class GenerationPhase(str, Enum):
    """Lifecycle of one :class:`TerrainGenerator`."""

    INIT = "init"
    CITY_PLACED = "city_placed"
    VILLAGES_SEEDED = "villages_seeded"
    GROWING = "growing"
    COMPLETE = "complete"


@dataclass(frozen=True)
class GenerationResult:
    """Finished grid plus bookkeeping from one run."""

    grid: Grid
    ants: tuple[Ant, ...]
    city_anchor: tuple[int, int]
    ticks: int
    placements: int
    seed: int | None


class TerrainGenerator:
    """Drive one run from an empty grid to a full one.

    The steps may be called one at a time (``place_city``, ``seed_villages``,
    ``grow``) or all at once via ``run``. Each step requires the phase left by
    the previous one.
    """

    def __init__(self, registry: TileRegistry, config: GenerationConfig | None = None) -> None:
        self.registry = registry
        self.config = config or GenerationConfig()
        self.rng = random.Random(self.config.seed)
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        self.ants: list[Ant] = []
        self.phase = GenerationPhase.INIT
        self.city_anchor: tuple[int, int] | None = None
        self.ticks = 0
        self.placements = 0

    def _require(self, phase: GenerationPhase) -> None:
        if self.phase is not phase:
            raise RuntimeError(f"expected phase {phase.value}, generator is in {self.phase.value}")

    def _draw_coordinate(self, limit: int) -> int:
        # d20 rejection up to 20 cells per axis; wider grids use randint
        if limit <= 20:
            while True:
                value = roll_d20(self.rng)
                if value <= limit:
                    return value
        return self.rng.randint(1, limit)

    def place_city(self) -> tuple[int, int]:
        """Stamp a 3x3 block of the village tile around a random interior anchor.

        City cells are free: no quota is spent on them.
        """
        self._require(GenerationPhase.INIT)
        logger.info("Placing city")
        lo = 1 + CITY_RADIUS
        hi_x = self.grid.width - CITY_RADIUS
        hi_y = self.grid.height - CITY_RADIUS
        while True:
            ax = self._draw_coordinate(self.grid.width)
            ay = self._draw_coordinate(self.grid.height)
            if lo <= ax <= hi_x and lo <= ay <= hi_y:
                break
        tile = self.registry.village.snapshot()
        for dy in range(-CITY_RADIUS, CITY_RADIUS + 1):
            for dx in range(-CITY_RADIUS, CITY_RADIUS + 1):
                if self.grid.try_place(ax + dx, ay + dy, tile):
                    self.placements += 1
        self.city_anchor = (ax, ay)
        self.phase = GenerationPhase.CITY_PLACED
        logger.debug("City anchored at %s", self.city_anchor)
        return self.city_anchor

    def seed_villages(self) -> list[Ant]:
        """Place each starting village on an empty cell and spawn an ant there."""
        self._require(GenerationPhase.CITY_PLACED)
        logger.info("Placing %d starting villages", self.config.num_villages)
        village = self.registry.village
        for _ in range(self.config.num_villages):
            if self.grid.is_full():
                raise GenerationStalledError("no empty cell left for a starting village")
            for _attempt in range(MAX_SEED_ATTEMPTS):
                x = self._draw_coordinate(self.grid.width)
                y = self._draw_coordinate(self.grid.height)
                if self.grid.get(x, y) is None:
                    break
            else:
                raise GenerationStalledError(
                    f"no empty cell found in {MAX_SEED_ATTEMPTS} draws"
                )
            self.grid.try_place(x, y, village.snapshot())
            self.registry.consume(village.name)
            self.placements += 1
            self.ants.append(Ant(x, y))
        self.phase = GenerationPhase.VILLAGES_SEEDED
        return self.ants

    def tick(self) -> int:
        """Move every ant once and attempt one placement each.

        Returns the number of successful placements this tick.
        """
        placed = 0
        for ant in self.ants:
            prior = self.grid.get(ant.x, ant.y)
            if prior is None:
                raise GenerationError(f"ant at {ant.position} stands on an empty cell")
            source = self.registry.get(prior.name)
            ant.advance(self.rng, self.grid.width, self.grid.height)
            nxt = resolve_next_tile(source, self.registry, self.rng)
            if self.grid.try_place(ant.x, ant.y, nxt.snapshot()):
                self.registry.consume(nxt.name)
                placed += 1
        self.ticks += 1
        self.placements += placed
        return placed

    def grow(self) -> Grid:
        """Tick until the grid is full (or ``max_ticks`` is exceeded)."""
        self._require(GenerationPhase.VILLAGES_SEEDED)
        logger.info("Moving ants")
        self.phase = GenerationPhase.GROWING
        max_ticks = self.config.max_ticks
        while not self.grid.is_full():
            if max_ticks is not None and self.ticks >= max_ticks:
                raise GenerationStalledError(
                    f"grid still has {self.grid.size - self.grid.occupied_count} "
                    f"empty cells after {self.ticks} ticks"
                )
            self.tick()
        self.phase = GenerationPhase.COMPLETE
        logger.info("Grid complete after %d ticks", self.ticks)
        return self.grid

    def run(self) -> GenerationResult:
        anchor = self.place_city()
        self.seed_villages()
        self.grow()
        return GenerationResult(
            grid=self.grid,
            ants=tuple(self.ants),
            city_anchor=anchor,
            ticks=self.ticks,
            placements=self.placements,
            seed=self.config.seed,
        )


def generate_terrain(
    registry: TileRegistry, config: GenerationConfig | None = None
) -> GenerationResult:
    """Run a full generation and return the finished grid."""
    return TerrainGenerator(registry, config).run()
