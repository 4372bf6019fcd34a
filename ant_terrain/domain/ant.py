"""Random-walking ants that decide where new terrain is attempted."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from ant_terrain.config.constants import MAX_MOVE_ATTEMPTS
from ant_terrain.domain.dice import d4_to_offset, roll_d4
from ant_terrain.domain.errors import MovementExhaustedError


@dataclass
class Ant:
    """A walker at a 1-indexed grid position."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def advance(
        self,
        rng: Random,
        grid_width: int,
        grid_height: int,
        max_attempts: int = MAX_MOVE_ATTEMPTS,
    ) -> tuple[int, int]:
        """Take one d4 step, re-rolling any step that would leave the grid.

        Rejection sampling rather than clamping: the ant always moves exactly
        one cell. Raises :exc:`MovementExhaustedError` past *max_attempts*.
        """
        for _ in range(max_attempts):
            dx, dy = d4_to_offset(roll_d4(rng))
            nx, ny = self.x + dx, self.y + dy
            if 1 <= nx <= grid_width and 1 <= ny <= grid_height:
                self.x, self.y = nx, ny
                return self.position
        raise MovementExhaustedError(
            f"ant at {self.position} found no in-bounds move in {max_attempts} rolls"
        )
