"""Dice primitives driving transitions and ant movement."""

from __future__ import annotations

from random import Random

from ant_terrain.config.constants import D4_SIDES, D20_SIDES

# d4 face -> (dx, dy), cycling N, E, S, W
_D4_OFFSETS: dict[int, tuple[int, int]] = {
    1: (0, 1),
    2: (1, 0),
    3: (0, -1),
    4: (-1, 0),
}


def roll_d20(rng: Random) -> int:
    """Return a uniform integer in [1, 20]."""
    return rng.randint(1, D20_SIDES)


def roll_d4(rng: Random) -> int:
    """Return a uniform integer in [1, 4]."""
    return rng.randint(1, D4_SIDES)


def d4_to_offset(n: int) -> tuple[int, int]:
    """Map a d4 face to an axis-aligned unit step."""
    try:
        return _D4_OFFSETS[n]
    except KeyError as exc:
        raise ValueError(f"d4 face must be in [1, {D4_SIDES}], got {n!r}") from exc
