"""Centralized domain constants for terrain generation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 20
"""Default grid width in cells."""

GRID_HEIGHT = 20
"""Default grid height in cells."""

D20_SIDES = 20
"""Faces on the transition die."""

D4_SIDES = 4
"""Faces on the movement die."""

WILDCARD_ROLLS: tuple[int, ...] = (1, D20_SIDES)
"""d20 results that ignore the source table and pick any tile."""

CITY_RADIUS = 1
"""Half-width of the square city block placed before seeding (3x3)."""

CELL_PIXELS = 10
"""Rendered edge length of one grid cell, in pixels."""

INNER_MARGIN = 3
"""Outer-colour border width inside each rendered cell, in pixels."""

MAX_MOVE_ATTEMPTS = 10_000
"""Safety cap on d4 re-rolls for a single ant move."""

MAX_SEED_ATTEMPTS = 1_000_000
"""Safety cap on coordinate draws when seeding one starting village."""

DEFAULT_IMAGE_NAME = "image.png"
"""Default rendered image filename."""

DEFAULT_CELLS_NAME = "cells.parquet"
"""Default cell-table export filename."""
