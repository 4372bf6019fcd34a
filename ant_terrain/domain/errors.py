"""Exception hierarchy for tile configuration and terrain generation."""

from __future__ import annotations


class TileConfigError(ValueError):
    """Tile-definition document is unreadable, unparseable, or invalid."""


class UnknownTileError(TileConfigError, KeyError):
    """A tile name does not resolve to any registered definition."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown tile: {name!r}")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MissingRoleTileError(TileConfigError):
    """No tile carries a required role flag (village or corruption)."""

    def __init__(self, role: str) -> None:
        super().__init__(f"no tile is flagged as {role}")
        self.role = role


class GenerationError(RuntimeError):
    """Generation could not make progress."""


class MovementExhaustedError(GenerationError):
    """An ant drew no in-bounds move within the retry cap."""


class GenerationStalledError(GenerationError):
    """Seeding or growth exceeded its retry or tick cap."""


class GridIncompleteError(ValueError):
    """A grid with empty cells was handed to a consumer needing a full grid."""
