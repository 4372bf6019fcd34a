"""Tile definitions, placed-tile snapshots, and the tile registry.

The registry is the single owner of quota state. Every other component refers
to tiles by name and only the registry mutates ``TileDefinition.quota``, so a
placed :class:`Tile` never changes after it lands on the grid.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NamedTuple

from ant_terrain.config.types import CorruptionPolicy
from ant_terrain.domain.errors import MissingRoleTileError, TileConfigError, UnknownTileError

_HEX_COLOR_RE = re.compile(r"#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")


class Color(NamedTuple):
    """8-bit RGB triple."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, raw: str) -> Color:
        """Parse ``#RRGGBB``; anything else raises :exc:`TileConfigError`."""
        match = _HEX_COLOR_RE.fullmatch(raw) if isinstance(raw, str) else None
        if match is None:
            raise TileConfigError(f"color must be '#RRGGBB', got {raw!r}")
        return cls(*(int(part, 16) for part in match.groups()))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class TransitionEntry:
    """One weighted row of a transition table: d20 in [lower, upper] -> target."""

    target: str
    lower: int
    upper: int

    def matches(self, roll: int) -> bool:
        return self.lower <= roll <= self.upper


@dataclass(frozen=True)
class Tile:
    """Immutable snapshot of a tile as placed on the grid."""

    name: str
    color: Color
    inner_color: Color


@dataclass
class TileDefinition:
    """A terrain type with rendering colours, remaining quota, and transitions."""

    name: str
    color: Color
    quota: int
    inner_color: Color | None = None
    village: bool = False
    tower: bool = False
    corruption: bool = False
    transitions: tuple[TransitionEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.quota < 0:
            raise TileConfigError(f"tile {self.name!r}: limit must be >= 0")
        if self.inner_color is None:
            self.inner_color = self.color

    def snapshot(self) -> Tile:
        """Copy identity and colours into a placeable :class:`Tile`."""
        inner = self.inner_color if self.inner_color is not None else self.color
        return Tile(name=self.name, color=self.color, inner_color=inner)


def _first_with_role(definitions: Iterable[TileDefinition], role: str) -> TileDefinition | None:
    return next((d for d in definitions if getattr(d, role)), None)


class TileRegistry:
    """Name-indexed arena of tile definitions in declaration order."""

    def __init__(
        self,
        definitions: Iterable[TileDefinition],
        corruption_policy: CorruptionPolicy = CorruptionPolicy.DECREMENT,
    ) -> None:
        self._tiles: dict[str, TileDefinition] = {}
        for definition in definitions:
            if definition.name in self._tiles:
                raise TileConfigError(f"duplicate tile name: {definition.name!r}")
            self._tiles[definition.name] = definition
        for definition in self._tiles.values():
            for entry in definition.transitions:
                if entry.target not in self._tiles:
                    raise UnknownTileError(entry.target)

        village = _first_with_role(self._tiles.values(), "village")
        if village is None:
            raise MissingRoleTileError("village")
        corruption = _first_with_role(self._tiles.values(), "corruption")
        if corruption is None:
            raise MissingRoleTileError("corruption")
        self.village: TileDefinition = village
        self.corruption: TileDefinition = corruption
        self.tower: TileDefinition | None = _first_with_role(self._tiles.values(), "tower")
        self.corruption_policy = corruption_policy

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[TileDefinition]:
        return iter(self._tiles.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tiles

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._tiles)

    def get(self, name: str) -> TileDefinition:
        try:
            return self._tiles[name]
        except KeyError:
            raise UnknownTileError(name) from None

    def remaining(self, name: str) -> int:
        return self.get(name).quota

    def quota_snapshot(self) -> Mapping[str, int]:
        """Read-only view of every tile's remaining quota at call time.

        Under ``CorruptionPolicy.INEXHAUSTIBLE`` the corruption tile always
        reports at least one placement left.
        """
        quotas = {name: d.quota for name, d in self._tiles.items()}
        if self.corruption_policy is CorruptionPolicy.INEXHAUSTIBLE:
            quotas[self.corruption.name] = max(quotas[self.corruption.name], 1)
        return MappingProxyType(quotas)

    def consume(self, name: str) -> bool:
        """Spend one placement of *name*; never drops below zero.

        Returns True when the quota was actually decremented.
        """
        definition = self.get(name)
        if (
            definition is self.corruption
            and self.corruption_policy is CorruptionPolicy.INEXHAUSTIBLE
        ):
            return False
        if definition.quota == 0:
            return False
        definition.quota -= 1
        return True
