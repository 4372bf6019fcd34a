"""Tile-definition document loading.

Documents hold a ``tile`` list of records, written as ``[[tile]]`` tables in
TOML or as ``{"tile": [...]}`` in JSON::

    [[tile]]
    name = "grass"
    color = "#3a7d23"
    limit = 120
    nextgen = [
        { name = "forest", lower = 2, upper = 8 },
        { name = "grass", lower = 9, upper = 19 },
    ]
"""

from __future__ import annotations

import json
import logging
import math
import tomllib
from pathlib import Path

from ant_terrain.config.constants import D20_SIDES
from ant_terrain.config.types import CorruptionPolicy
from ant_terrain.domain.errors import TileConfigError
from ant_terrain.domain.tiles import Color, TileDefinition, TileRegistry, TransitionEntry

logger = logging.getLogger(__name__)

_TILE_KEYS = frozenset(
    {"name", "color", "inner_color", "village", "tower", "corruption", "limit", "nextgen"}
)
_NEXTGEN_KEYS = frozenset({"name", "lower", "upper"})


def _coerce_bool(raw: object, key: str) -> bool:
    """Accept only real booleans; TOML and JSON both have them."""
    if isinstance(raw, bool):
        return raw
    raise TileConfigError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-finite or fractional floats."""
    if isinstance(raw, bool):
        raise TileConfigError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if not math.isfinite(raw) or raw != int(raw):
            raise TileConfigError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, int):
        return raw
    raise TileConfigError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    if not isinstance(raw, str) or not raw:
        raise TileConfigError(f"{key} must be a non-empty string")
    return raw


def _check_keys(record: dict[str, object], allowed: frozenset[str], where: str) -> None:
    unknown = sorted(set(record) - allowed)
    if unknown:
        raise TileConfigError(f"{where}: unknown keys {', '.join(unknown)}")


def _parse_transition(raw: object, where: str) -> TransitionEntry:
    if not isinstance(raw, dict):
        raise TileConfigError(f"{where} must be a table")
    _check_keys(raw, _NEXTGEN_KEYS, where)
    try:
        target = _coerce_str(raw["name"], f"{where}.name")
        lower = _coerce_int(raw["lower"], f"{where}.lower")
        upper = _coerce_int(raw["upper"], f"{where}.upper")
    except KeyError as exc:
        raise TileConfigError(f"{where}: missing key {exc.args[0]!r}") from None
    if not 1 <= lower <= upper <= D20_SIDES:
        raise TileConfigError(f"{where}: need 1 <= lower <= upper <= {D20_SIDES}")
    return TransitionEntry(target=target, lower=lower, upper=upper)


def parse_tile(raw: object, index: int = 0) -> TileDefinition:
    """Build one :class:`TileDefinition` from a decoded record."""
    where = f"tile[{index}]"
    if not isinstance(raw, dict):
        raise TileConfigError(f"{where} must be a table")
    _check_keys(raw, _TILE_KEYS, where)
    try:
        name = _coerce_str(raw["name"], f"{where}.name")
        color = Color.from_hex(raw["color"])
        limit = _coerce_int(raw["limit"], f"{where}.limit")
    except KeyError as exc:
        raise TileConfigError(f"{where}: missing key {exc.args[0]!r}") from None
    inner_raw = raw.get("inner_color")
    nextgen = raw.get("nextgen", [])
    if not isinstance(nextgen, list):
        raise TileConfigError(f"{where}.nextgen must be a list")
    return TileDefinition(
        name=name,
        color=color,
        inner_color=Color.from_hex(inner_raw) if inner_raw is not None else None,
        quota=limit,
        village=_coerce_bool(raw.get("village", False), f"{where}.village"),
        tower=_coerce_bool(raw.get("tower", False), f"{where}.tower"),
        corruption=_coerce_bool(raw.get("corruption", False), f"{where}.corruption"),
        transitions=tuple(
            _parse_transition(entry, f"{where}.nextgen[{i}]") for i, entry in enumerate(nextgen)
        ),
    )


def parse_document(document: object) -> list[TileDefinition]:
    """Parse a decoded ``{"tile": [...]}`` document."""
    if not isinstance(document, dict) or "tile" not in document:
        raise TileConfigError("document must contain a 'tile' list")
    records = document["tile"]
    if not isinstance(records, list) or not records:
        raise TileConfigError("'tile' must be a non-empty list")
    return [parse_tile(record, i) for i, record in enumerate(records)]


def load_tile_definitions(path: Path) -> list[TileDefinition]:
    """Read and parse a TOML or JSON tile-definition file."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in {".toml", ".json"}:
        raise TileConfigError(f"unsupported config format: {path.suffix or '<none>'}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TileConfigError(f"cannot read {path}: {exc}") from exc
    try:
        document = tomllib.loads(text) if suffix == ".toml" else json.loads(text)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise TileConfigError(f"cannot parse {path}: {exc}") from exc
    definitions = parse_document(document)
    logger.debug("Loaded %d tile definitions from %s", len(definitions), path)
    return definitions


def load_registry(
    path: Path, corruption_policy: CorruptionPolicy = CorruptionPolicy.DECREMENT
) -> TileRegistry:
    """Load a tile file and resolve it into a :class:`TileRegistry`."""
    return TileRegistry(load_tile_definitions(path), corruption_policy=corruption_policy)
