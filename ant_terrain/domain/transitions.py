"""Weighted d20 tile transitions with wildcard rolls and quota decay.

A roll of 1 or 20 ignores the source table and draws uniformly from every
known tile. Otherwise the source table is scanned in declaration order and
the last matching range wins. When the chosen tile has no quota left, the
roll decays by one and the lookup repeats; reaching 1 forces the corruption
tile.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from random import Random

from ant_terrain.config.constants import WILDCARD_ROLLS
from ant_terrain.domain.dice import roll_d20
from ant_terrain.domain.tiles import TileDefinition, TileRegistry, TransitionEntry


def scan_table(transitions: Sequence[TransitionEntry], roll: int) -> str | None:
    """Return the target of the last entry whose range contains *roll*."""
    target: str | None = None
    for entry in transitions:
        if entry.matches(roll):
            target = entry.target
    return target


def roll_transition(
    transitions: Sequence[TransitionEntry],
    candidates: Sequence[str],
    remaining: Mapping[str, int],
    corruption: str,
    rng: Random,
    roll: int | None = None,
) -> str:
    """Resolve the next tile name from a source table and a quota snapshot.

    *candidates* is the wildcard pool (every registered tile, in a stable
    order). Passing *roll* skips the initial d20 draw.
    """
    if not candidates:
        raise ValueError("candidates must not be empty")
    r = roll_d20(rng) if roll is None else roll
    target = corruption
    while True:
        if r in WILDCARD_ROLLS:
            target = rng.choice(candidates)
        else:
            matched = scan_table(transitions, r)
            if matched is not None:
                target = matched
        if remaining[target] != 0:
            return target
        r -= 1
        if r <= 1:
            return corruption


def resolve_next_tile(
    source: TileDefinition, registry: TileRegistry, rng: Random
) -> TileDefinition:
    """Pick the definition to attempt next after *source*."""
    name = roll_transition(
        source.transitions,
        registry.names,
        registry.quota_snapshot(),
        registry.corruption.name,
        rng,
    )
    return registry.get(name)
