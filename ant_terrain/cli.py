"""CLI entrypoint: load tiles, generate terrain, render, and summarize.

Usage::

    ant-terrain tiles.toml 3 --seed 7 --base-dir out --cells-out

Every output path is resolved inside ``--base-dir`` (default: the current
directory); paths that would land outside it are rejected at startup.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ant_terrain.config.constants import CELL_PIXELS, INNER_MARGIN
from ant_terrain.config.loader import load_registry
from ant_terrain.config.types import CorruptionPolicy, GenerationConfig, RenderConfig
from ant_terrain.domain.errors import GenerationError, TileConfigError
from ant_terrain.io.export import write_grid_parquet
from ant_terrain.io.paths import default_cells_path, default_image_path, resolve_output_path
from ant_terrain.metrics.terrain import largest_region, region_count, tile_counts
from ant_terrain.simulation.engine import TerrainGenerator
from ant_terrain.viz.render import render_legend_figure, save_grid_png

logger = logging.getLogger(__name__)

_DEFAULT_CELLS = object()


def _parse_corruption_policy(raw: str) -> CorruptionPolicy:
    """Parse corruption quota policy from CLI."""
    try:
        return CorruptionPolicy(raw)
    except ValueError as exc:
        valid = ", ".join(policy.value for policy in CorruptionPolicy)
        raise ValueError(f"corruption-policy must be one of {valid}") from exc


def _resolve_outputs(args: argparse.Namespace) -> tuple[Path, Path | None, Path | None]:
    """Resolve image, cell-table and preview paths inside ``args.base_dir``."""
    base_dir = args.base_dir
    image = args.output if args.output is not None else default_image_path(base_dir)
    cells = args.cells_out
    if cells is _DEFAULT_CELLS:
        cells = default_cells_path(base_dir)
    return (
        resolve_output_path(image, base_dir),
        resolve_output_path(cells, base_dir) if cells is not None else None,
        resolve_output_path(args.preview, base_dir) if args.preview is not None else None,
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Grow tile terrain on a grid with random-walking ants"
    )
    parser.add_argument("config", type=Path, help="Tile definition file (.toml or .json)")
    parser.add_argument("num_villages", type=int, help="Number of starting villages (ants)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=Path("."),
        help="Directory every output path must stay within",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Terrain PNG (default: image.png in --base-dir)",
    )
    parser.add_argument(
        "--cells-out",
        type=Path,
        nargs="?",
        const=_DEFAULT_CELLS,
        default=None,
        help="Optional Parquet export of the finished cells (bare flag: cells.parquet)",
    )
    parser.add_argument(
        "--preview",
        type=Path,
        default=None,
        help="Optional preview figure with a tile legend",
    )
    parser.add_argument("--cell-pixels", type=int, default=CELL_PIXELS)
    parser.add_argument("--inner-margin", type=int, default=INNER_MARGIN)
    parser.add_argument(
        "--corruption-policy",
        type=str,
        choices=[policy.value for policy in CorruptionPolicy],
        default=CorruptionPolicy.DECREMENT.value,
    )
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for one generation run.

    Startup problems (unreadable tiles, missing village/corruption tile, bad
    parameters) exit with status 2 before any generation happens.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] - [%(name)s] - [%(levelname)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logger.info("Initialising")

    try:
        policy = _parse_corruption_policy(args.corruption_policy)
        config = GenerationConfig(
            num_villages=args.num_villages, seed=args.seed, max_ticks=args.max_ticks
        )
        render_config = RenderConfig(
            cell_pixels=args.cell_pixels, inner_margin=args.inner_margin
        )
        image_target, cells_target, preview_target = _resolve_outputs(args)
        registry = load_registry(args.config, corruption_policy=policy)
    except TileConfigError as exc:
        parser.error(f"invalid tile config {args.config}: {exc}")
    except ValueError as exc:
        parser.error(str(exc))

    try:
        result = TerrainGenerator(registry, config).run()
    except GenerationError as exc:
        logger.error("Generation failed: %s", exc)
        raise SystemExit(1) from exc

    logger.info("Generating image")
    image_path = save_grid_png(result.grid, image_target, render_config)
    cells_path = (
        write_grid_parquet(result.grid, cells_target) if cells_target is not None else None
    )
    preview_path = (
        render_legend_figure(result.grid, registry, preview_target, render_config)
        if preview_target is not None
        else None
    )

    biggest = largest_region(result.grid)
    summary = {
        "seed": result.seed,
        "num_villages": config.num_villages,
        "city_anchor": list(result.city_anchor),
        "ticks": result.ticks,
        "placements": result.placements,
        "tile_counts": tile_counts(result.grid),
        "region_count": region_count(result.grid),
        "largest_region": {"tile": biggest[0], "cells": biggest[1]} if biggest else None,
        "image": str(image_path),
        "cells": str(cells_path) if cells_path is not None else None,
        "preview": str(preview_path) if preview_path is not None else None,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
