"""Output locations for a generation run, confined to one base directory."""

from __future__ import annotations

from pathlib import Path

from ant_terrain.config.constants import DEFAULT_CELLS_NAME, DEFAULT_IMAGE_NAME


def resolve_output_path(path: Path, base_dir: Path) -> Path:
    """Resolve an output *path* against *base_dir* and refuse to leave it.

    Relative paths are taken from *base_dir*; absolute paths must already
    point inside it. Raises :exc:`ValueError` otherwise.
    """
    base = Path(base_dir).resolve()
    resolved = (base / path).resolve()
    if not resolved.is_relative_to(base):
        raise ValueError(f"output path {path} is outside base dir {base}")
    return resolved


def default_image_path(base_dir: Path) -> Path:
    """Where the terrain PNG goes when ``--output`` is not given."""
    return Path(base_dir) / DEFAULT_IMAGE_NAME


def default_cells_path(base_dir: Path) -> Path:
    return Path(base_dir) / DEFAULT_CELLS_NAME
