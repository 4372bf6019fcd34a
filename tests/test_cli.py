"""Tests for cli.py: argument parsing, startup errors, and end-to-end runs."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pyarrow.parquet as pq
import pytest

from ant_terrain.cli import _parse_corruption_policy, main
from ant_terrain.config.loader import load_registry
from ant_terrain.config.types import CorruptionPolicy

CONFIGS_DIR = Path(__file__).resolve().parents[1] / "configs"

MINIMAL_TOML = """
[[tile]]
name = "village"
color = "#a0522d"
village = true
limit = 5

[[tile]]
name = "wastes"
color = "#4b0082"
corruption = true
limit = 1000
"""


def _write(tmp_path: Path, text: str, name: str = "tiles.toml") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_parse_corruption_policy() -> None:
    assert _parse_corruption_policy("inexhaustible") is CorruptionPolicy.INEXHAUSTIBLE
    with pytest.raises(ValueError, match="corruption-policy must be one of"):
        _parse_corruption_policy("never")


def test_main_without_arguments_exits() -> None:
    with patch.object(sys, "argv", ["ant-terrain"]):
        with pytest.raises(SystemExit):
            main()


def test_main_writes_image_and_prints_summary(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write(tmp_path, MINIMAL_TOML)
    image = tmp_path.resolve() / "out" / "image.png"
    cells = tmp_path.resolve() / "out" / "cells.parquet"
    main(
        [
            str(config),
            "1",
            "--seed",
            "3",
            "--base-dir",
            str(tmp_path),
            "--output",
            "out/image.png",
            "--cells-out",
            str(cells),
        ]
    )
    summary = json.loads(capsys.readouterr().out)
    assert image.exists()
    assert pq.read_table(cells).num_rows == 400
    assert summary["seed"] == 3
    assert summary["placements"] == 400
    assert sum(summary["tile_counts"].values()) == 400
    assert summary["tile_counts"]["village"] <= 5 + 9
    assert summary["image"] == str(image)
    assert summary["cells"] == str(cells)
    assert summary["preview"] is None


def test_main_defaults_outputs_into_base_dir(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write(tmp_path, MINIMAL_TOML)
    main([str(config), "1", "--seed", "4", "--base-dir", str(tmp_path), "--cells-out"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["image"] == str(tmp_path.resolve() / "image.png")
    assert summary["cells"] == str(tmp_path.resolve() / "cells.parquet")
    assert (tmp_path / "image.png").exists()
    assert (tmp_path / "cells.parquet").exists()


def test_output_outside_base_dir_exits_before_generation(tmp_path: Path) -> None:
    config = _write(tmp_path, MINIMAL_TOML)
    base = tmp_path / "base"
    base.mkdir()
    with patch("ant_terrain.cli.TerrainGenerator") as generator:
        with pytest.raises(SystemExit) as excinfo:
            main([str(config), "1", "--base-dir", str(base), "--output", "../escape.png"])
    assert excinfo.value.code == 2
    generator.assert_not_called()
    assert not (tmp_path / "escape.png").exists()


def test_main_is_reproducible_with_seed(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write(tmp_path, MINIMAL_TOML)
    args = [str(config), "2", "--seed", "9", "--base-dir", str(tmp_path), "--output", "a.png"]
    main(args)
    first = json.loads(capsys.readouterr().out)
    main(args)
    second = json.loads(capsys.readouterr().out)
    assert first["tile_counts"] == second["tile_counts"]
    assert first["ticks"] == second["ticks"]


def test_main_writes_preview(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = _write(tmp_path, MINIMAL_TOML)
    main(
        [
            str(config),
            "1",
            "--seed",
            "1",
            "--base-dir",
            str(tmp_path),
            "--output",
            "i.png",
            "--preview",
            "preview.png",
        ]
    )
    preview = tmp_path.resolve() / "preview.png"
    assert preview.exists()
    assert json.loads(capsys.readouterr().out)["preview"] == str(preview)


def test_missing_corruption_tile_exits_before_generation(tmp_path: Path) -> None:
    config = _write(
        tmp_path, '[[tile]]\nname = "v"\ncolor = "#000000"\nvillage = true\nlimit = 1\n'
    )
    with patch("ant_terrain.cli.TerrainGenerator") as generator:
        with pytest.raises(SystemExit) as excinfo:
            main([str(config), "1", "--base-dir", str(tmp_path)])
    assert excinfo.value.code == 2
    generator.assert_not_called()


def test_unreadable_config_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.toml"), "1", "--base-dir", str(tmp_path)])
    assert excinfo.value.code == 2


def test_non_utf8_config_exits(tmp_path: Path) -> None:
    config = tmp_path / "tiles.toml"
    config.write_bytes(b"\xff\xfe not utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main([str(config), "1", "--base-dir", str(tmp_path)])
    assert excinfo.value.code == 2


def test_invalid_village_count_exits(tmp_path: Path) -> None:
    config = _write(tmp_path, MINIMAL_TOML)
    with pytest.raises(SystemExit) as excinfo:
        main([str(config), "0", "--base-dir", str(tmp_path)])
    assert excinfo.value.code == 2


def test_tick_cap_reports_failure(tmp_path: Path) -> None:
    config = _write(tmp_path, MINIMAL_TOML)
    output = tmp_path / "x.png"
    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                str(config),
                "1",
                "--seed",
                "0",
                "--max-ticks",
                "2",
                "--base-dir",
                str(tmp_path),
                "--output",
                "x.png",
            ]
        )
    assert excinfo.value.code == 1
    assert not output.exists()


def test_shipped_config_loads_and_generates(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    registry = load_registry(CONFIGS_DIR / "fantasy.toml")
    assert registry.village.name == "village"
    assert registry.corruption.name == "blight"
    assert registry.tower is not None
    config = CONFIGS_DIR / "fantasy.toml"
    main([str(config), "4", "--seed", "5", "--base-dir", str(tmp_path)])
    summary = json.loads(capsys.readouterr().out)
    assert sum(summary["tile_counts"].values()) == 400
