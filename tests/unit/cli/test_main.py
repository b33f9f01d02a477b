"""Unit tests for the sparkfx CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from sparkfx.cli.main import build_arg_parser, main, render_library
from sparkfx.core.formats.library import load_library


def _render_text(tree) -> str:
    console = Console(record=True, width=200)
    console.print(tree)
    return console.export_text()


def test_arg_parser_inspect_defaults() -> None:
    """Inspect takes a library path with optional overrides."""
    args = build_arg_parser().parse_args(["inspect", "lib.xml"])

    assert args.cmd == "inspect"
    assert args.library == "lib.xml"
    assert args.offset is None
    assert args.config is None
    assert args.log_level is None


def test_arg_parser_inspect_options() -> None:
    args = build_arg_parser().parse_args(
        ["inspect", "lib.xml", "--offset", "12", "--log-level", "debug"]
    )

    assert args.offset == 12
    assert args.log_level == "debug"


def test_arg_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args([])


def test_render_library_lists_shapes_and_tree(folders_library: Path) -> None:
    """Rendered tree shows sprites, nested effects and resolved emitter sprites."""
    text = _render_text(render_library(load_library(folders_library), "folders.xml"))

    assert "Shapes (3)" in text
    assert "#5 spark" in text
    assert "Effects (3)" in text
    assert "Fire/Flame" in text
    assert "Sparks -> sprites/spark.png" in text
    assert "Fire/Flame/Sparks/Burst" in text


def test_render_library_marks_missing_sprites(flat_library: Path) -> None:
    text = _render_text(render_library(load_library(flat_library), "flat.xml"))

    assert "Puff -> no sprite" in text


def test_main_inspect_success(folders_library: Path) -> None:
    assert main(["inspect", str(folders_library), "--log-level", "warning"]) == 0


def test_main_inspect_missing_file(tmp_path: Path) -> None:
    assert main(["inspect", str(tmp_path / "missing.xml")]) == 1


@pytest.mark.parametrize("name", ["malformed.xml", "wrong_root.xml"])
def test_main_inspect_invalid_document(libraries_dir: Path, name: str) -> None:
    assert main(["inspect", str(libraries_dir / name)]) == 1


def test_main_inspect_reads_offset_from_config(folders_library: Path, tmp_path: Path) -> None:
    config = tmp_path / "sparkfx.yaml"
    config.write_text("loader:\n  shape_offset: 100\n", encoding="utf-8")

    assert main(["inspect", str(folders_library), "--config", str(config)]) == 0


def test_main_inspect_rejects_negative_offset(folders_library: Path) -> None:
    assert main(["inspect", str(folders_library), "--offset", "-5"]) == 1


def test_main_inspect_directory(tmp_path: Path) -> None:
    assert main(["inspect", str(tmp_path)]) == 1
