"""Command-line interface for SparkFX.

Inspects effect-library documents: lists declared shapes and prints the
effect tree (effects, emitters, sub-effects) with resolved sprites.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.tree import Tree

from sparkfx.core.config.loader import configure_logging, load_app_config
from sparkfx.core.config.models import AppConfig
from sparkfx.core.formats.library import (
    EffectDescriptor,
    EffectLibrary,
    LibraryLoadError,
    load_library,
)
from sparkfx.core.parsers.xml import DocumentParseError

console = Console()
logger = logging.getLogger(__name__)


def _add_effect_branch(parent: Tree, effect: EffectDescriptor) -> None:
    """Append an effect and its emitters (recursively) to a rich tree."""
    branch = parent.add(f"[bold]{effect.path}[/bold] [dim]({len(effect.emitters)} emitters)[/dim]")
    for emitter in effect.emitters:
        sprite = emitter.image.filename if emitter.image is not None else "[red]no sprite[/red]"
        emitter_branch = branch.add(f"{emitter.name} -> {sprite}")
        if emitter.sub_effect is not None:
            _add_effect_branch(emitter_branch, emitter.sub_effect)


def render_library(library: EffectLibrary, title: str) -> Tree:
    """Build a rich tree describing a loaded library."""
    tree = Tree(f"[bold cyan]{title}[/bold cyan]")

    shapes = tree.add(f"[bold]Shapes[/bold] ({len(library.sprites)})")
    for sprite in library.sprites:
        shapes.add(
            f"#{sprite.index} {sprite.name} "
            f"[dim]{sprite.width:g}x{sprite.height:g}, {sprite.frames} frames[/dim]"
        )

    effects = tree.add(f"[bold]Effects[/bold] ({len(library.effects)})")
    for effect in library.effects:
        _add_effect_branch(effects, effect)

    return tree


def inspect_library(args: argparse.Namespace) -> int:
    """Load a library and print its contents.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    app_config: AppConfig = load_app_config(args.config)
    if args.log_level:
        app_config = app_config.model_copy(
            update={
                "logging": app_config.logging.model_copy(update={"level": args.log_level.upper()})
            }
        )
    configure_logging(app_config)

    library_path = Path(args.library).resolve()
    if not library_path.exists():
        console.print(f"[red]ERROR: Library file not found: {library_path}[/red]")
        return 1

    offset = args.offset if args.offset is not None else app_config.loader.shape_offset

    try:
        library = load_library(library_path, shape_offset=offset)
    except (OSError, DocumentParseError, LibraryLoadError, ValidationError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    console.print(render_library(library, library_path.name))
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="sparkfx",
        description="SparkFX - particle effect library tools",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    inspect = sub.add_parser("inspect", help="Print the shapes and effect tree of a library")
    inspect.add_argument("library", help="Path to the effect library XML file")
    inspect.add_argument(
        "--offset",
        type=int,
        default=None,
        help="Shape index merge offset (default: from config, else 0)",
    )
    inspect.add_argument(
        "--config",
        default=None,
        help="Path to app config (.json/.yaml); defaults are used if omitted",
    )
    inspect.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Override the configured log level",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_arg_parser().parse_args(argv)

    if args.cmd == "inspect":
        return inspect_library(args)

    return 1


if __name__ == "__main__":
    sys.exit(main())
