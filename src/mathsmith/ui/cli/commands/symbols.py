"""Implementation of the ``mathsmith symbols`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich import box
from rich.table import Table
from rich.text import Text
import typer

from mathsmith.adapters.latex.symbols import build_symbol_table
from mathsmith.core.config import RenderConfig

from .._options import ConfigOption
from ..state import get_cli_state


def _collect_entries(config_path: Path | None, pattern: str | None) -> list[tuple[str, str]]:
    config = RenderConfig.from_file(config_path) if config_path is not None else RenderConfig()
    table = build_symbol_table(config.symbols)
    entries = [(tag or "(none)", value) for tag, value in table.items()]
    if pattern:
        needle = pattern.lower()
        entries = [entry for entry in entries if needle in entry[0].lower()]
    return entries


def symbols(
    pattern: Annotated[
        str | None,
        typer.Option(
            "--filter",
            help="Only list tags containing this text (case-insensitive).",
        ),
    ] = None,
    config_path: ConfigOption = None,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Print tab-separated rows instead of a table."),
    ] = False,
) -> None:
    """List the symbol table used to translate atomic tags."""

    entries = _collect_entries(config_path, pattern)

    if plain:
        for tag, value in entries:
            typer.echo(f"{tag}\t{value}")
        return

    table = Table(
        title="Symbol Table",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Tag", style="magenta")
    table.add_column("LaTeX", style="green")

    if not entries:
        table.add_row("-", "No symbols found")
    else:
        for tag, value in entries:
            table.add_row(Text(tag), Text(value))

    get_cli_state().console.print(table)


__all__ = ["symbols"]
