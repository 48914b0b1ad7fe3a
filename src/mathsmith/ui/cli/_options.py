"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
RENDERING_PANEL = "Rendering"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

InputPathArgument = Annotated[
    Path | None,
    typer.Argument(
        metavar="INPUT",
        help=(
            "Expression tree document (.json, .yaml or .yml). "
            "The tree is read from standard input when omitted."
        ),
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        show_default=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

InputFormatOption = Annotated[
    str,
    typer.Option(
        "--format",
        "-f",
        help="Format of the tree read from standard input: json or yaml.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file providing render settings (separator, max_depth, symbols...).",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=RENDERING_PANEL,
    ),
]

SeparatorOption = Annotated[
    str | None,
    typer.Option(
        "--separator",
        help="Text inserted between sequence items (defaults to a single space).",
        rich_help_panel=RENDERING_PANEL,
    ),
]

MaxDepthOption = Annotated[
    int | None,
    typer.Option(
        "--max-depth",
        min=1,
        help="Maximum nesting depth accepted before rendering is aborted.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

LegacyAccentsOption = Annotated[
    bool | None,
    typer.Option(
        "--legacy-accents/--unicode-accents",
        help="Escape accented characters with legacy LaTeX macros instead of keeping Unicode.",
        show_default=False,
        rich_help_panel=RENDERING_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the LaTeX output to this file instead of standard output.",
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "DIAGNOSTICS_PANEL",
    "INPUTS_PANEL",
    "OUTPUT_PANEL",
    "RENDERING_PANEL",
    "ConfigOption",
    "DebugOption",
    "InputFormatOption",
    "InputPathArgument",
    "LegacyAccentsOption",
    "MaxDepthOption",
    "OutputPathOption",
    "SeparatorOption",
    "VerbosityOption",
]
