"""Implementation of the ``mathsmith render`` command."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

import click
from pydantic import ValidationError
import typer

from mathsmith.adapters.latex import LaTeXRenderer
from mathsmith.core.config import RenderConfig
from mathsmith.core.exceptions import MathRenderingError, exception_hint
from mathsmith.core.loader import load_tree_file, parse_tree
from mathsmith.core.nodes import Expression

from .._options import (
    ConfigOption,
    DebugOption,
    InputFormatOption,
    InputPathArgument,
    LegacyAccentsOption,
    MaxDepthOption,
    OutputPathOption,
    SeparatorOption,
    VerbosityOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error, set_cli_state


logger = logging.getLogger(__name__)

_STDIN_FORMATS = ("json", "yaml")


def _load_config(
    config_path: Path | None,
    *,
    separator: str | None,
    max_depth: int | None,
    legacy_accents: bool | None,
) -> RenderConfig:
    base = RenderConfig.from_file(config_path) if config_path is not None else RenderConfig()
    return base.merged(
        separator=separator,
        max_depth=max_depth,
        legacy_latex_accents=legacy_accents,
    )


def _read_tree(input_path: Path | None, input_format: str) -> Expression:
    if input_path is not None:
        return load_tree_file(input_path)
    if sys.stdin is None or sys.stdin.isatty():
        raise typer.BadParameter("Provide an INPUT document or pipe a tree on standard input.")
    return parse_tree(sys.stdin.read(), fmt=input_format)


def render(
    input_path: InputPathArgument = None,
    output: OutputPathOption = None,
    input_format: InputFormatOption = "yaml",
    config_path: ConfigOption = None,
    separator: SeparatorOption = None,
    max_depth: MaxDepthOption = None,
    legacy_accents: LegacyAccentsOption = None,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
) -> None:
    """Render an expression tree document into LaTeX."""

    ctx = click.get_current_context(silent=True)
    typer_ctx = ctx if isinstance(ctx, typer.Context) else None
    state = set_cli_state(ctx=typer_ctx, verbosity=verbose, debug=debug)

    if input_format not in _STDIN_FORMATS:
        raise typer.BadParameter(
            f"Unsupported format '{input_format}', expected one of: {', '.join(_STDIN_FORMATS)}."
        )

    try:
        config = _load_config(
            config_path,
            separator=separator,
            max_depth=max_depth,
            legacy_accents=legacy_accents,
        )
    except (OSError, ValueError, ValidationError) as exc:
        emit_error(f"Invalid render configuration: {exception_hint(exc)}", exception=exc)
        raise typer.Exit(code=1) from exc

    try:
        tree = _read_tree(input_path, input_format)
    except MathRenderingError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    emitter = CliEmitter(state=state)
    try:
        latex = LaTeXRenderer(config).render(tree, emitter=emitter)
    except MathRenderingError as exc:
        if state.show_tracebacks:
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(latex)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(latex + "\n", encoding="utf-8")
    logger.info("Wrote LaTeX output to %s", output)
    if state.verbosity >= 1:
        state.err_console.log(f"Wrote LaTeX output to {output}")


__all__ = ["render"]
