"""Per-invocation console state for the mathsmith CLI.

Commands keep a :class:`CLIState` on the click context. Code running outside
of a command (the ``main`` error handler, diagnostic emitters) reads the most
recent state back from a context variable.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys

import click
from rich.console import Console
from rich.text import Text

from mathsmith.core.exceptions import exception_messages


__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]

_LEVEL_STYLES = {"error": "red", "warning": "yellow"}


@dataclass(slots=True)
class CLIState:
    """Verbosity and traceback settings plus the consoles they apply to."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _console: Console | None = field(default=None, init=False, repr=False)
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def console(self) -> Console:
        # Rebuilt when sys.stdout is swapped, as CliRunner does.
        if self._console is None or self._console.file is not sys.stdout:
            self._console = Console(file=sys.stdout)
        return self._console

    @property
    def err_console(self) -> Console:
        if self._err_console is None or self._err_console.file is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("mathsmith_cli_state", default=None)


def get_cli_state(ctx: click.Context | None = None) -> CLIState:
    """Return the state of the running command, creating it on first use."""
    if ctx is None:
        ctx = click.get_current_context(silent=True)
    if ctx is not None:
        state = ctx.ensure_object(CLIState)
        _STATE_VAR.set(state)
        return state

    state = _STATE_VAR.get()
    if state is None:
        state = CLIState()
        _STATE_VAR.set(state)
    return state


def set_cli_state(
    *,
    ctx: click.Context | None = None,
    verbosity: int | None = None,
    debug: bool | None = None,
) -> CLIState:
    """Apply command-line flags to the current state and return it."""
    state = get_cli_state(ctx)
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Print ``message`` on stderr; ``-v`` adds exception details."""
    state = get_cli_state()

    if level == "info":
        state.err_console.log(message, markup=False)
        return

    style = _LEVEL_STYLES.get(level, "yellow")
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))

    if exception is not None and state.verbosity >= 1:
        details = [f"type: {type(exception).__name__}"]
        details.extend(f"caused by: {line}" for line in exception_messages(exception)[1:])
        if state.verbosity >= 2:
            details.append(f"repr: {exception!r}")
        text.append("\n" + "\n".join(details), style=style)

    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    render_message("warning", message, exception=exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    render_message("error", message, exception=exception)


def debug_enabled() -> bool:
    """Return whether the last command asked for full tracebacks."""
    state = _STATE_VAR.get()
    return state is not None and state.show_tracebacks
