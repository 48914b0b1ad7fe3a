"""Diagnostic emitter printing renderer output notes on the CLI consoles."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mathsmith.core.diagnostics import DiagnosticEmitter, format_event_message

from .state import CLIState, emit_warning, get_cli_state, render_message


class CliEmitter(DiagnosticEmitter):
    """Report renderer diagnostics through the rich stderr console.

    Warnings are always shown; informational events only with ``-v``.
    """

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        if self._state.verbosity < 1:
            return
        message = format_event_message(name, payload)
        if message:
            render_message("info", message)


__all__ = ["CliEmitter"]
