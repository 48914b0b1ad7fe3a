"""CLI command implementations."""

from __future__ import annotations

from .render import render
from .symbols import symbols


__all__ = ["render", "symbols"]
