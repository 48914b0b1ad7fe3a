"""LaTeX output adapter."""

from __future__ import annotations

from .renderer import LaTeXRenderer, render
from .symbols import SYMBOLS, build_symbol_table, resolve_symbol
from .utils import SPECIAL_CHARACTERS, escape_latex_chars, is_numeric_literal


__all__ = [
    "SPECIAL_CHARACTERS",
    "SYMBOLS",
    "LaTeXRenderer",
    "build_symbol_table",
    "escape_latex_chars",
    "is_numeric_literal",
    "render",
    "resolve_symbol",
]
