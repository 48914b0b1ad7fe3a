"""Symbol table mapping atomic tags to LaTeX fragments.

Values are trusted, pre-formed LaTeX and are emitted verbatim. Tags missing
from the table fall back to a macro spelled after the tag itself, which is
how custom tokens reach the output.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


_SYMBOLS: dict[str | None, str] = {
    # Operators and relations
    "plus": "+",
    "minus": "-",
    "ast": "*",
    "slash": "/",
    "eq": "=",
    "ne": r"\neq",
    "assign": ":=",
    "lt": "<",
    "gt": ">",
    "sub": r"\text{–}",
    "sup": r"\text{^}",
    # Logic
    "implies": r"\Rightarrow",
    "iff": r"\Leftrightarrow",
    "if": r"\text{if}",
    "and": r"\text{and}",
    "or": r"\text{or}",
    # Delimiters
    "lparen": "(",
    "rparen": ")",
    "lbracket": "[",
    "rbracket": "]",
    "lbrace": r"\{",
    "rbrace": r"\}",
    "lvert": r"\lVert",
    "rvert": r"\rVert",
    "vbar": "|",
    None: ".",
    # Calculus
    "integral": r"\int",
    "dx": "dx",
    "dy": "dy",
    "dz": "dz",
    "dt": "dt",
    "contourintegral": r"\oint",
    # Named functions set upright
    "Lim": r"\text{Lim}",
    "Sin": r"\text{Sin}",
    "Cos": r"\text{Cos}",
    "Tan": r"\text{Tan}",
    "Sinh": r"\text{Sinh}",
    "Cosh": r"\text{Cosh}",
    "Tanh": r"\text{Tanh}",
    "Cot": r"\text{Cot}",
    "Sec": r"\text{Sec}",
    "csc": r"\text{csc}",
    "Csc": r"\text{Csc}",
    "sech": r"\text{sech}",
    "csch": r"\text{csch}",
    "Abs": r"\text{Abs}",
    "Log": r"\text{Log}",
    "Ln": r"\text{Ln}",
    "lcm": r"\text{lcm}",
    "lub": r"\text{lub}",
    "glb": r"\text{glb}",
    # Miscellaneous
    "partial": r"\del",
    "prime": "'",
    "tilde": r"\~",
    "nbsp": r"\;",
    "quad": r"\;\;",
    "qquad": r"\;\;\;\;",
    "lceiling": r"\lceil",
    "rceiling": r"\rceil",
    # Number sets
    "dstruck_captial_c": r"\mathbb{C}",
    "dstruck_captial_n": r"\mathbb{N}",
    "dstruck_captial_q": r"\mathbb{Q}",
    "dstruck_captial_r": r"\mathbb{R}",
    "dstruck_captial_z": r"\mathbb{Z}",
    "f": "f",
    "g": "g",
    "to": r"\rightarrow",
    # Font styles
    "bold": r"\mathbf",
    "double_struck": r"\mathbb",
    "italic": r"\mathit",
    "bold_italic": r"\mathbf",
    "script": r"\mathscr",
    "bold_script": r"\mathscr",
    "monospace": r"\mathtt",
    "fraktur": r"\mathfrak",
    "bold_fraktur": r"\mathfrak",
    "sans_serif": r"\mathsf",
    "bold_sans_serif": r"\mathsf",
    "sans_serif_italic": r"\mathsf",
    "sans_serif_bold_italic": r"\mathsf",
}

SYMBOLS: Mapping[str | None, str] = MappingProxyType(_SYMBOLS)
"""Read-only built-in symbol table."""


def build_symbol_table(overrides: Mapping[str, str] | None = None) -> Mapping[str | None, str]:
    """Return the built-in table with ``overrides`` layered on top."""
    if not overrides:
        return SYMBOLS
    merged = dict(_SYMBOLS)
    merged.update(overrides)
    return MappingProxyType(merged)


def resolve_symbol(tag: str | None, table: Mapping[str | None, str] = SYMBOLS) -> str:
    """Translate ``tag`` into LaTeX, falling back to ``\\tag``."""
    value = table.get(tag)
    if value:
        return value
    return f"\\{tag if tag is not None else ''}"


def is_known_symbol(tag: str | None, table: Mapping[str | None, str] = SYMBOLS) -> bool:
    """Return whether ``tag`` resolves through the table rather than the fallback."""
    return bool(table.get(tag))


__all__ = ["SYMBOLS", "build_symbol_table", "is_known_symbol", "resolve_symbol"]
