"""Primary public API for mathsmith."""

from __future__ import annotations

from mathsmith.adapters.latex import LaTeXRenderer, escape_latex_chars, render
from mathsmith.adapters.latex.symbols import SYMBOLS
from mathsmith.core.config import RenderConfig
from mathsmith.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from mathsmith.core.exceptions import (
    InvalidNodeError,
    MathRenderingError,
    RenderDepthError,
    UnsupportedOperatorError,
)
from mathsmith.core.loader import load_tree, load_tree_file, parse_tree
from mathsmith.core.nodes import (
    BinaryOp,
    Expression,
    Literal,
    Matrix,
    Operator,
    Parenthesized,
    RawText,
    Sequence,
    SubSup,
    Symbol,
    TextRun,
    UnaryOp,
    seq,
)
from mathsmith.version import get_version


__version__ = get_version()

__all__ = [
    "SYMBOLS",
    "BinaryOp",
    "DiagnosticEmitter",
    "Expression",
    "InvalidNodeError",
    "LaTeXRenderer",
    "Literal",
    "LoggingEmitter",
    "MathRenderingError",
    "Matrix",
    "NullEmitter",
    "Operator",
    "Parenthesized",
    "RawText",
    "RenderConfig",
    "RenderDepthError",
    "Sequence",
    "SubSup",
    "Symbol",
    "TextRun",
    "UnaryOp",
    "UnsupportedOperatorError",
    "__version__",
    "escape_latex_chars",
    "get_version",
    "load_tree",
    "load_tree_file",
    "parse_tree",
    "render",
    "seq",
]
