"""Domain model shared by the renderer and its front ends."""

from __future__ import annotations

from .config import RenderConfig
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    InvalidNodeError,
    MathRenderingError,
    RenderDepthError,
    UnsupportedOperatorError,
)
from .loader import load_tree, load_tree_file, parse_tree
from .nodes import (
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


__all__ = [
    "BinaryOp",
    "DiagnosticEmitter",
    "Expression",
    "InvalidNodeError",
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
    "load_tree",
    "load_tree_file",
    "parse_tree",
    "seq",
]
