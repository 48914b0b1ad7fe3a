"""Expression tree consumed by the LaTeX renderer.

The tree is a closed set of immutable node types. Upstream parsers build it
once; renderers only read it.

`Literal`
: Bare text or a numeric literal such as ``3.14``.

`Symbol`
: A named token (``plus``, ``integral``, ``alpha``...) resolved through the
  symbol table. Unknown names are still valid and render as ``\\name``.

`Sequence`
: Ordered children joined by a separator (the renderer default when unset).

`TextRun`
: Literal upright text, never interpreted as LaTeX.

`Parenthesized`
: Inner content wrapped between optional left/right delimiter symbols.

`SubSup`
: A base expression with optional subscript and superscript.

`UnaryOp` / `BinaryOp`
: Operators applied to one or two operands. The operator is either a
  `Symbol` (looked up, with the special tags ``norm``, ``floor``, ``ceil``,
  ``overarc`` and ``root``) or `RawText` holding pre-formed LaTeX.

`Matrix`
: Rows of cells wrapped in an optional delimiter pair.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class Literal:
    """Bare literal text."""

    text: str


@dataclass(frozen=True, slots=True)
class Symbol:
    """Atomic symbol identified by its tag."""

    tag: str


@dataclass(frozen=True, slots=True)
class RawText:
    """Operator spelled as already formed LaTeX."""

    text: str


@dataclass(frozen=True, slots=True)
class Sequence:
    """Children rendered in order with a separator between them."""

    items: tuple[Expression, ...] = ()
    separator: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class TextRun:
    """Text rendered verbatim in text mode."""

    content: str


@dataclass(frozen=True, slots=True)
class Parenthesized:
    inner: Expression
    left: Symbol | None = None
    right: Symbol | None = None


@dataclass(frozen=True, slots=True)
class SubSup:
    base: Expression
    sub: Expression | None = None
    sup: Expression | None = None


@dataclass(frozen=True, slots=True)
class UnaryOp:
    operator: Operator
    operand: Expression


@dataclass(frozen=True, slots=True)
class BinaryOp:
    operator: Operator
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class Matrix:
    """Rows of cells laid out in a ``matrix`` environment."""

    rows: tuple[Sequence, ...] = field(default_factory=tuple)
    left: Symbol | None = None
    right: Symbol | None = None

    def __post_init__(self) -> None:
        rows = tuple(row if isinstance(row, Sequence) else Sequence(row) for row in self.rows)
        object.__setattr__(self, "rows", rows)


Operator = Union[Symbol, RawText]

Expression = Union[
    Literal,
    Symbol,
    Sequence,
    TextRun,
    Parenthesized,
    SubSup,
    UnaryOp,
    BinaryOp,
    Matrix,
]

NODE_TYPES: tuple[type, ...] = (
    Literal,
    Symbol,
    Sequence,
    TextRun,
    Parenthesized,
    SubSup,
    UnaryOp,
    BinaryOp,
    Matrix,
)

STRUCTURED_NODES: tuple[type, ...] = (
    Sequence,
    TextRun,
    Parenthesized,
    SubSup,
    UnaryOp,
    BinaryOp,
    Matrix,
)
"""Node types that always receive a brace group when used as an argument."""


def seq(*items: Expression, separator: str | None = None) -> Sequence:
    """Shorthand for building a `Sequence` from positional children."""
    return Sequence(tuple(items), separator=separator)


__all__ = [
    "NODE_TYPES",
    "STRUCTURED_NODES",
    "BinaryOp",
    "Expression",
    "Literal",
    "Matrix",
    "Operator",
    "Parenthesized",
    "RawText",
    "Sequence",
    "SubSup",
    "Symbol",
    "TextRun",
    "UnaryOp",
    "seq",
]
