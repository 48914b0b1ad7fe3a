"""Expression tree to LaTeX renderer.

:class:`LaTeXRenderer` owns the immutable pieces of a render (configuration
and the merged symbol table). Each call to :meth:`LaTeXRenderer.render` spins
up a private :class:`_RenderPass` holding the output buffer, so a renderer can
be shared freely between callers and threads.

Formatting policies

`Brace groups`
: Sequences and structured nodes used as arguments are wrapped in ``{...}``;
  single literals and symbols stay bare (``x_2`` rather than ``x_{2}``).

`Literals`
: Multi-character, non-numeric text is set with ``\\text{...}``; everything
  else is emitted inline. Literal text is always escaped.

`Delimiters`
: Delimiter pairs use ``\\left``/``\\right``; a missing side renders as ``.``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import logging

from mathsmith.core.config import RenderConfig
from mathsmith.core.diagnostics import DiagnosticEmitter, NullEmitter
from mathsmith.core.exceptions import RenderDepthError, UnsupportedOperatorError
from mathsmith.core.nodes import (
    STRUCTURED_NODES,
    BinaryOp,
    Expression,
    Literal,
    Matrix,
    Parenthesized,
    RawText,
    Sequence,
    SubSup,
    Symbol,
    TextRun,
    UnaryOp,
)

from .symbols import build_symbol_table, is_known_symbol, resolve_symbol
from .utils import escape_latex_chars, is_numeric_literal


logger = logging.getLogger(__name__)

_MATRIX_CELL_SEPARATOR = " & "
_MATRIX_ROW_SEPARATOR = r" \\ "

# Tags introduced by the renderer itself; their fallback spelling is intended.
_BUILTIN_MACROS = frozenset({"frown", "lfloor", "overset", "rfloor", "sqrt"})


class _RenderPass:
    """Single tree walk appending LaTeX to a private buffer."""

    def __init__(
        self,
        config: RenderConfig,
        symbols: Mapping[str | None, str],
        emitter: DiagnosticEmitter,
    ) -> None:
        self.config = config
        self.symbols = symbols
        self.emitter = emitter
        self.parts: list[str] = []
        self.depth = 0

    def output(self) -> str:
        return "".join(self.parts)

    # -- dispatch ---------------------------------------------------------

    def append(self, node: Expression | None) -> None:
        if node is None:
            return
        self.depth += 1
        if self.depth > self.config.max_depth:
            raise RenderDepthError(self.config.max_depth)
        try:
            self._dispatch(node)
        finally:
            self.depth -= 1

    def _dispatch(self, node: Expression) -> None:
        if isinstance(node, Sequence):
            separator = node.separator if node.separator is not None else self.config.separator
            self.append_joined(node.items, separator)
        elif isinstance(node, Literal):
            self.append_literal(node.text)
        elif isinstance(node, Symbol):
            self.parts.append(self.symbol(node.tag))
        elif isinstance(node, TextRun):
            self.text(node.content)
        elif isinstance(node, Parenthesized):
            self.parens(node.left, node.right, lambda: self.append(node.inner))
        elif isinstance(node, SubSup):
            self.append_subsup(node)
        elif isinstance(node, UnaryOp):
            self.append_unary(node)
        elif isinstance(node, BinaryOp):
            self.append_binary(node)
        elif isinstance(node, Matrix):
            self.append_matrix(node)
        else:
            node_type = type(node).__name__
            logger.debug("Skipping unsupported node %s", node_type)
            self.emitter.warning(f"Skipped unsupported node of type {node_type}")

    def append_joined(self, nodes: Iterable[Expression], separator: str) -> None:
        for index, child in enumerate(nodes):
            if index:
                self.parts.append(separator)
            self.append(child)

    def append_literal(self, text: str) -> None:
        if len(text) > 1 and not is_numeric_literal(text):
            self.text(text)
        else:
            self.append_escaped(text)

    def append_subsup(self, node: SubSup) -> None:
        self.curly(node.base, lambda: self.append(node.base))
        if node.sub is not None:
            self.parts.append("_")
            self.curly(node.sub, lambda: self.append(node.sub))
        if node.sup is not None:
            self.parts.append("^")
            self.curly(node.sup, lambda: self.append(node.sup))

    def append_unary(self, node: UnaryOp) -> None:
        operator = node.operator

        def operand() -> None:
            self.append(node.operand)

        if isinstance(operator, Symbol):
            tag = operator.tag
            if tag == "norm":
                self.parens(Symbol("lvert"), Symbol("rvert"), operand)
            elif tag == "floor":
                self.parens(Symbol("lfloor"), Symbol("rfloor"), operand)
            elif tag == "ceil":
                self.parens(Symbol("lceiling"), Symbol("rceiling"), operand)
            elif tag == "overarc":
                self.macro("overset", body=lambda: self.append(Symbol("frown")))
                self.curly(True, operand)
            else:
                self.macro(tag, body=operand)
        elif isinstance(operator, RawText):
            self.macro(operator.text, body=operand, lookup=False)
        else:
            raise UnsupportedOperatorError(operator, "unary")

    def append_binary(self, node: BinaryOp) -> None:
        operator = node.operator
        if isinstance(operator, Symbol) and operator.tag == "root":
            index = node.left
            empty = (
                index is None
                or (isinstance(index, Sequence) and not index.items)
                or (isinstance(index, Literal) and not index.text)
            )
            args = () if empty else (index,)
            self.macro("sqrt", *args, body=lambda: self.append(node.right))
            return

        if isinstance(operator, Symbol):
            self.parts.append(self.symbol(operator.tag))
        elif isinstance(operator, RawText):
            self.parts.append(operator.text)
        else:
            raise UnsupportedOperatorError(operator, "binary")

        self.curly(True, lambda: self.append(node.left))
        self.curly(True, lambda: self.append(node.right))

    def append_matrix(self, node: Matrix) -> None:
        def body() -> None:
            self.parts.append(r"\begin{matrix} ")
            for index, row in enumerate(node.rows):
                if index:
                    self.parts.append(_MATRIX_ROW_SEPARATOR)
                self.append_joined(row.items, _MATRIX_CELL_SEPARATOR)
            self.parts.append(r" \end{matrix}")

        self.parens(node.left, node.right, body)

    # -- helpers ----------------------------------------------------------

    def symbol(self, tag: str | None) -> str:
        if (
            tag is not None
            and tag not in _BUILTIN_MACROS
            and not is_known_symbol(tag, self.symbols)
        ):
            self.emitter.event("symbol_fallback", {"tag": tag})
        return resolve_symbol(tag, self.symbols)

    def macro(
        self,
        name: str,
        *args: Expression,
        body: Callable[[], None] | None = None,
        lookup: bool = True,
    ) -> None:
        """Emit ``\\name[arg1][arg2]{body}``; the arguments and body are optional."""
        self.parts.append(self.symbol(name) if lookup else f"\\{name}")
        if args:
            self.parts.append("[")
            self.append_joined(args, "][")
            self.parts.append("]")
        if body is not None:
            self.curly(True, body)

    def parens(self, left: Symbol | None, right: Symbol | None, body: Callable[[], None]) -> None:
        if left is None and right is None:
            body()
            return
        self.parts.append(r"\left ")
        self.parts.append(self.symbol(left.tag if left is not None else None))
        self.parts.append(" ")
        body()
        self.parts.append(r" \right ")
        self.parts.append(self.symbol(right.tag if right is not None else None))

    def curly(self, node: Expression | bool, body: Callable[[], None]) -> None:
        if node is True or isinstance(node, STRUCTURED_NODES):
            self.parts.append("{")
            body()
            self.parts.append("}")
        else:
            body()

    def text(self, content: str) -> None:
        self.parts.append(r"\text{")
        self.append_escaped(content)
        self.parts.append("}")

    def append_escaped(self, text: str) -> None:
        self.parts.append(
            escape_latex_chars(text, legacy_accents=self.config.legacy_latex_accents)
        )


class LaTeXRenderer:
    """Convert expression trees into LaTeX source."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self.symbols = build_symbol_table(self.config.symbols)

    def render(self, root: Expression, *, emitter: DiagnosticEmitter | None = None) -> str:
        """Render ``root`` and return the LaTeX string.

        Raises :class:`UnsupportedOperatorError` for operator values that are
        neither a :class:`Symbol` nor :class:`RawText`, and
        :class:`RenderDepthError` for trees nested beyond ``max_depth`` or beyond
        what the interpreter stack can hold. No partial output is returned in
        either case.
        """
        render_pass = _RenderPass(self.config, self.symbols, emitter or NullEmitter())
        try:
            render_pass.append(root)
        except RecursionError as exc:
            raise RenderDepthError(self.config.max_depth) from exc
        latex = render_pass.output()
        logger.debug("Rendered %s into %d characters", type(root).__name__, len(latex))
        return latex


def render(
    root: Expression,
    *,
    config: RenderConfig | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Render ``root`` with a one-off :class:`LaTeXRenderer`."""
    return LaTeXRenderer(config).render(root, emitter=emitter)


__all__ = ["LaTeXRenderer", "render"]
