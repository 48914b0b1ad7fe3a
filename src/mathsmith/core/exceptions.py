"""Custom exception hierarchy for the math-to-LaTeX renderer."""

from __future__ import annotations

from typing import Any


class MathRenderingError(RuntimeError):
    """Base exception for expression rendering failures."""


class UnsupportedOperatorError(MathRenderingError):
    """Raised when an operator node carries a value that is neither a tag nor raw text."""

    def __init__(self, operator: Any, arity: str) -> None:
        self.operator = operator
        self.arity = arity
        super().__init__(f"Unsupported {arity} operation: {operator!r}")


class RenderDepthError(MathRenderingError):
    """Raised when an expression tree is nested deeper than the configured limit."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Expression tree exceeds the maximum depth of {max_depth}")


class InvalidNodeError(MathRenderingError):
    """Raised when a serialized tree contains a shape that maps to no node type."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "InvalidNodeError",
    "MathRenderingError",
    "RenderDepthError",
    "UnsupportedOperatorError",
    "exception_hint",
    "exception_messages",
]
