"""Build expression trees from JSON/YAML documents.

Documents follow the hash layout produced by AsciiMath-style parsers: strings
are literals, lists are sequences, ``{"symbol": tag}`` is an atomic symbol and
mappings with a ``type`` key describe structured nodes.
"""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import InvalidNodeError
from .nodes import (
    NODE_TYPES,
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


logger = logging.getLogger(__name__)


def _symbol(value: Any, *, field_name: str) -> Symbol | None:
    if value is None:
        return None
    if isinstance(value, str):
        return Symbol(value)
    if isinstance(value, Mapping) and isinstance(value.get("symbol"), str):
        return Symbol(value["symbol"])
    raise InvalidNodeError(f"Field '{field_name}' must be a symbol tag, got {value!r}")


def _operator(value: Any) -> Any:
    if isinstance(value, str):
        return Symbol(value)
    if isinstance(value, Mapping):
        if isinstance(value.get("symbol"), str):
            return Symbol(value["symbol"])
        if isinstance(value.get("raw"), str):
            return RawText(value["raw"])
    # Left for the renderer, which rejects it with UnsupportedOperatorError.
    return value


def _require(data: Mapping[str, Any], key: str, node_type: str) -> Any:
    if key not in data:
        raise InvalidNodeError(f"'{node_type}' node is missing the '{key}' field")
    return data[key]


def _optional(value: Any) -> Expression | None:
    return None if value is None else load_tree(value)


def _load_mapping(data: Mapping[str, Any]) -> Expression:
    node_type = data.get("type")
    if node_type is None:
        if "symbol" in data:
            return _symbol(data, field_name="symbol")  # type: ignore[return-value]
        raise InvalidNodeError(f"Cannot determine node type for mapping with keys {sorted(data)}")

    if node_type == "text":
        content = data.get("c", data.get("content"))
        if not isinstance(content, str):
            raise InvalidNodeError("'text' node requires a string 'c' field")
        return TextRun(content)

    if node_type == "seq":
        items = _require(data, "items", node_type)
        if not isinstance(items, list):
            raise InvalidNodeError("'seq' node requires a list of items")
        separator = data.get("separator")
        if separator is not None and not isinstance(separator, str):
            raise InvalidNodeError("'seq' separator must be a string")
        return Sequence(tuple(load_tree(item) for item in items), separator=separator)

    if node_type == "paren":
        return Parenthesized(
            inner=load_tree(_require(data, "e", node_type)),
            left=_symbol(data.get("lparen"), field_name="lparen"),
            right=_symbol(data.get("rparen"), field_name="rparen"),
        )

    if node_type == "subsup":
        return SubSup(
            base=load_tree(_require(data, "e", node_type)),
            sub=_optional(data.get("sub")),
            sup=_optional(data.get("sup")),
        )

    if node_type == "unary":
        return UnaryOp(
            operator=_operator(_require(data, "op", node_type)),
            operand=load_tree(_require(data, "e", node_type)),
        )

    if node_type == "binary":
        return BinaryOp(
            operator=_operator(_require(data, "op", node_type)),
            left=load_tree(_require(data, "e1", node_type)),
            right=load_tree(_require(data, "e2", node_type)),
        )

    if node_type == "matrix":
        rows = _require(data, "rows", node_type)
        if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
            raise InvalidNodeError("'matrix' node requires a list of rows")
        return Matrix(
            rows=tuple(Sequence(tuple(load_tree(cell) for cell in row)) for row in rows),
            left=_symbol(data.get("lparen"), field_name="lparen"),
            right=_symbol(data.get("rparen"), field_name="rparen"),
        )

    raise InvalidNodeError(f"Unknown node type '{node_type}'")


def load_tree(data: Any) -> Expression:
    """Convert plain Python data into an expression tree."""
    if isinstance(data, NODE_TYPES):
        return data
    if isinstance(data, bool):
        raise InvalidNodeError(f"Cannot convert boolean {data!r} into a node")
    if isinstance(data, str):
        return Literal(data)
    if isinstance(data, (int, float)):
        return Literal(str(data))
    if isinstance(data, list):
        return Sequence(tuple(load_tree(item) for item in data))
    if isinstance(data, Mapping):
        return _load_mapping(data)
    raise InvalidNodeError(f"Cannot convert {type(data).__name__} into a node")


def parse_tree(text: str, *, fmt: str = "yaml") -> Expression:
    """Parse a serialized tree document (``json`` or ``yaml``)."""
    try:
        data = json.loads(text) if fmt == "json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidNodeError(f"Unable to parse {fmt.upper()} tree document") from exc
    if data is None:
        raise InvalidNodeError("Tree document is empty")
    return load_tree(data)


def load_tree_file(path: Path | str) -> Expression:
    """Read a tree document from disk, choosing the format from the suffix."""
    source = Path(path)
    fmt = "json" if source.suffix.lower() == ".json" else "yaml"
    logger.debug("Loading %s tree document from %s", fmt, source)
    return parse_tree(source.read_text(encoding="utf-8"), fmt=fmt)


__all__ = ["load_tree", "load_tree_file", "parse_tree"]
