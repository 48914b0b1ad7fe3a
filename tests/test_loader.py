import json
from pathlib import Path

import pytest

from mathsmith import (
    BinaryOp,
    InvalidNodeError,
    Literal,
    Matrix,
    Parenthesized,
    RawText,
    Sequence,
    SubSup,
    Symbol,
    TextRun,
    UnaryOp,
    UnsupportedOperatorError,
    load_tree,
    load_tree_file,
    parse_tree,
    render,
)


def test_scalars_and_lists() -> None:
    assert load_tree("x") == Literal("x")
    assert load_tree(3) == Literal("3")
    assert load_tree(["a", {"symbol": "plus"}, "b"]) == Sequence(
        (Literal("a"), Symbol("plus"), Literal("b"))
    )


def test_existing_nodes_pass_through() -> None:
    node = Symbol("plus")
    assert load_tree(node) is node


def test_text_nodes_accept_both_keys() -> None:
    assert load_tree({"type": "text", "c": "if"}) == TextRun("if")
    assert load_tree({"type": "text", "content": "if"}) == TextRun("if")


def test_explicit_sequence_separator() -> None:
    node = load_tree({"type": "seq", "items": ["a", "b"], "separator": ","})
    assert node == Sequence((Literal("a"), Literal("b")), separator=",")


def test_structured_nodes() -> None:
    assert load_tree({"type": "paren", "lparen": "lparen", "rparen": None, "e": "x"}) == (
        Parenthesized(Literal("x"), left=Symbol("lparen"))
    )
    assert load_tree({"type": "subsup", "e": "x", "sup": "2"}) == SubSup(
        Literal("x"), sup=Literal("2")
    )
    assert load_tree({"type": "unary", "op": "sqrt", "e": "x"}) == UnaryOp(
        Symbol("sqrt"), Literal("x")
    )
    assert load_tree({"type": "binary", "op": {"raw": r"\frac"}, "e1": 1, "e2": 2}) == BinaryOp(
        RawText(r"\frac"), Literal("1"), Literal("2")
    )


def test_matrix_rows_become_sequences() -> None:
    node = load_tree(
        {"type": "matrix", "lparen": "lbracket", "rparen": "rbracket", "rows": [[1, 0], [0, 1]]}
    )

    assert isinstance(node, Matrix)
    assert node.left == Symbol("lbracket")
    assert all(isinstance(row, Sequence) for row in node.rows)
    assert render(node) == r"\left [ \begin{matrix} 1 & 0 \\ 0 & 1 \end{matrix} \right ]"


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "bogus"},
        {"type": "paren"},
        {"type": "text"},
        {"type": "matrix", "rows": "nope"},
        {"type": "paren", "lparen": 3, "e": "x"},
        {"type": "seq", "items": ["a", "b"], "separator": 5},
        {"unknown": "mapping"},
        True,
        None,
    ],
)
def test_invalid_shapes_raise(payload: object) -> None:
    with pytest.raises(InvalidNodeError):
        load_tree(payload)


def test_unknown_operator_reaches_the_renderer() -> None:
    node = load_tree({"type": "unary", "op": 42, "e": "x"})
    with pytest.raises(UnsupportedOperatorError):
        render(node)


def test_parse_yaml_document() -> None:
    document = "type: binary\nop: root\ne1: 3\ne2: x\n"
    assert render(parse_tree(document)) == r"\sqrt[3]{x}"


def test_parse_errors_are_wrapped() -> None:
    with pytest.raises(InvalidNodeError) as excinfo:
        parse_tree("{", fmt="json")
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    with pytest.raises(InvalidNodeError, match="empty"):
        parse_tree("")


def test_load_tree_file_picks_format_from_suffix(tmp_path: Path) -> None:
    json_path = tmp_path / "tree.json"
    json_path.write_text(json.dumps({"type": "subsup", "e": "x", "sub": "i"}), encoding="utf-8")
    yaml_path = tmp_path / "tree.yml"
    yaml_path.write_text("- x\n- symbol: to\n- y\n", encoding="utf-8")

    assert render(load_tree_file(json_path)) == "x_i"
    assert render(load_tree_file(yaml_path)) == r"x \rightarrow y"
