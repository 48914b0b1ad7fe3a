from types import MappingProxyType

import pytest

from mathsmith.adapters.latex.symbols import (
    SYMBOLS,
    build_symbol_table,
    is_known_symbol,
    resolve_symbol,
)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("plus", "+"),
        ("ne", r"\neq"),
        ("assign", ":="),
        ("implies", r"\Rightarrow"),
        ("and", r"\text{and}"),
        ("lbrace", r"\{"),
        ("lvert", r"\lVert"),
        ("integral", r"\int"),
        ("contourintegral", r"\oint"),
        ("Sin", r"\text{Sin}"),
        ("csc", r"\text{csc}"),
        ("dstruck_captial_r", r"\mathbb{R}"),
        ("to", r"\rightarrow"),
        ("bold", r"\mathbf"),
        ("fraktur", r"\mathfrak"),
        ("sans_serif_bold_italic", r"\mathsf"),
        ("qquad", r"\;\;\;\;"),
    ],
)
def test_table_entries(tag: str, expected: str) -> None:
    assert resolve_symbol(tag) == expected
    assert is_known_symbol(tag)


def test_absent_tag_resolves_to_dot() -> None:
    assert resolve_symbol(None) == "."


def test_unknown_tag_falls_back_to_macro() -> None:
    assert resolve_symbol("frown") == r"\frown"
    assert not is_known_symbol("frown")


def test_table_is_read_only() -> None:
    assert isinstance(SYMBOLS, MappingProxyType)
    with pytest.raises(TypeError):
        SYMBOLS["plus"] = "x"  # type: ignore[index]


def test_build_symbol_table_layers_overrides() -> None:
    table = build_symbol_table({"plus": r"\oplus", "nabla": r"\nabla"})

    assert resolve_symbol("plus", table) == r"\oplus"
    assert resolve_symbol("nabla", table) == r"\nabla"
    assert resolve_symbol("minus", table) == "-"
    assert SYMBOLS["plus"] == "+"
    assert "nabla" not in SYMBOLS


def test_build_symbol_table_without_overrides_returns_builtin() -> None:
    assert build_symbol_table() is SYMBOLS
    assert build_symbol_table({}) is SYMBOLS
