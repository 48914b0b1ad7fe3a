import pytest

from mathsmith.adapters.latex.utils import (
    SPECIAL_CHARACTERS,
    escape_latex_chars,
    is_numeric_literal,
)


@pytest.mark.parametrize("char", sorted(SPECIAL_CHARACTERS))
def test_special_characters_are_prefixed(char: str) -> None:
    assert escape_latex_chars(f"a{char}b") == f"a\\{char}b"


def test_other_characters_pass_through() -> None:
    payload = "café — x\\y <> |"
    assert escape_latex_chars(payload) == payload


def test_empty_text_is_returned_unchanged() -> None:
    assert escape_latex_chars("") == ""


def test_unicode_characters_use_legacy_macros_when_enabled() -> None:
    escaped = escape_latex_chars("café 50%", legacy_accents=True)

    assert "\\'{e}" in escaped
    assert "\\%" in escaped


def test_legacy_accents_leave_ascii_untouched() -> None:
    assert escape_latex_chars("a_b", legacy_accents=True) == r"a\_b"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("3", True),
        ("3.14", True),
        ("10", True),
        ("2x", True),
        (".5", False),
        ("x2", False),
        ("", False),
    ],
)
def test_is_numeric_literal(text: str, expected: bool) -> None:
    assert is_numeric_literal(text) is expected
