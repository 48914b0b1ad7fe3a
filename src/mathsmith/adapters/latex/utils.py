"""Utility helpers specific to LaTeX rendering."""

from __future__ import annotations

import re

from pylatexenc.latexencode import unicode_to_latex


SPECIAL_CHARACTERS = frozenset("&%$#_{}~^[]")
"""Characters prefixed with a backslash whenever they appear in literal text."""

_NUMERIC_LITERAL_PATTERN = re.compile(r"[0-9](?:\.[0-9]+)?")

_ACCENT_NEEDS_BRACES_PATTERN = re.compile(
    r"\\([" + re.escape("`'^\"~=\\.Hrvuck") + r"])\s*([A-Za-z])(?!\{)"
)
_ACCENT_CONTROL_TARGET_PATTERN = re.compile(
    r"\\([" + re.escape("`'^\"~=\\.Hrvuck") + r"])\s*(\\[ij])"
)


def _wrap_latex_output(payload: str) -> str:
    """Ensure accent macros wrap their payload in braces."""

    def _repl(match: re.Match[str]) -> str:
        command, char = match.groups()
        return f"\\{command}{{{char}}}"

    payload = _ACCENT_NEEDS_BRACES_PATTERN.sub(_repl, payload)

    def _repl_control(match: re.Match[str]) -> str:
        command, control = match.groups()
        return f"\\{command}{{{control}}}"

    return _ACCENT_CONTROL_TARGET_PATTERN.sub(_repl_control, payload)


def escape_latex_chars(text: str, *, legacy_accents: bool = False) -> str:
    """Prefix every special character of ``text`` with a backslash.

    With ``legacy_accents`` enabled, non-ASCII characters are additionally
    converted to legacy LaTeX macros through pylatexenc.
    """
    if not text:
        return text
    escaped = "".join(f"\\{char}" if char in SPECIAL_CHARACTERS else char for char in text)
    if legacy_accents and not escaped.isascii():
        encoded = unicode_to_latex(escaped, non_ascii_only=True, unknown_char_warning=False)
        return _wrap_latex_output(encoded)
    return escaped


def is_numeric_literal(text: str) -> bool:
    """Return whether ``text`` starts like a number (``3``, ``3.14``, ``12abc``)."""
    return _NUMERIC_LITERAL_PATTERN.match(text) is not None


__all__ = ["SPECIAL_CHARACTERS", "escape_latex_chars", "is_numeric_literal"]
