"""Configuration models used by the LaTeX renderer.

RenderConfig

`separator` (`str`)
: Text inserted between the children of a sequence that does not declare its
  own separator. Defaults to a single space so that adjacent tokens stay
  readable in the generated source.

`max_depth` (`int`)
: Maximum nesting depth accepted by the renderer. Trees nested deeper raise
  `RenderDepthError` instead of exhausting the interpreter stack.

`symbols` (`dict[str, str]`)
: Extra symbol-table entries merged over the built-in table. Keys are symbol
  tags, values are trusted LaTeX fragments emitted verbatim. Blank tags and
  blank values are rejected.

`legacy_latex_accents` (`bool`)
: When `True`, convert accented characters and other non-ASCII glyphs found in
  literal text into legacy LaTeX macros. When `False`, keep Unicode glyphs
  untouched (default), which suits LuaLaTeX/XeLaTeX.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
import yaml


class RenderConfig(BaseModel):
    """Options controlling how expression trees are turned into LaTeX."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    separator: str = " "
    max_depth: int = Field(default=100, ge=1)
    symbols: dict[str, str] = Field(default_factory=dict)
    legacy_latex_accents: bool = False

    @field_validator("symbols")
    @classmethod
    def _reject_blank_entries(cls, value: dict[str, str]) -> dict[str, str]:
        if any(not tag.strip() for tag in value):
            raise ValueError("symbol tags must not be blank")
        empty = sorted(tag for tag, latex in value.items() if not latex.strip())
        if empty:
            raise ValueError(f"symbol values must not be blank: {', '.join(empty)}")
        return value

    @classmethod
    def from_mapping(cls, data: Any) -> RenderConfig:
        """Build a configuration from a mapping, tolerating a ``render`` section."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("render configuration must be a mapping")
        payload = data.get("render", data)
        return cls.model_validate(payload)

    @classmethod
    def from_file(cls, path: Path | str) -> RenderConfig:
        """Load configuration from a YAML document."""
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_mapping(yaml.safe_load(text))

    def merged(self, **overrides: Any) -> RenderConfig:
        """Return a copy with the non-``None`` overrides applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})


__all__ = ["RenderConfig"]
