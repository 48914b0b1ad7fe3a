from pathlib import Path

from pydantic import ValidationError
import pytest

from mathsmith import RenderConfig


def test_defaults() -> None:
    config = RenderConfig()

    assert config.separator == " "
    assert config.max_depth == 100
    assert config.symbols == {}
    assert config.legacy_latex_accents is False


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        RenderConfig.model_validate({"colour": "red"})


@pytest.mark.parametrize("depth", [0, -3])
def test_max_depth_must_be_positive(depth: int) -> None:
    with pytest.raises(ValidationError):
        RenderConfig(max_depth=depth)


def test_blank_symbol_tags_are_rejected() -> None:
    with pytest.raises(ValidationError, match="blank"):
        RenderConfig(symbols={" ": r"\relax"})


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_symbol_values_are_rejected(value: str) -> None:
    with pytest.raises(ValidationError, match="symbol values must not be blank: nabla"):
        RenderConfig(symbols={"nabla": value})


def test_config_is_frozen() -> None:
    config = RenderConfig()
    with pytest.raises(ValidationError):
        config.separator = ","  # type: ignore[misc]


def test_from_file_accepts_render_section(tmp_path: Path) -> None:
    path = tmp_path / "mathsmith.yml"
    path.write_text(
        "render:\n  separator: ','\n  symbols:\n    plus: '\\oplus'\n",
        encoding="utf-8",
    )

    config = RenderConfig.from_file(path)

    assert config.separator == ","
    assert config.symbols == {"plus": r"\oplus"}


def test_from_mapping_handles_empty_documents() -> None:
    assert RenderConfig.from_mapping(None) == RenderConfig()
    with pytest.raises(ValueError):
        RenderConfig.from_mapping(["not", "a", "mapping"])


def test_merged_ignores_unset_overrides() -> None:
    config = RenderConfig(separator=",")

    assert config.merged(separator=None, max_depth=None) is config
    updated = config.merged(max_depth=10, legacy_latex_accents=True)
    assert updated.separator == ","
    assert updated.max_depth == 10
    assert updated.legacy_latex_accents is True
