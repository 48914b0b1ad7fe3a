import pytest

from mathsmith.core.exceptions import (
    InvalidNodeError,
    MathRenderingError,
    RenderDepthError,
    UnsupportedOperatorError,
    exception_hint,
    exception_messages,
)


@pytest.mark.parametrize(
    "error",
    [
        UnsupportedOperatorError(42, "unary"),
        RenderDepthError(10),
        InvalidNodeError("bad node"),
    ],
)
def test_errors_share_a_base_class(error: MathRenderingError) -> None:
    assert isinstance(error, MathRenderingError)
    assert isinstance(error, RuntimeError)


def test_unsupported_operator_message() -> None:
    error = UnsupportedOperatorError(42, "binary")

    assert str(error) == "Unsupported binary operation: 42"
    assert error.operator == 42
    assert error.arity == "binary"


def test_exception_hint_reports_root_cause() -> None:
    try:
        try:
            raise ValueError("Expecting value: line 1 column 2")
        except ValueError as exc:
            raise InvalidNodeError("Unable to parse JSON tree document") from exc
    except InvalidNodeError as error:
        messages = exception_messages(error)
        hint = exception_hint(error)

    assert messages == ["Unable to parse JSON tree document", "Expecting value: line 1 column 2"]
    assert hint == "Expecting value: line 1 column 2"


def test_exception_hint_without_message() -> None:
    assert exception_hint(RuntimeError()) is None
