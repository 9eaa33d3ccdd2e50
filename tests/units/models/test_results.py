"""This module contains unit tests for the ConversionResult model."""

import pytest
from date_formatting.exceptions.date import FormatError, ParseError
from date_formatting.models.results import ConversionErrorKind, ConversionResult
from pydantic import ValidationError


def test_success_holds_value() -> None:
    """Tests a successful result."""
    result = ConversionResult[str].success("1710513120")

    assert result.ok
    assert result.unwrap() == "1710513120"
    assert result.value_or("fallback") == "1710513120"
    assert result.error is None


@pytest.mark.parametrize(
    ("error", "kind", "exception_type"),
    [
        (ParseError("bad text"), ConversionErrorKind.PARSE, ParseError),
        (FormatError("bad stamp"), ConversionErrorKind.FORMAT, FormatError),
    ],
)
def test_failure_keeps_error_kind(error: Exception, kind: ConversionErrorKind, exception_type: type) -> None:
    """Tests that a failed result re-raises the matching exception type."""
    result = ConversionResult[int].failure(error)  # type: ignore[arg-type]

    assert not result.ok
    assert result.error_kind == kind
    assert result.value_or(-1) == -1
    with pytest.raises(exception_type, match="bad"):
        result.unwrap()


def test_result_is_immutable() -> None:
    """Tests that results cannot be modified after creation."""
    result = ConversionResult[str].success("x")

    with pytest.raises(ValidationError):
        result.value = "y"  # type: ignore[misc]


def test_error_kind_string() -> None:
    """Tests the string form of the error kind."""
    assert str(ConversionErrorKind.FORMAT) == "format"
