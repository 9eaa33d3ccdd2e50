"""This module defines the explicit result type returned by conversions.

Parsing a date string or interpreting a timestamp can fail. Instead of
returning a bare ``None`` that callers may forget to check, conversion
operations return a :class:`ConversionResult` that carries either the
converted value or a description of the failure.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, TypeVar

from date_formatting.exceptions.date import DateFormattingError, FormatError, ParseError
from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ConversionErrorKind(StrEnum):
    """Identifies which kind of failure a conversion ran into."""

    PARSE = "parse"
    FORMAT = "format"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value


_ERROR_TYPES: dict[ConversionErrorKind, type[DateFormattingError]] = {
    ConversionErrorKind.PARSE: ParseError,
    ConversionErrorKind.FORMAT: FormatError,
}


class ConversionResult(BaseModel, Generic[T]):
    """Holds the outcome of a conversion: a value or an error, never both."""

    model_config = ConfigDict(frozen=True)

    value: T | None = None
    error: str | None = None
    error_kind: ConversionErrorKind | None = None

    @classmethod
    def success(cls, value: T) -> ConversionResult[T]:
        """Builds a successful result.

        Args:
            value: The converted value.

        Returns:
            A result wrapping the value.
        """
        return cls(value=value)

    @classmethod
    def failure(cls, error: DateFormattingError) -> ConversionResult[T]:
        """Builds a failed result from the exception that caused it.

        Args:
            error: The exception raised by the conversion.

        Returns:
            A result describing the failure.
        """
        kind = ConversionErrorKind.FORMAT if isinstance(error, FormatError) else ConversionErrorKind.PARSE
        return cls(error=str(error), error_kind=kind)

    @property
    def ok(self) -> bool:
        """Whether the conversion produced a value."""
        return self.error_kind is None

    def unwrap(self) -> T:
        """Returns the converted value or raises the error that prevented it.

        Returns:
            The converted value.

        Raises:
            ParseError: If the conversion failed to parse its input.
            FormatError: If the conversion failed to interpret a timestamp.
        """
        if self.error_kind is not None:
            raise _ERROR_TYPES[self.error_kind](self.error)
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Returns the converted value, or ``default`` when the conversion failed."""
        if self.error_kind is not None:
            return default
        return self.value  # type: ignore[return-value]
