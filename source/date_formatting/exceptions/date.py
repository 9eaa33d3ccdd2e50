"""This module defines custom exceptions raised by the date formatting providers."""


class DateFormattingError(Exception):
    """Base exception for errors that occur while formatting or parsing dates."""

    pass


class ParseError(DateFormattingError):
    """Raised when a text does not match the date pattern it is parsed with."""

    pass


class FormatError(DateFormattingError):
    """Raised when a value cannot be interpreted as an integer timestamp."""

    pass


class PatternError(DateFormattingError):
    """Raised when a date pattern uses an unsupported letter or is malformed."""

    pass


class ConfigurationError(DateFormattingError):
    """Raised when the date settings (time zone, labels) are invalid."""

    pass
