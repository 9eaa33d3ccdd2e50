"""This module compiles date patterns such as ``yyyy.MM.dd HH:mm``.

The patterns follow the letter conventions of SimpleDateFormat/LDML, which
is what mobile clients and their backends exchange, rather than Python's
``strftime`` directives. A compiled :class:`DatePattern` can both render a
``datetime`` and parse text back into one.

Supported letters::

    y  year (``yy`` renders two digits)     M  month (``MMM``/``MMMM`` names)
    d  day of month                         E  weekday name
    H  hour 0-23       k  hour 1-24         K  hour 0-11      h  hour 1-12
    m  minute          s  second            S  millisecond    a  AM/PM marker

Text between single quotes is literal and ``''`` stands for a quote. Any
character that is not an ASCII letter (``.``, ``-``, ``年``...) is literal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, tzinfo
from functools import lru_cache

from date_formatting.exceptions.date import ParseError, PatternError

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

SUPPORTED_LETTERS = frozenset("yMdEHkKhmsSa")
NUMERIC_LETTERS = frozenset("ydHkKhmsS")
TWO_DIGIT_YEAR_WINDOW = 80


@dataclass(frozen=True)
class PatternField:
    """A run of one repeated pattern letter, e.g. ``yyyy`` or ``HH``."""

    letter: str
    count: int

    @property
    def is_numeric(self) -> bool:
        """Whether the field renders as digits."""
        return self.letter in NUMERIC_LETTERS or (self.letter == "M" and self.count <= 2)


Token = PatternField | str


def _tokenize(pattern: str) -> tuple[Token, ...]:
    """Splits a pattern into fields and literal runs.

    Args:
        pattern: The pattern to split.

    Returns:
        The tokens in order; literals are plain strings.

    Raises:
        PatternError: If a letter is unsupported or a quote is never closed.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    index = 0
    length = len(pattern)

    def flush_literal() -> None:
        if literal:
            tokens.append("".join(literal))
            literal.clear()

    while index < length:
        char = pattern[index]
        if char == "'":
            if index + 1 < length and pattern[index + 1] == "'":
                literal.append("'")
                index += 2
                continue
            cursor = index + 1
            while True:
                if cursor >= length:
                    raise PatternError(f"Unterminated quote in date pattern {pattern!r}")
                if pattern[cursor] == "'":
                    if cursor + 1 < length and pattern[cursor + 1] == "'":
                        literal.append("'")
                        cursor += 2
                        continue
                    break
                literal.append(pattern[cursor])
                cursor += 1
            index = cursor + 1
            continue
        if char.isascii() and char.isalpha():
            if char not in SUPPORTED_LETTERS:
                raise PatternError(f"Unsupported pattern letter {char!r} in date pattern {pattern!r}")
            end = index
            while end < length and pattern[end] == char:
                end += 1
            flush_literal()
            tokens.append(PatternField(char, end - index))
            index = end
            continue
        literal.append(char)
        index += 1

    flush_literal()
    return tuple(tokens)


def _names_alternation(names: tuple[str, ...]) -> str:
    """Builds a case-insensitive regex group matching full or abbreviated names."""
    options = sorted({*names, *(name[:3] for name in names)}, key=len, reverse=True)
    return "((?i:" + "|".join(options) + "))"


def _lookup_name(names: tuple[str, ...], text: str) -> int:
    """Returns the 1-based position of a full or abbreviated name."""
    lowered = text.lower()
    for position, name in enumerate(names, start=1):
        if lowered in (name.lower(), name[:3].lower()):
            return position
    raise ParseError(f"Unknown name {text!r}")


def _resolve_two_digit_year(value: int, pivot_year: int) -> int:
    """Places a two-digit year in the century window that starts 80 years before ``pivot_year``."""
    start = pivot_year - TWO_DIGIT_YEAR_WINDOW
    candidate = (start // 100) * 100 + value
    if candidate < start:
        candidate += 100
    return candidate


class DatePattern:
    """A compiled date pattern that formats and parses ``datetime`` values.

    Instances are immutable; use :meth:`compile` to share them.
    """

    def __init__(self, pattern: str) -> None:
        """Compiles the pattern.

        Args:
            pattern: The pattern text, e.g. ``yyyy-MM-dd HH:mm``.

        Raises:
            PatternError: If the pattern is malformed.
        """
        self.pattern = pattern
        self.tokens = _tokenize(pattern)
        self._fields = tuple(token for token in self.tokens if isinstance(token, PatternField))
        self._regex = re.compile(self._build_regex())

    @classmethod
    def compile(cls, pattern: str) -> DatePattern:
        """Returns the cached compiled form of ``pattern``."""
        return _compile(pattern)

    def _build_regex(self) -> str:
        parts = []
        for position, token in enumerate(self.tokens):
            if isinstance(token, str):
                parts.append(re.escape(token))
                continue
            if token.is_numeric:
                following = self.tokens[position + 1] if position + 1 < len(self.tokens) else None
                if isinstance(following, PatternField) and following.is_numeric:
                    parts.append(rf"(\d{{{token.count}}})")
                else:
                    parts.append(r"(\d+)")
            elif token.letter == "M":
                parts.append(_names_alternation(MONTH_NAMES))
            elif token.letter == "E":
                parts.append(_names_alternation(WEEKDAY_NAMES))
            else:
                parts.append("((?i:AM|PM))")
        return "".join(parts)

    def format(self, value: datetime) -> str:
        """Renders a datetime with this pattern.

        Args:
            value: The datetime to render, already in the desired time zone.

        Returns:
            The rendered text.
        """
        return "".join(token if isinstance(token, str) else self._format_field(token, value) for token in self.tokens)

    @staticmethod
    def _format_field(field: PatternField, value: datetime) -> str:
        letter, count = field.letter, field.count
        if letter == "y":
            if count == 2:
                return f"{value.year % 100:02d}"
            return str(value.year).zfill(count)
        if letter == "M":
            if count >= 4:
                return MONTH_NAMES[value.month - 1]
            if count == 3:
                return MONTH_NAMES[value.month - 1][:3]
            return str(value.month).zfill(count)
        if letter == "E":
            name = WEEKDAY_NAMES[value.weekday()]
            return name if count >= 4 else name[:3]
        if letter == "a":
            return "AM" if value.hour < 12 else "PM"
        numbers = {
            "d": value.day,
            "H": value.hour,
            "k": value.hour or 24,
            "K": value.hour % 12,
            "h": value.hour % 12 or 12,
            "m": value.minute,
            "s": value.second,
            "S": value.microsecond // 1000,
        }
        return str(numbers[letter]).zfill(count)

    def parse(self, text: str, tz: tzinfo | None, *, pivot_year: int) -> datetime:
        """Parses text that starts with a date rendered by this pattern.

        Fields missing from the pattern default to 1970-01-01 00:00:00.000.
        Text after the matched prefix is ignored.

        Args:
            text: The text to parse.
            tz: The time zone the text is expressed in.
            pivot_year: The current year, used to place two-digit years.

        Returns:
            The parsed, time-zone-aware datetime.

        Raises:
            ParseError: If the text does not match or names an invalid date.
        """
        match = self._regex.match(text)
        if match is None:
            raise ParseError(f"Unparseable date {text!r} for pattern {self.pattern!r}")

        year, month, day = 1970, 1, 1
        hour = minute = second = millis = 0
        hour12: int | None = None
        post_meridiem = False

        for field, raw in zip(self._fields, match.groups()):
            letter = field.letter
            if letter == "y":
                year = int(raw)
                if field.count <= 2 and len(raw) == 2:
                    year = _resolve_two_digit_year(year, pivot_year)
            elif letter == "M":
                month = int(raw) if field.is_numeric else _lookup_name(MONTH_NAMES, raw)
            elif letter == "d":
                day = int(raw)
            elif letter == "H":
                hour = int(raw)
            elif letter == "k":
                hour = 0 if int(raw) == 24 else int(raw)
            elif letter == "h":
                hour12 = 0 if int(raw) == 12 else int(raw)
            elif letter == "K":
                hour12 = int(raw)
            elif letter == "m":
                minute = int(raw)
            elif letter == "s":
                second = int(raw)
            elif letter == "S":
                millis = int(raw)
            elif letter == "a":
                post_meridiem = raw.upper() == "PM"

        if hour12 is not None:
            if hour12 > 11:
                raise ParseError(f"Hour {hour12} is out of range in {text!r} for pattern {self.pattern!r}")
            hour = hour12 + 12 if post_meridiem else hour12

        try:
            return datetime(year, month, day, hour, minute, second, millis * 1000, tzinfo=tz)
        except ValueError as e:
            raise ParseError(f"Invalid date {text!r} for pattern {self.pattern!r}: {e}") from e


@lru_cache(maxsize=128)
def _compile(pattern: str) -> DatePattern:
    return DatePattern(pattern)
