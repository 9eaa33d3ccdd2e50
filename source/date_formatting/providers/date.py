"""This module provides centralized date-related utilities.

The :class:`DateProvider` translates between pattern-formatted date strings,
calendar components and epoch timestamps, and renders the human-readable
labels shown next to messages and notes ("刚刚", "昨天 14:32 周五").

Unless stated otherwise, timestamps are whole seconds since the epoch, given
as ``int`` or as a decimal ``str``. The relative label and the ``*_millis``
helpers take milliseconds instead. Every reading of "now" goes through the
injected :class:`~date_formatting.providers.clock.Clock`.
"""

import re
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import TypeVar

from date_formatting.exceptions.date import ConfigurationError, FormatError, ParseError, PatternError
from date_formatting.models.labels import DateLabels
from date_formatting.models.results import ConversionResult
from date_formatting.providers.clock import Clock, SystemClock
from date_formatting.providers.config import Config, ConfigProvider
from date_formatting.providers.logging import LoggingProvider
from date_formatting.providers.pattern import DatePattern
from dateutil.relativedelta import relativedelta
from dateutil.tz import gettz, tzlocal
from pydantic import ValidationError

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
INTEGER_STAMP = re.compile(r"[+-]?\d+")
MINUTE_MILLIS = 60_000
HOUR_MILLIS = 3_600_000

Stamp = int | str


def _truncated_seconds(millis: int) -> int:
    """Converts milliseconds to whole seconds, truncating toward zero."""
    seconds = abs(millis) // 1000
    return seconds if millis >= 0 else -seconds


class DateProvider:
    """Provides centralized constants and methods for date handling.

    This class centralizes date-related formats and logic to ensure
    consistency across the application. It holds no mutable state: the clock,
    the time zone and the label table are fixed at construction.
    """

    CURRENT_DAY_FORMAT = "yyyy.MM.dd"
    MONTH_BOUNDARY_FORMAT = "yyyy.MM.dd HH:mm"
    TIME_FORMAT = "HH:mm"
    YEAR_FORMAT = "yyyy"
    MONTH_FORMAT = "MM"
    DAY_FORMAT = "dd"
    MONTH_DAY_FORMAT = "MM-dd"
    MONTH_DAY_MINUTE_FORMAT = "MM-dd HH:mm"
    YEAR_MONTH_DAY_FORMAT = "yyyy-MM-dd"
    YEAR_MONTH_DAY_MINUTE_FORMAT = "yyyy-MM-dd HH:mm"
    YEAR_MONTH_DAY_SECOND_FORMAT = "yyyy-MM-dd HH:mm:ss"
    YEAR_MONTH_DAY_CN_FORMAT = "yyyy年MM月dd日"
    ISO_LOCAL_FORMAT = "yyyy-MM-dd'T'HH:mm:ss"

    def __init__(
        self,
        clock: Clock | None = None,
        zone: tzinfo | None = None,
        labels: DateLabels | None = None,
        config: Config | None = None,
    ) -> None:
        """Initializes the DateProvider.

        Args:
            clock: The source of "now". Defaults to the system clock.
            zone: The time zone dates are rendered and parsed in. Defaults to
                DATE_TIMEZONE, or the system's local zone when that is unset.
            labels: The literal table. Defaults to the configured labels.
            config: Settings to read defaults from. Loaded when needed.

        Raises:
            ConfigurationError: If the loaded settings are invalid.
        """
        self.logger = LoggingProvider().get_logger()
        if zone is None or labels is None:
            try:
                config = config or ConfigProvider.get_config()
                labels = labels if labels is not None else DateLabels.from_config(config)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid date settings: {e}") from e
        self.clock = clock or SystemClock()
        self.zone = zone if zone is not None else self.resolve_timezone(config.DATE_TIMEZONE)  # type: ignore[union-attr]
        self.labels: DateLabels = labels

    @staticmethod
    def resolve_timezone(name: str | None) -> tzinfo:
        """Looks up a time zone by IANA name, or the local zone when no name is given.

        Args:
            name: An IANA name such as ``Asia/Shanghai``, or None.

        Returns:
            The time zone.

        Raises:
            ConfigurationError: If the name is unknown.
        """
        if not name:
            return tzlocal()
        zone = gettz(name)
        if zone is None:
            raise ConfigurationError(f"Unknown time zone: {name}")
        return zone

    def _now(self) -> datetime:
        return self._from_millis(self.clock.now_millis())

    def _from_millis(self, millis: int) -> datetime:
        try:
            return (EPOCH + timedelta(milliseconds=millis)).astimezone(self.zone)
        except (OverflowError, ValueError) as e:
            raise FormatError(f"Timestamp out of range: {millis}") from e

    @staticmethod
    def _to_seconds(value: datetime) -> int:
        return _truncated_seconds((value - EPOCH) // timedelta(milliseconds=1))

    @staticmethod
    def _coerce_stamp(stamp: Stamp) -> int:
        """Reads a timestamp given as an integer or a decimal string.

        Raises:
            FormatError: If the value is not an integer.
        """
        if isinstance(stamp, bool):
            raise FormatError(f"Not a timestamp: {stamp!r}")
        if isinstance(stamp, int):
            return stamp
        if isinstance(stamp, str) and INTEGER_STAMP.fullmatch(stamp):
            return int(stamp)
        raise FormatError(f"Not an integer timestamp: {stamp!r}")

    def _from_stamp(self, stamp: Stamp) -> datetime:
        return self._from_millis(self._coerce_stamp(stamp) * 1000)

    @staticmethod
    def _shift_days(origin: datetime, delta_days: int) -> datetime:
        try:
            return origin + timedelta(days=delta_days)
        except (OverflowError, ValueError) as e:
            raise FormatError(f"Day shift out of range: {delta_days} days") from e

    def _parse(self, text: str, pattern: str) -> datetime:
        return DatePattern.compile(pattern).parse(text, self.zone, pivot_year=self._now().year)

    def _convert(self, operation: Callable[[], T], description: str) -> ConversionResult[T]:
        """Runs a conversion, turning its failure into a failed result.

        Args:
            operation: The conversion to run.
            description: What is being converted, for the log message.

        Returns:
            The result of the conversion.
        """
        try:
            return ConversionResult.success(operation())
        except PatternError:
            raise
        except (ParseError, FormatError) as e:
            self.logger.warning(f"Failed to convert {description}: {e}")
            return ConversionResult.failure(e)

    def current_formatted(self, pattern: str) -> str:
        """Formats the current time, e.g. ``yyyy.MM.dd HH:mm``."""
        return DatePattern.compile(pattern).format(self._now())

    def current_epoch_seconds(self) -> str:
        """Returns the current time as whole epoch seconds, in decimal."""
        return str(_truncated_seconds(self.clock.now_millis()))

    def parse_to_epoch_seconds(self, text: str, pattern: str) -> ConversionResult[str]:
        """Parses a formatted date into epoch seconds, as a decimal string.

        Args:
            text: The text to parse, e.g. ``2024.03.15 14:32``.
            pattern: The pattern the text was rendered with.

        Returns:
            The epoch seconds, or a failed result when the text does not match.
        """
        return self._convert(lambda: str(self._to_seconds(self._parse(text, pattern))), f"{text!r} with {pattern!r}")

    def parse_to_epoch_seconds_int(self, text: str, pattern: str) -> ConversionResult[int]:
        """Same as :meth:`parse_to_epoch_seconds`, returning an integer."""
        return self._convert(lambda: self._to_seconds(self._parse(text, pattern)), f"{text!r} with {pattern!r}")

    def epoch_seconds_to_formatted(self, stamp: Stamp, pattern: str) -> str:
        """Formats epoch seconds with a pattern.

        Args:
            stamp: The epoch seconds.
            pattern: The pattern to render with.

        Returns:
            The formatted date.

        Raises:
            FormatError: If the stamp is not an integer or is out of range.
        """
        return DatePattern.compile(pattern).format(self._from_stamp(stamp))

    def add_days(self, delta_days: int, pattern: str = CURRENT_DAY_FORMAT, base: Stamp | None = None) -> str:
        """Shifts a date by whole days and formats it.

        The shift keeps the local wall-clock time, so it is always a whole
        number of calendar days even across daylight-saving changes.

        Args:
            delta_days: Days to add; negative values move backwards.
            pattern: The pattern to render with.
            base: The epoch seconds to shift. Defaults to now.

        Returns:
            The shifted date, formatted.

        Raises:
            FormatError: If the base is not an integer or the shifted date is out of range.
        """
        origin = self._now() if base is None else self._from_stamp(base)
        return DatePattern.compile(pattern).format(self._shift_days(origin, delta_days))

    def add_days_stamp(self, base: Stamp, delta_days: int) -> str:
        """Shifts epoch seconds by whole local days and returns epoch seconds."""
        return str(self._to_seconds(self._shift_days(self._from_stamp(base), delta_days)))

    def current_year(self) -> str:
        """Returns the current year, ``yyyy``."""
        return self.current_formatted(self.YEAR_FORMAT)

    def current_month(self) -> str:
        """Returns the current month, ``MM`` (01 is January)."""
        return self.current_formatted(self.MONTH_FORMAT)

    def current_day(self) -> str:
        """Returns the current day of the month, ``dd``."""
        return self.current_formatted(self.DAY_FORMAT)

    def year_of(self, stamp: Stamp) -> str:
        """Returns the year of epoch seconds."""
        return str(self._from_stamp(stamp).year)

    def month_of(self, stamp: Stamp) -> str:
        """Returns the 0-based month of epoch seconds ("0" is January)."""
        return str(self._from_stamp(stamp).month - 1)

    def day_of(self, stamp: Stamp) -> str:
        """Returns the day of the month of epoch seconds, without padding."""
        return str(self._from_stamp(stamp).day)

    @staticmethod
    def _first_of_month(year: int, months_after_january: int) -> date:
        try:
            return date(year, 1, 1) + relativedelta(months=months_after_january)
        except (OverflowError, ValueError) as e:
            raise FormatError(f"Month out of range: {months_after_january} months after January {year}") from e

    def _month_start(self, year: int, month_index: int) -> datetime:
        first = self._first_of_month(year, month_index)
        return datetime(first.year, first.month, 1, tzinfo=self.zone)

    def first_day_of_month(self, year: int, month_index: int) -> str:
        """Returns the first instant of a month, ``yyyy.MM.dd HH:mm``.

        Args:
            year: The year.
            month_index: The 0-based month (0 is January). Values outside
                0..11 roll into the neighbouring years.

        Returns:
            The month's first day at 00:00.

        Raises:
            FormatError: If the month falls outside the supported years.
        """
        return DatePattern.compile(self.MONTH_BOUNDARY_FORMAT).format(self._month_start(year, month_index))

    def last_day_of_month(self, year: int, month_index: int) -> str:
        """Returns the last day of a month at 23:59:59, ``yyyy.MM.dd HH:mm``.

        Args:
            year: The year.
            month_index: The 0-based month (0 is January), as in
                :meth:`first_day_of_month`.

        Returns:
            The month's last day at 23:59.
        """
        last = self._month_start(year, month_index) + relativedelta(day=31, hour=23, minute=59, second=59)
        return DatePattern.compile(self.MONTH_BOUNDARY_FORMAT).format(last)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Returns the number of days in a month.

        Unlike the month-boundary methods, ``month`` is 1-based here
        (1 is January). Values outside 1..12 roll into the neighbouring years.

        Raises:
            FormatError: If the month falls outside the supported years.
        """
        month_start = DateProvider._first_of_month(year, month - 1)
        return (month_start + relativedelta(day=31)).day

    def weekday_index(self, stamp: Stamp) -> int:
        """Returns the day of week of epoch seconds, 1 (Sunday) through 7 (Saturday)."""
        return self._from_stamp(stamp).isoweekday() % 7 + 1

    def weekday_label(self, stamp: Stamp) -> str:
        """Returns the weekday label of epoch seconds, e.g. ``周五``."""
        return self.labels.weekday(self.weekday_index(stamp))

    def formatted_with_weekday(self, stamp: Stamp, pattern: str) -> str:
        """Formats epoch seconds followed by the weekday, e.g. ``2024-03-15 (周五)``."""
        return f"{self.epoch_seconds_to_formatted(stamp, pattern)} ({self.weekday_label(stamp)})"

    def weekday_label_for_text(self, text: str) -> ConversionResult[str]:
        """Returns the weekday label of a ``yyyy-MM-dd`` date."""

        def label() -> str:
            parsed = self._parse(text, self.YEAR_MONTH_DAY_FORMAT)
            return self.labels.weekday(parsed.isoweekday() % 7 + 1)

        return self._convert(label, repr(text))

    def relative_label(self, epoch_millis: Stamp) -> str:
        """Renders a message time the way chat apps do.

        Relative to the clock: under a minute old gives the just-now label,
        under an hour gives the minutes-ago label, the same local day gives
        ``HH:mm``, the same year gives ``MM-dd HH:mm`` and anything older uses
        the history pattern (``yyyy-MM-dd`` by default).

        Args:
            epoch_millis: The message time in epoch **milliseconds**.

        Returns:
            The label.
        """
        value = self._coerce_stamp(epoch_millis)
        now_millis = self.clock.now_millis()
        age = now_millis - value
        if age < MINUTE_MILLIS:
            return self.labels.just_now
        if age < HOUR_MILLIS:
            return self.labels.minutes(age // MINUTE_MILLIS)

        created = self._from_millis(value)
        now = self._from_millis(now_millis)
        if created.date() == now.date():
            return DatePattern.compile(self.TIME_FORMAT).format(created)
        if created.year == now.year:
            return DatePattern.compile(self.MONTH_DAY_MINUTE_FORMAT).format(created)
        return DatePattern.compile(self.labels.history_pattern).format(created)

    def contextual_label(self, stamp: Stamp) -> str:
        """Renders a note time with its weekday, e.g. ``昨天 14:32 周五``.

        Today gives ``HH:mm 周X``, yesterday ``昨天 HH:mm 周X``, earlier this
        year ``MM-dd HH:mm 周X`` and anything else ``yyyy-MM-dd HH:mm 周X``.
        Day and year boundaries are inclusive.

        Args:
            stamp: The note time in epoch seconds.

        Returns:
            The label.
        """
        value = self._coerce_stamp(stamp)
        now = self._now()
        today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        today_end = now.replace(hour=23, minute=59, second=59, microsecond=0)
        today_start_stamp = self._to_seconds(today_start)
        today_end_stamp = self._to_seconds(today_end)
        yesterday_start_stamp = int(self.add_days_stamp(today_start_stamp, -1))
        yesterday_end_stamp = int(self.add_days_stamp(today_end_stamp, -1))
        year_start_stamp = self._to_seconds(today_start.replace(month=1, day=1))
        year_end_stamp = self._to_seconds(today_end.replace(month=12, day=31))

        week = self.weekday_label(value)
        if today_start_stamp <= value <= today_end_stamp:
            return f"{self.epoch_seconds_to_formatted(value, self.TIME_FORMAT)} {week}"
        if yesterday_start_stamp <= value <= yesterday_end_stamp:
            return f"{self.labels.yesterday} {self.epoch_seconds_to_formatted(value, self.TIME_FORMAT)} {week}"
        if year_start_stamp <= value <= year_end_stamp:
            return f"{self.epoch_seconds_to_formatted(value, self.MONTH_DAY_MINUTE_FORMAT)} {week}"
        return f"{self.epoch_seconds_to_formatted(value, self.YEAR_MONTH_DAY_MINUTE_FORMAT)} {week}"

    def _local_date(self, value: datetime | Stamp) -> date:
        if isinstance(value, datetime):
            return value.date() if value.tzinfo is None else value.astimezone(self.zone).date()
        return self._from_stamp(value).date()

    def gap_in_days(self, start: datetime | Stamp, end: datetime | Stamp) -> int:
        """Counts the calendar days between two dates, ignoring the time of day.

        Naive datetimes are taken as local wall-clock times; aware datetimes
        and epoch seconds are converted to the provider's zone first.

        Args:
            start: The first date.
            end: The second date.

        Returns:
            The number of days from ``start`` to ``end``; negative when ``end``
            comes first.
        """
        return (self._local_date(end) - self._local_date(start)).days

    def iso_to_date(self, text: str) -> ConversionResult[str]:
        """Converts ``yyyy-MM-dd'T'HH:mm:ss`` text to ``yyyy-MM-dd``."""
        return self._convert(
            lambda: DatePattern.compile(self.YEAR_MONTH_DAY_FORMAT).format(self._parse(text, self.ISO_LOCAL_FORMAT)),
            repr(text),
        )

    def parse_datetime(self, text: str, pattern: str = YEAR_MONTH_DAY_SECOND_FORMAT) -> ConversionResult[datetime]:
        """Parses text into an aware datetime in the provider's zone."""
        return self._convert(lambda: self._parse(text, pattern), f"{text!r} with {pattern!r}")

    def format_millis(self, value: Stamp, pattern: str) -> str:
        """Formats epoch **milliseconds** with a pattern.

        Raises:
            FormatError: If the value is not an integer or is out of range.
        """
        return DatePattern.compile(pattern).format(self._from_millis(self._coerce_stamp(value)))

    def month_day_minute(self, value: Stamp) -> str:
        """Epoch milliseconds as ``MM-dd HH:mm``."""
        return self.format_millis(value, self.MONTH_DAY_MINUTE_FORMAT)

    def year_month_day(self, value: Stamp) -> str:
        """Epoch milliseconds as ``yyyy-MM-dd``."""
        return self.format_millis(value, self.YEAR_MONTH_DAY_FORMAT)

    def year_month_day_cn(self, value: Stamp) -> str:
        """Epoch milliseconds as ``yyyy年MM月dd日``."""
        return self.format_millis(value, self.YEAR_MONTH_DAY_CN_FORMAT)

    def month_day(self, value: Stamp) -> str:
        """Epoch milliseconds as ``MM-dd``."""
        return self.format_millis(value, self.MONTH_DAY_FORMAT)

    def year_month_day_minute(self, value: Stamp) -> str:
        """Epoch milliseconds as ``yyyy-MM-dd HH:mm``."""
        return self.format_millis(value, self.YEAR_MONTH_DAY_MINUTE_FORMAT)

    def year_month_day_second(self, value: Stamp) -> str:
        """Epoch milliseconds as ``yyyy-MM-dd HH:mm:ss``."""
        return self.format_millis(value, self.YEAR_MONTH_DAY_SECOND_FORMAT)
