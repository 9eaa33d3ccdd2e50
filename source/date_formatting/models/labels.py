"""This module defines the table of literal strings the date labels are built from."""

from __future__ import annotations

from date_formatting.providers.config import (
    DEFAULT_WEEKDAY_LABELS,
    WEEKDAY_COUNT,
    Config,
    check_minutes_template,
    check_pattern,
    check_weekday_count,
)
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DateLabels(BaseModel):
    """Literal strings used by the weekday, relative and contextual labels.

    The defaults are the Chinese literals the mobile client displays. Weekday
    labels are ordered Sunday first, matching day-of-week index 1 (Sunday)
    through 7 (Saturday).
    """

    model_config = ConfigDict(frozen=True)

    weekdays: tuple[str, ...] = Field(default=tuple(DEFAULT_WEEKDAY_LABELS))
    just_now: str = "刚刚"
    minutes_ago: str = "{minutes}分钟前"
    yesterday: str = "昨天"
    history_pattern: str = "yyyy-MM-dd"

    @field_validator("weekdays")
    @classmethod
    def check_weekdays(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Ensures one label per day of the week."""
        check_weekday_count(value)
        return value

    @field_validator("minutes_ago")
    @classmethod
    def check_minutes_ago(cls, value: str) -> str:
        """Ensures the minutes-ago template can receive the number of minutes."""
        check_minutes_template(value)
        return value

    @field_validator("history_pattern")
    @classmethod
    def check_history_pattern(cls, value: str) -> str:
        """Ensures the history pattern compiles."""
        check_pattern(value)
        return value

    @classmethod
    def from_config(cls, config: Config) -> DateLabels:
        """Builds the label table from the application settings.

        Args:
            config: The loaded settings.

        Returns:
            The label table.
        """
        return cls(
            weekdays=tuple(config.DATE_WEEKDAY_LABELS),
            just_now=config.DATE_JUST_NOW_LABEL,
            minutes_ago=config.DATE_MINUTES_AGO_TEMPLATE,
            yesterday=config.DATE_YESTERDAY_LABEL,
            history_pattern=config.DATE_RELATIVE_HISTORY_PATTERN,
        )

    def weekday(self, index: int) -> str:
        """Returns the label for a day-of-week index, 1 (Sunday) through 7 (Saturday).

        Args:
            index: The day-of-week index.

        Returns:
            The label.

        Raises:
            ValueError: If the index is outside 1..7.
        """
        if not 1 <= index <= WEEKDAY_COUNT:
            raise ValueError(f"Day-of-week index must be between 1 and {WEEKDAY_COUNT}, got {index}")
        return self.weekdays[index - 1]

    def minutes(self, minutes: int) -> str:
        """Renders the minutes-ago template."""
        return self.minutes_ago.format(minutes=minutes)
