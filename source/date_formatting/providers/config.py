"""This module defines the configuration management for the date formatting tools.

It uses Pydantic's BaseSettings to create a strongly-typed configuration
class that reads from environment variables and .env files. Every literal
the formatters print (weekday names, "just now", "yesterday") lives here so
it can be localized without touching the formatting code.

The label checks are plain functions so the settings and the
:class:`~date_formatting.models.labels.DateLabels` table share them.
"""

from collections.abc import Sequence
from string import Formatter

from date_formatting.exceptions.date import PatternError
from date_formatting.providers.pattern import DatePattern
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WEEKDAY_LABELS = ["周日", "周一", "周二", "周三", "周四", "周五", "周六"]
WEEKDAY_COUNT = 7


def check_weekday_count(value: Sequence[str]) -> None:
    """Ensures exactly one label is given per day of the week, Sunday first.

    Raises:
        ValueError: If the sequence does not hold seven labels.
    """
    if len(value) != WEEKDAY_COUNT:
        raise ValueError(f"Expected {WEEKDAY_COUNT} weekday labels (Sunday first), got {len(value)}")


def check_minutes_template(value: str) -> None:
    """Ensures the minutes-ago template renders with only a ``{minutes}`` value.

    Raises:
        ValueError: If the placeholder is missing or the template asks for
            anything else.
    """
    try:
        fields = {name for _, name, _, _ in Formatter().parse(value) if name}
        value.format(minutes=1)
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(f"The minutes-ago template cannot be rendered: {e!r}") from e
    if "minutes" not in fields:
        raise ValueError("The minutes-ago template must contain the '{minutes}' placeholder")


def check_pattern(value: str) -> None:
    """Ensures a configured date pattern compiles.

    Raises:
        ValueError: If the pattern uses an unsupported letter or is malformed.
    """
    try:
        DatePattern.compile(value)
    except PatternError as e:
        raise ValueError(str(e)) from e


class Config(BaseSettings):
    """A Pydantic model for managing application settings.

    It automatically loads configuration from environment variables and .env files.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    DATE_TIMEZONE: str | None = None

    DATE_WEEKDAY_LABELS: list[str] = DEFAULT_WEEKDAY_LABELS
    DATE_JUST_NOW_LABEL: str = "刚刚"
    DATE_MINUTES_AGO_TEMPLATE: str = "{minutes}分钟前"
    DATE_YESTERDAY_LABEL: str = "昨天"
    DATE_RELATIVE_HISTORY_PATTERN: str = "yyyy-MM-dd"

    @field_validator("DATE_WEEKDAY_LABELS")
    @classmethod
    def check_weekday_labels(cls, value: list[str]) -> list[str]:
        """Validates the weekday labels with :func:`check_weekday_count`."""
        check_weekday_count(value)
        return value

    @field_validator("DATE_MINUTES_AGO_TEMPLATE")
    @classmethod
    def check_minutes_placeholder(cls, value: str) -> str:
        """Validates the minutes-ago template with :func:`check_minutes_template`."""
        check_minutes_template(value)
        return value

    @field_validator("DATE_RELATIVE_HISTORY_PATTERN")
    @classmethod
    def check_history_pattern(cls, value: str) -> str:
        """Validates the history pattern with :func:`check_pattern`."""
        check_pattern(value)
        return value


class ConfigProvider:
    """A provider class that acts as a factory for the application's configuration.

    It does not hold state but provides a method to create fresh config instances.
    """

    @staticmethod
    def get_config() -> Config:
        """Factory method that instantiates and returns a new Config object.

        Calling this function will always create a new instance of the Config model,
        which forces Pydantic to reload and re-validate all settings from the
        current environment variables. This ensures the configuration is always fresh.

        Returns:
            A new, validated Config object.
        """
        return Config()
