"""This module contains unit tests for the DateLabels model."""

import pytest
from date_formatting.models.labels import DateLabels
from date_formatting.providers.config import Config
from pydantic import ValidationError


def test_defaults_are_chinese_literals() -> None:
    """Tests the default literal table."""
    labels = DateLabels()

    assert labels.weekday(1) == "周日"
    assert labels.weekday(2) == "周一"
    assert labels.weekday(7) == "周六"
    assert labels.just_now == "刚刚"
    assert labels.minutes(5) == "5分钟前"
    assert labels.yesterday == "昨天"
    assert labels.history_pattern == "yyyy-MM-dd"


@pytest.mark.parametrize("index", [0, 8, -1])
def test_weekday_index_out_of_range(index: int) -> None:
    """Tests that only indexes 1 through 7 are accepted."""
    with pytest.raises(ValueError):
        DateLabels().weekday(index)


def test_from_config() -> None:
    """Tests building the table from settings."""
    config = Config(
        DATE_WEEKDAY_LABELS=["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        DATE_MINUTES_AGO_TEMPLATE="{minutes} min ago",
        DATE_YESTERDAY_LABEL="Yesterday",
        DATE_RELATIVE_HISTORY_PATTERN="yyyy-MM-dd HH:mm",
    )

    labels = DateLabels.from_config(config)

    assert labels.weekday(6) == "Fri"
    assert labels.minutes(12) == "12 min ago"
    assert labels.yesterday == "Yesterday"
    assert labels.history_pattern == "yyyy-MM-dd HH:mm"


def test_invalid_tables_are_rejected() -> None:
    """Tests the weekday count and the minutes placeholder."""
    with pytest.raises(ValidationError):
        DateLabels(weekdays=("Sun", "Mon"))
    with pytest.raises(ValidationError):
        DateLabels(minutes_ago="a while ago")
    with pytest.raises(ValidationError):
        DateLabels(minutes_ago="{minutes}{unit}")
    with pytest.raises(ValidationError):
        DateLabels(history_pattern="YYYY-MM-dd")
