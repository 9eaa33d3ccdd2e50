"""This module contains fixtures shared by the provider unit tests."""

import pytest
from date_formatting.models.labels import DateLabels
from date_formatting.providers.clock import FixedClock
from date_formatting.providers.date import DateProvider
from dateutil.tz import UTC, gettz

NOW_MILLIS = 1710513120000


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Returns a clock frozen at 2024-03-15 14:32:00 UTC, a Friday."""
    return FixedClock(NOW_MILLIS)


@pytest.fixture
def date_provider(fixed_clock: FixedClock) -> DateProvider:
    """Returns a DateProvider working in UTC with the default labels."""
    return DateProvider(clock=fixed_clock, zone=UTC, labels=DateLabels())


@pytest.fixture
def shanghai_provider(fixed_clock: FixedClock) -> DateProvider:
    """Returns a DateProvider working in Asia/Shanghai (UTC+8, no daylight saving)."""
    return DateProvider(clock=fixed_clock, zone=gettz("Asia/Shanghai"), labels=DateLabels())


@pytest.fixture
def english_provider(fixed_clock: FixedClock) -> DateProvider:
    """Returns a UTC DateProvider with English labels."""
    labels = DateLabels(
        weekdays=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        just_now="just now",
        minutes_ago="{minutes} minutes ago",
        yesterday="Yesterday",
    )
    return DateProvider(clock=fixed_clock, zone=UTC, labels=labels)
