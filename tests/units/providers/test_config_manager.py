"""This module contains unit tests for the ConfigManager."""

from pathlib import Path

import pytest
from date_formatting.exceptions.date import ConfigurationError
from date_formatting.providers.config_manager import ConfigManager


def test_missing_file_reads_as_empty(tmp_path: Path) -> None:
    """Tests that reading does not create the file."""
    manager = ConfigManager(tmp_path / ".env")

    assert manager.get_all() == {}
    assert manager.get("DATE_TIMEZONE") is None
    assert not (tmp_path / ".env").exists()


def test_set_get_and_unset(tmp_path: Path) -> None:
    """Tests the full write cycle."""
    manager = ConfigManager(tmp_path / ".env")

    manager.set("DATE_TIMEZONE", "Asia/Shanghai")
    manager.set("DATE_YESTERDAY_LABEL", "昨天")

    assert manager.get("DATE_TIMEZONE") == "Asia/Shanghai"
    assert manager.get_all() == {"DATE_TIMEZONE": "Asia/Shanghai", "DATE_YESTERDAY_LABEL": "昨天"}

    manager.unset("DATE_TIMEZONE")

    assert manager.get("DATE_TIMEZONE") is None
    assert manager.get("DATE_YESTERDAY_LABEL") == "昨天"


def test_unset_on_missing_file_is_a_no_op(tmp_path: Path) -> None:
    """Tests that unsetting without a file does nothing."""
    ConfigManager(tmp_path / ".env").unset("DATE_TIMEZONE")

    assert not (tmp_path / ".env").exists()


def test_set_rolls_back_invalid_values(tmp_path: Path) -> None:
    """Tests that a rejected value leaves the file as it was."""
    manager = ConfigManager(tmp_path / ".env")
    manager.set("DATE_YESTERDAY_LABEL", "Yesterday")

    with pytest.raises(ConfigurationError, match="DATE_MINUTES_AGO_TEMPLATE"):
        manager.set("DATE_MINUTES_AGO_TEMPLATE", "{minutes}{unit}")

    assert manager.get_all() == {"DATE_YESTERDAY_LABEL": "Yesterday"}


def test_set_removes_file_created_for_invalid_value(tmp_path: Path) -> None:
    """Tests that a rejected first value does not leave an empty file behind."""
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path / ".env").set("DATE_WEEKDAY_LABELS", '["Sun", "Mon"]')

    assert not (tmp_path / ".env").exists()


def test_set_accepts_list_values_as_json(tmp_path: Path) -> None:
    """Tests that a weekday list is stored as JSON and loads back into the settings."""
    manager = ConfigManager(tmp_path / ".env")

    manager.set("DATE_WEEKDAY_LABELS", '["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]')

    assert manager.get("DATE_WEEKDAY_LABELS") == '["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]'
