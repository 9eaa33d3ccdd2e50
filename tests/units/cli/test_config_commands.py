"""Tests for the config command group."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner
from date_formatting.cli import create_cli


@patch("date_formatting.cli.config.ConfigProvider.get_config")
def test_config_show_command(mock_get_config: MagicMock) -> None:
    """Tests the config show command."""
    # Arrange
    mock_config = MagicMock()
    mock_config.model_dump.return_value = {
        "LOG_LEVEL": "INFO",
        "DATE_TIMEZONE": "Asia/Shanghai",
    }
    mock_get_config.return_value = mock_config

    runner = CliRunner()
    cli = create_cli()

    # Act
    result = runner.invoke(cli, ["config", "show"])

    # Assert
    assert result.exit_code == 0
    assert "LOG_LEVEL: INFO" in result.output
    assert "DATE_TIMEZONE: Asia/Shanghai" in result.output


def test_config_set_get_list_and_unset(tmp_path: Path) -> None:
    """Tests the .env round trip through the CLI."""
    runner = CliRunner()
    cli = create_cli()
    env_file = str(tmp_path / ".env")

    result = runner.invoke(cli, ["config", "set", "DATE_TIMEZONE", "Asia/Shanghai", "--file", env_file])
    assert result.exit_code == 0
    assert "Set 'DATE_TIMEZONE'" in result.output

    result = runner.invoke(cli, ["config", "get", "DATE_TIMEZONE", "--file", env_file])
    assert result.output.strip() == "Asia/Shanghai"

    result = runner.invoke(cli, ["config", "list", "--file", env_file])
    assert "DATE_TIMEZONE=Asia/Shanghai" in result.output

    result = runner.invoke(cli, ["config", "set", "DATE_TIMEZONE", "--unset", "--file", env_file])
    assert result.exit_code == 0

    result = runner.invoke(cli, ["config", "get", "DATE_TIMEZONE", "--file", env_file])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_config_list_without_file(tmp_path: Path) -> None:
    """Tests listing a missing .env file."""
    runner = CliRunner()

    result = runner.invoke(create_cli(), ["config", "list", "--file", str(tmp_path / "missing.env")])

    assert result.exit_code == 0
    assert "No configuration found" in result.output


def test_config_set_requires_value() -> None:
    """Tests the set command's argument checks."""
    runner = CliRunner()

    result = runner.invoke(create_cli(), ["config", "set", "DATE_TIMEZONE"])

    assert result.exit_code == 2
    assert "A value is required" in result.output


def test_config_set_rejects_invalid_value(tmp_path: Path) -> None:
    """Tests that a value the settings reject is reported and not written."""
    runner = CliRunner()
    env_file = tmp_path / ".env"
    env_file.write_text("DATE_TIMEZONE='Asia/Shanghai'\n", encoding="utf-8")

    result = runner.invoke(
        create_cli(), ["config", "set", "DATE_RELATIVE_HISTORY_PATTERN", "YYYY-MM-dd", "--file", str(env_file)]
    )

    assert result.exit_code == 1
    assert "Invalid value for DATE_RELATIVE_HISTORY_PATTERN" in result.output
    assert env_file.read_text(encoding="utf-8") == "DATE_TIMEZONE='Asia/Shanghai'\n"
