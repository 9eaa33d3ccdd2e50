"""This module defines the 'config' command group for the date formatting CLI."""

import click
from date_formatting.exceptions.date import ConfigurationError
from date_formatting.providers.config import ConfigProvider
from date_formatting.providers.config_manager import ConfigManager


@click.group("config")
def config_group() -> None:
    """Groups commands related to configuration management."""
    pass


@config_group.command("show")
def show() -> None:
    """Shows the effective settings, after environment variables and .env are applied."""
    config = ConfigProvider.get_config()
    for key, value in config.model_dump().items():
        click.echo(f"{key}: {value}")


@config_group.command("list")
@click.option("--file", "env_file", type=click.Path(), default=".env", help="Path to the .env file.")
def list_values(env_file: str) -> None:
    """Lists all configuration key-value pairs stored in the .env file.

    Args:
        env_file: The path to the .env file.
    """
    config = ConfigManager(env_file).get_all()

    if not config:
        click.echo(f"No configuration found in {env_file}")
        return

    click.echo(f"Configuration from {env_file}:")
    for key, value in config.items():
        click.echo(f"{key}={value}")


@config_group.command("get")
@click.argument("key")
@click.option("--file", "env_file", type=click.Path(), default=".env", help="Path to the .env file.")
def get_value(key: str, env_file: str) -> None:
    """Gets a configuration value.

    Args:
        key: The configuration key to get.
        env_file: The path to the .env file.
    """
    value = ConfigManager(env_file).get(key)

    if value is None:
        click.secho(f"Key '{key}' not found in {env_file}", fg="red")
        raise click.Abort()

    click.echo(value)


@config_group.command("set")
@click.argument("key")
@click.argument("value", required=False)
@click.option("--unset", is_flag=True, help="Remove the configuration key.")
@click.option("--file", "env_file", type=click.Path(), default=".env", help="Path to the .env file.")
def set_value(key: str, value: str | None, unset: bool, env_file: str) -> None:
    """Sets or unsets a configuration value in the specified .env file.

    Args:
        key: The configuration key to set.
        value: The configuration value to set.
        unset: If True, removes the key.
        env_file: The path to the .env file.
    """
    if unset and value is not None:
        raise click.UsageError("Cannot use --unset with a value.")
    if not unset and value is None:
        raise click.UsageError("A value is required unless --unset is used.")

    config_manager = ConfigManager(env_file)

    if unset:
        config_manager.unset(key)
        click.secho(f"Unset '{key}' in {env_file}", fg="yellow")
    else:
        try:
            config_manager.set(key, value)  # type: ignore[arg-type]
        except ConfigurationError as e:
            click.secho(f"An error occurred: {e}", fg="red", err=True)
            raise click.Abort() from e
        click.secho(f"Set '{key}' in {env_file}", fg="green")
