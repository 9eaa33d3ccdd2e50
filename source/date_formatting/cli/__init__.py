"""This module initializes the CLI application."""

import json
from typing import Any

import click
from date_formatting.cli.config import config_group
from date_formatting.cli.dates import register_date_commands
from date_formatting.providers.date import DateProvider
from date_formatting.providers.logging import LoggingProvider


class Context:
    """A context object to pass global options to subcommands."""

    def __init__(self, output_format: str, timezone_name: str | None = None):
        """Initializes the context.

        Args:
            output_format: The desired output format (e.g., 'text', 'json').
            timezone_name: An IANA time zone overriding DATE_TIMEZONE.
        """
        self.output_format = output_format
        self.timezone_name = timezone_name

    def provider(self) -> DateProvider:
        """Builds the date provider for the selected time zone."""
        if self.timezone_name:
            return DateProvider(zone=DateProvider.resolve_timezone(self.timezone_name))
        return DateProvider()

    def emit(self, value: Any) -> None:
        """Prints a command's result in the selected output format.

        Args:
            value: A scalar, or a mapping of named values.
        """
        if self.output_format == "json":
            payload = value if isinstance(value, dict) else {"value": value}
            click.echo(json.dumps(payload, ensure_ascii=False))
        elif isinstance(value, dict):
            for key, item in value.items():
                click.echo(f"{key}: {item}")
        else:
            click.echo(value)


def create_cli() -> click.Group:
    """Create and configure the main CLI group with all subcommands.

    This function acts as a factory for the CLI application. It imports
    command groups from other modules and adds them to a root group.

    Returns:
        The main Click command group for the application.
    """

    @click.group()
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
        help="Override the default log level for this command.",
    )
    @click.option(
        "--timezone",
        "timezone_name",
        default=None,
        help="IANA time zone to render and parse dates in (defaults to DATE_TIMEZONE or the local zone).",
    )
    @click.option(
        "--output",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        help="Set the output format.",
    )
    @click.pass_context
    def cli(ctx: click.Context, log_level: str | None, timezone_name: str | None, output: str) -> None:
        """Formats, parses and labels dates the way the mobile client shows them.

        Args:
            ctx: The Click context object.
            log_level: The desired logging level.
            timezone_name: The time zone override.
            output: The desired output format.
        """
        LoggingProvider().get_logger(level_override=log_level)
        ctx.obj = Context(output_format=output.lower(), timezone_name=timezone_name)

    register_date_commands(cli)
    cli.add_command(config_group)

    return cli
