"""This module defines the date commands of the date formatting CLI."""

import functools
from collections.abc import Callable
from typing import Any

import click
from date_formatting.exceptions.date import DateFormattingError
from date_formatting.providers.date import DateProvider

DEFAULT_PATTERN = DateProvider.MONTH_BOUNDARY_FORMAT


def reports_errors(command: Callable[..., None]) -> Callable[..., None]:
    """Turns date errors raised by a command into a red message and an abort.

    Args:
        command: The command callback to wrap.

    Returns:
        The wrapped callback.
    """

    @functools.wraps(command)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            command(*args, **kwargs)
        except DateFormattingError as e:
            click.secho(f"An error occurred: {e}", fg="red", err=True)
            raise click.Abort() from e

    return wrapper


@click.command("now")
@click.option("--pattern", "-p", default=DEFAULT_PATTERN, show_default=True, help="Pattern to render with.")
@click.pass_context
@reports_errors
def now(ctx: click.Context, pattern: str) -> None:
    """Prints the current time.

    Args:
        ctx: The click context.
        pattern: The pattern to render with.
    """
    ctx.obj.emit(ctx.obj.provider().current_formatted(pattern))


@click.command("stamp")
@click.pass_context
@reports_errors
def stamp(ctx: click.Context) -> None:
    """Prints the current time in epoch seconds."""
    ctx.obj.emit(ctx.obj.provider().current_epoch_seconds())


@click.command("parse")
@click.argument("text")
@click.option("--pattern", "-p", default=DEFAULT_PATTERN, show_default=True, help="Pattern the text uses.")
@click.pass_context
@reports_errors
def parse(ctx: click.Context, text: str, pattern: str) -> None:
    """Converts a formatted date into epoch seconds.

    Args:
        ctx: The click context.
        text: The formatted date.
        pattern: The pattern the text uses.
    """
    ctx.obj.emit(ctx.obj.provider().parse_to_epoch_seconds(text, pattern).unwrap())


@click.command("format")
@click.argument("value")
@click.option("--pattern", "-p", default=DEFAULT_PATTERN, show_default=True, help="Pattern to render with.")
@click.option("--millis", is_flag=True, help="Read VALUE as epoch milliseconds instead of seconds.")
@click.pass_context
@reports_errors
def format_stamp(ctx: click.Context, value: str, pattern: str, millis: bool) -> None:
    """Renders an epoch timestamp with a pattern.

    Args:
        ctx: The click context.
        value: The timestamp.
        pattern: The pattern to render with.
        millis: Whether the timestamp is in milliseconds.
    """
    provider = ctx.obj.provider()
    if millis:
        ctx.obj.emit(provider.format_millis(value, pattern))
    else:
        ctx.obj.emit(provider.epoch_seconds_to_formatted(value, pattern))


@click.command("add-days")
@click.option("--days", type=int, required=True, help="Days to add; negative values move backwards.")
@click.option("--base", default=None, help="Epoch seconds to shift. Defaults to now.")
@click.option("--pattern", "-p", default=DateProvider.CURRENT_DAY_FORMAT, show_default=True)
@click.option("--stamp", "as_stamp", is_flag=True, help="Print epoch seconds instead of a formatted date.")
@click.pass_context
@reports_errors
def add_days(ctx: click.Context, days: int, base: str | None, pattern: str, as_stamp: bool) -> None:
    """Shifts a date by whole days.

    Args:
        ctx: The click context.
        days: Days to add.
        base: The epoch seconds to shift, or None for now.
        pattern: The pattern to render with.
        as_stamp: Whether to print epoch seconds.
    """
    provider = ctx.obj.provider()
    if as_stamp:
        origin = base if base is not None else provider.current_epoch_seconds()
        ctx.obj.emit(provider.add_days_stamp(origin, days))
    else:
        ctx.obj.emit(provider.add_days(days, pattern, base))


@click.command("month")
@click.argument("year", type=int)
@click.argument("month_index", type=int)
@click.pass_context
@reports_errors
def month(ctx: click.Context, year: int, month_index: int) -> None:
    """Prints the first and last day of a month (MONTH_INDEX is 0-based).

    Args:
        ctx: The click context.
        year: The year.
        month_index: The 0-based month.
    """
    provider = ctx.obj.provider()
    ctx.obj.emit(
        {
            "first": provider.first_day_of_month(year, month_index),
            "last": provider.last_day_of_month(year, month_index),
        }
    )


@click.command("days-in-month")
@click.argument("year", type=int)
@click.argument("month_number", type=click.IntRange(1, 12))
@click.pass_context
@reports_errors
def days_in_month(ctx: click.Context, year: int, month_number: int) -> None:
    """Prints how many days a month has (MONTH_NUMBER is 1-based)."""
    ctx.obj.emit(DateProvider.days_in_month(year, month_number))


@click.command("weekday")
@click.argument("value")
@click.pass_context
@reports_errors
def weekday(ctx: click.Context, value: str) -> None:
    """Prints the weekday label of epoch seconds."""
    ctx.obj.emit(ctx.obj.provider().weekday_label(value))


@click.command("relative")
@click.argument("value")
@click.pass_context
@reports_errors
def relative(ctx: click.Context, value: str) -> None:
    """Prints the chat-style label of epoch milliseconds ("刚刚", "5分钟前", "14:32")."""
    ctx.obj.emit(ctx.obj.provider().relative_label(value))


@click.command("note")
@click.argument("value")
@click.pass_context
@reports_errors
def note(ctx: click.Context, value: str) -> None:
    """Prints the note-style label of epoch seconds ("昨天 14:32 周五")."""
    ctx.obj.emit(ctx.obj.provider().contextual_label(value))


@click.command("gap")
@click.argument("start")
@click.argument("end")
@click.option("--pattern", "-p", default=None, help="Parse START and END with this pattern instead of as epoch seconds.")
@click.pass_context
@reports_errors
def gap(ctx: click.Context, start: str, end: str, pattern: str | None) -> None:
    """Prints the number of calendar days from START to END.

    Args:
        ctx: The click context.
        start: The first date.
        end: The second date.
        pattern: The pattern of both dates, or None for epoch seconds.
    """
    provider = ctx.obj.provider()
    if pattern:
        start_value = provider.parse_datetime(start, pattern).unwrap()
        end_value = provider.parse_datetime(end, pattern).unwrap()
        ctx.obj.emit(provider.gap_in_days(start_value, end_value))
    else:
        ctx.obj.emit(provider.gap_in_days(start, end))


def register_date_commands(group: click.Group) -> None:
    """Adds every date command to the given group.

    Args:
        group: The root CLI group.
    """
    for command in (now, stamp, parse, format_stamp, add_days, month, days_in_month, weekday, relative, note, gap):
        group.add_command(command)
