#!/usr/bin/env python3

import functools
import json
from pathlib import Path
from typing import List, Optional

import pytz
import typer
from rich.traceback import install

from . import __version__
from .clock import Clock, FixedClock, SystemClock
from .config import ConfigManager
from .csv_utils import read_timestamps, read_windows, write_results
from .exceptions import InterviewValidatorError
from .models import ValidationResult
from .utils.dates import parse_timestamp, parse_window, minutes_to_millis
from .utils.prompts import (
    console, print_success, print_error, print_warning, print_info,
    display_results_table, summarize, all_error_descriptions, print_divider
)
from .validator import validate_basic, validate_collaborative

install(show_locals=True)

app = typer.Typer(
    name="interview-validator",
    help="CLI tool for checking candidate interview times before they are sent out",
    add_completion=False,
)


def handle_errors(func):
    """Decorator to handle common exceptions."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except KeyboardInterrupt:
            print_warning("\nOperation cancelled by user")
            raise typer.Exit(1)
        except InterviewValidatorError as e:
            print_error(str(e))
            raise typer.Exit(1)
    return wrapper


def _config(ctx: typer.Context) -> ConfigManager:
    config_path = (ctx.obj or {}).get("config_path")
    return ConfigManager(config_path)


def _resolve_clock(now: Optional[str], tz: pytz.BaseTzInfo) -> Clock:
    if now is None:
        return SystemClock()
    return FixedClock(parse_timestamp(now, tz))


def _collect_timestamps(values: Optional[List[str]], csv_file: Optional[Path],
                        tz: pytz.BaseTzInfo) -> List[int]:
    timestamps = [parse_timestamp(v, tz) for v in values or []]
    if csv_file is not None:
        timestamps.extend(read_timestamps(csv_file, tz))
    return timestamps


def _report(timestamps: List[int], result: ValidationResult, tz: pytz.BaseTzInfo,
            as_json: bool, output: Optional[Path]) -> None:
    if output is not None:
        write_results(output, timestamps, result.errors, tz)

    if as_json:
        typer.echo(json.dumps({
            "timestamps": timestamps,
            "errors": [e.value for e in result.errors],
            "is_valid": result.is_valid,
            "message": summarize(result),
            "descriptions": all_error_descriptions(result),
        }))
    else:
        display_results_table(timestamps, result, tz)
        print_divider()
        if result.is_valid:
            print_success(summarize(result))
        else:
            print_error(summarize(result))
            print_info(f"{result.error_count} of {len(result)} entries need attention")
        if output is not None:
            print_info(f"Results exported to {output}")

    if not result.is_valid:
        raise typer.Exit(1)


@app.command()
@handle_errors
def basic(
    ctx: typer.Context,
    timestamps: Optional[List[str]] = typer.Argument(None, help="Epoch milliseconds or date/time values (put negative values after --)"),
    csv_file: Optional[Path] = typer.Option(None, "--csv", help="CSV file with a 'timestamp' column"),
    now: Optional[str] = typer.Option(None, "--now", help="Pin the current instant (epoch ms or date/time)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Export results to CSV"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Check interview times for missing, expired and duplicate entries."""
    config = _config(ctx)
    tz = config.get_tzinfo()

    values = _collect_timestamps(timestamps, csv_file, tz)
    result = validate_basic(values, _resolve_clock(now, tz))
    _report(values, result, tz, as_json, output)


@app.command()
@handle_errors
def collaborative(
    ctx: typer.Context,
    timestamps: Optional[List[str]] = typer.Argument(None, help="Epoch milliseconds or date/time values (put negative values after --)"),
    window: Optional[List[str]] = typer.Option(None, "--window", "-w", help="Available window as START/END (repeatable)"),
    windows_csv: Optional[Path] = typer.Option(None, "--windows-csv", help="CSV file with 'start' and 'end' columns"),
    duration: Optional[int] = typer.Option(None, "--duration", "-d", help="Interview length in minutes"),
    csv_file: Optional[Path] = typer.Option(None, "--csv", help="CSV file with a 'timestamp' column"),
    now: Optional[str] = typer.Option(None, "--now", help="Pin the current instant (epoch ms or date/time)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Export results to CSV"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Check interview times against available windows as well."""
    config = _config(ctx)
    tz = config.get_tzinfo()

    values = _collect_timestamps(timestamps, csv_file, tz)
    windows = [parse_window(w, tz) for w in window or []]
    if windows_csv is not None:
        windows.extend(read_windows(windows_csv, tz))

    if not windows and not as_json:
        print_warning("No available windows given; every valid time will be out of range")

    minutes = config.get_default_duration() if duration is None else duration
    result = validate_collaborative(values, windows, minutes_to_millis(minutes), _resolve_clock(now, tz))
    _report(values, result, tz, as_json, output)


@app.command()
@handle_errors
def config(
    ctx: typer.Context,
    timezone: Optional[str] = typer.Option(None, "--timezone", help="IANA timezone for date/time input and output"),
    duration: Optional[int] = typer.Option(None, "--duration", help="Default interview length in minutes"),
):
    """Show or update saved defaults."""
    manager = _config(ctx)

    if timezone is None and duration is None:
        for key, value in manager.as_dict().items():
            console.print(f"{key}: {value}")
        return

    if timezone is not None:
        manager.set_timezone(timezone)
        print_success(f"Timezone set to {timezone}")
    if duration is not None:
        manager.set_default_duration(duration)
        print_success(f"Default duration set to {duration} minutes")


def version_callback(value: bool):
    if value:
        console.print(f"Interview Validator CLI v{__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit"),
    config_path: Optional[Path] = typer.Option(None, "--config", envvar="INTERVIEW_VALIDATOR_CONFIG", help="Path to config file"),
):
    """Interview Validator CLI - Check candidate interview times."""
    ctx.obj = {"config_path": config_path}


if __name__ == "__main__":
    app()
