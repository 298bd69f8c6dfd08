from typing import List, Sequence

import pytz
from rich.console import Console
from rich.table import Table

from ..models import ErrorCode, ValidationResult
from .dates import format_timestamp


console = Console()

ERROR_DESCRIPTIONS = {
    ErrorCode.NONE: "No error",
    ErrorCode.REQUIRED: "At least one interview time is required",
    ErrorCode.EXPIRED: "Interview time is in the past",
    ErrorCode.DUPLICATE: "Interview time repeats another one in the same minute",
    ErrorCode.OUT_OF_RANGE: "Interview does not fit inside any available window",
}

ERROR_STYLES = {
    ErrorCode.NONE: "green",
    ErrorCode.REQUIRED: "bold red",
    ErrorCode.EXPIRED: "red",
    ErrorCode.DUPLICATE: "yellow",
    ErrorCode.OUT_OF_RANGE: "magenta",
}


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"✅ {message}", style="green")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"❌ {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"⚠️  {message}", style="yellow")


def print_info(message: str) -> None:
    """Print info message in blue."""
    console.print(f"ℹ️  {message}", style="blue")


def describe_error(error: ErrorCode) -> str:
    return ERROR_DESCRIPTIONS[error]


def summarize(result: ValidationResult) -> str:
    """One-line summary listing each distinct problem once."""
    if result.is_valid:
        return "Validation passed"
    return "Validation failed: " + ", ".join(describe_error(e) for e in result.distinct_errors)


def all_error_descriptions(result: ValidationResult) -> List[str]:
    """One description per failing entry, in input order."""
    return [describe_error(e) for e in result.errors if e is not ErrorCode.NONE]


def display_results_table(timestamps: Sequence[int], result: ValidationResult,
                          tz: pytz.BaseTzInfo = pytz.utc) -> None:
    """Display per-timestamp results in a formatted table."""
    table = Table(title="Interview Time Validation")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Timestamp (ms)", style="cyan")
    table.add_column("Date/Time", style="blue")
    table.add_column("Result")

    if not timestamps:
        table.add_row("-", "-", "-", f"[{ERROR_STYLES[ErrorCode.REQUIRED]}]{ErrorCode.REQUIRED.name}[/]")

    for index, (ts, error) in enumerate(zip(timestamps, result.errors)):
        table.add_row(
            str(index),
            str(ts),
            format_timestamp(ts, tz),
            f"[{ERROR_STYLES[error]}]{error.name}[/]",
        )

    console.print(table)


def print_divider() -> None:
    """Print a visual divider."""
    console.print("─" * 60, style="dim")
