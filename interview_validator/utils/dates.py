from datetime import datetime
import pytz
from dateutil import parser

from ..clock import datetime_to_millis, millis_to_datetime
from ..exceptions import TimestampParseError, InvalidTimeWindowError
from ..models import TimeWindow


FIFTEEN_MINUTES = 15 * 60 * 1000
THIRTY_MINUTES = 30 * 60 * 1000
FORTY_FIVE_MINUTES = 45 * 60 * 1000
ONE_HOUR = 60 * 60 * 1000
ONE_HOUR_THIRTY_MINUTES = 90 * 60 * 1000
TWO_HOURS = 120 * 60 * 1000

WINDOW_SEPARATOR = "/"


def minutes_to_millis(minutes: int) -> int:
    """Convert a duration in minutes to milliseconds."""
    return minutes * 60 * 1000


def get_timezone(tz_name: str) -> pytz.BaseTzInfo:
    """Get timezone object from name."""
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"Unknown timezone: {tz_name}")


def parse_timestamp(value: str, tz: pytz.BaseTzInfo = pytz.utc) -> int:
    """Parse epoch milliseconds or a date/time string.

    Naive date/times are interpreted in ``tz``.
    """
    text = value.strip()
    if text.lstrip("-").isdigit():
        try:
            return int(text)
        except ValueError:
            raise TimestampParseError(f"Invalid timestamp: {value}. Expected epoch milliseconds or a date/time")

    try:
        dt = parser.parse(text)
    except (ValueError, OverflowError):
        raise TimestampParseError(f"Invalid timestamp: {value}. Expected epoch milliseconds or a date/time")

    if dt.tzinfo is None:
        dt = tz.localize(dt)
    return datetime_to_millis(dt)


def parse_window(value: str, tz: pytz.BaseTzInfo = pytz.utc) -> TimeWindow:
    """Parse a window written as 'START/END'."""
    try:
        start_str, end_str = value.split(WINDOW_SEPARATOR)
    except ValueError:
        raise InvalidTimeWindowError(f"Invalid window format: {value}. Expected START/END")

    return TimeWindow(start=parse_timestamp(start_str, tz), end=parse_timestamp(end_str, tz))


def format_timestamp(timestamp_ms: int, tz: pytz.BaseTzInfo = pytz.utc) -> str:
    """Render a timestamp as 'YYYY-MM-DD HH:MM:SS TZ' in the given timezone."""
    try:
        dt: datetime = millis_to_datetime(timestamp_ms).astimezone(tz)
    except (OverflowError, ValueError):
        return f"Invalid timestamp: {timestamp_ms}"
    return dt.strftime("%Y-%m-%d %H:%M:%S %Z")
