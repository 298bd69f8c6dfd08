import csv
from pathlib import Path
from typing import List, Sequence

import pytz

from .exceptions import CsvFormatError, InterviewValidatorError
from .models import ErrorCode, TimeWindow
from .utils.dates import parse_timestamp, format_timestamp


TIMESTAMP_HEADERS = ["timestamp"]
WINDOW_HEADERS = ["start", "end"]
RESULT_HEADERS = ["index", "timestamp", "datetime", "error"]


def read_timestamps(path: Path, tz: pytz.BaseTzInfo = pytz.utc) -> List[int]:
    """Parse CSV file with candidate interview timestamps.

    Expected format:
    timestamp
    1700100000000
    2025-06-11 09:00

    Blank cells are skipped. Date/time text without an offset is read in ``tz``.
    """
    timestamps = []

    try:
        with open(path, 'r', newline='', encoding='utf-8') as csvfile:
            reader = csv.DictReader(csvfile)

            if not reader.fieldnames or 'timestamp' not in reader.fieldnames:
                raise CsvFormatError("CSV must contain 'timestamp' column")

            for row_num, row in enumerate(reader, start=2):
                value = (row.get('timestamp') or '').strip()
                if not value:
                    continue

                try:
                    timestamps.append(parse_timestamp(value, tz))
                except InterviewValidatorError as e:
                    raise CsvFormatError(f"Invalid timestamp on row {row_num}: {e}")

    except FileNotFoundError:
        raise CsvFormatError(f"Timestamp file not found: {path}")
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise CsvFormatError(f"Error reading timestamp file: {e}")

    return timestamps


def read_windows(path: Path, tz: pytz.BaseTzInfo = pytz.utc) -> List[TimeWindow]:
    """Parse CSV file with available time windows.

    Expected format:
    start,end
    1700050000000,1700200000000
    """
    windows = []

    try:
        with open(path, 'r', newline='', encoding='utf-8') as csvfile:
            reader = csv.DictReader(csvfile)

            missing = [h for h in WINDOW_HEADERS if h not in (reader.fieldnames or [])]
            if missing:
                raise CsvFormatError(f"CSV must contain columns: {', '.join(WINDOW_HEADERS)}")

            for row_num, row in enumerate(reader, start=2):
                start = (row.get('start') or '').strip()
                end = (row.get('end') or '').strip()
                if not start and not end:
                    continue

                try:
                    windows.append(TimeWindow(start=parse_timestamp(start, tz),
                                              end=parse_timestamp(end, tz)))
                except InterviewValidatorError as e:
                    raise CsvFormatError(f"Invalid window on row {row_num}: {e}")

    except FileNotFoundError:
        raise CsvFormatError(f"Window file not found: {path}")
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise CsvFormatError(f"Error reading window file: {e}")

    return windows


def write_results(path: Path, timestamps: Sequence[int], errors: Sequence[ErrorCode],
                  tz: pytz.BaseTzInfo = pytz.utc) -> None:
    """Export per-timestamp results to CSV.

    Output format:
    index,timestamp,datetime,error
    0,1700100000000,2023-11-16 02:00:00 UTC,none

    An empty timestamp list is written as a single row carrying the REQUIRED code.
    """
    try:
        with open(path, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=RESULT_HEADERS)
            writer.writeheader()

            if not timestamps:
                writer.writerow({'index': '', 'timestamp': '', 'datetime': '',
                                 'error': errors[0].value if errors else ''})
                return

            for index, (ts, error) in enumerate(zip(timestamps, errors)):
                writer.writerow({
                    'index': index,
                    'timestamp': ts,
                    'datetime': format_timestamp(ts, tz),
                    'error': error.value,
                })

    except OSError as e:
        raise CsvFormatError(f"Error writing results file: {e}")
