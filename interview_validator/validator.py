from typing import Iterable, List, Optional, Sequence

from .clock import Clock, SystemClock
from .duplicates import find_duplicate_indices
from .models import ErrorCode, TimeWindow, ValidationResult


class BasicValidator:
    """Classifies candidate interview timestamps as required, expired or duplicate.

    Each timestamp gets exactly one code. An expired timestamp is reported as
    expired even when it also shares a minute with another entry.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """Initialize validator.

        Args:
            clock: Source of the current instant (defaults to the system clock)
        """
        self.clock = clock or SystemClock()

    def validate(self, timestamps: Sequence[int]) -> List[ErrorCode]:
        """Validate candidate timestamps.

        Args:
            timestamps: Epoch-millisecond timestamps in caller order

        Returns:
            One ErrorCode per timestamp, or [REQUIRED] when the list is empty
        """
        if not timestamps:
            return [ErrorCode.REQUIRED]
        return self._base_errors(timestamps, self.clock.now())

    def _base_errors(self, timestamps: Sequence[int], now: int) -> List[ErrorCode]:
        errors = [ErrorCode.EXPIRED if ts < now else ErrorCode.NONE for ts in timestamps]

        for index in find_duplicate_indices(timestamps):
            if errors[index] is ErrorCode.NONE:
                errors[index] = ErrorCode.DUPLICATE

        return errors


class CollaborativeValidator(BasicValidator):
    """Adds an availability check on top of BasicValidator.

    A timestamp that passes the basic checks is out of range unless the whole
    interview [timestamp, timestamp + duration] fits inside a single window.
    """

    def validate(self, timestamps: Sequence[int], windows: Iterable[TimeWindow] = (),
                 duration_ms: int = 0) -> List[ErrorCode]:
        """Validate candidate timestamps against available windows.

        Args:
            timestamps: Epoch-millisecond timestamps in caller order
            windows: Available time windows; empty means nothing is in range
            duration_ms: Interview length, negative values count as zero

        Returns:
            One ErrorCode per timestamp, or [REQUIRED] when the list is empty
        """
        if not timestamps:
            return [ErrorCode.REQUIRED]

        windows = list(windows)
        duration_ms = max(duration_ms, 0)
        errors = self._base_errors(timestamps, self.clock.now())

        for index, ts in enumerate(timestamps):
            if errors[index] is not ErrorCode.NONE:
                continue
            if not self._fits_any_window(ts, ts + duration_ms, windows):
                errors[index] = ErrorCode.OUT_OF_RANGE

        return errors

    @staticmethod
    def _fits_any_window(start: int, end: int, windows: List[TimeWindow]) -> bool:
        return any(window.contains_range(start, end) for window in windows)


def check_basic(timestamps: Sequence[int], clock: Optional[Clock] = None) -> List[ErrorCode]:
    """Run the basic checks (required, expired, duplicate)."""
    return BasicValidator(clock).validate(timestamps)


def check_collaborative(timestamps: Sequence[int], windows: Iterable[TimeWindow],
                        duration_ms: int, clock: Optional[Clock] = None) -> List[ErrorCode]:
    """Run the basic checks plus the available-window range check."""
    return CollaborativeValidator(clock).validate(timestamps, windows, duration_ms)


def is_basic_valid(timestamps: Sequence[int], clock: Optional[Clock] = None) -> bool:
    return all(error is ErrorCode.NONE for error in check_basic(timestamps, clock))


def is_collaborative_valid(timestamps: Sequence[int], windows: Iterable[TimeWindow],
                           duration_ms: int, clock: Optional[Clock] = None) -> bool:
    errors = check_collaborative(timestamps, windows, duration_ms, clock)
    return all(error is ErrorCode.NONE for error in errors)


def validate_basic(timestamps: Sequence[int], clock: Optional[Clock] = None) -> ValidationResult:
    return ValidationResult.from_errors(check_basic(timestamps, clock))


def validate_collaborative(timestamps: Sequence[int], windows: Iterable[TimeWindow],
                           duration_ms: int, clock: Optional[Clock] = None) -> ValidationResult:
    return ValidationResult.from_errors(
        check_collaborative(timestamps, windows, duration_ms, clock)
    )
