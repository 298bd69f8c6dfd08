from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .exceptions import InvalidTimeWindowError


class ErrorCode(Enum):
    """Per-timestamp validation outcome, declared from highest to lowest precedence."""
    REQUIRED = "required"
    EXPIRED = "expired"
    DUPLICATE = "duplicate"
    OUT_OF_RANGE = "out_of_range"
    NONE = "none"

    @property
    def precedence(self) -> int:
        """Larger numbers win when several conditions apply to one timestamp."""
        members = list(type(self))
        return len(members) - members.index(self) - 1

    def outranks(self, other: "ErrorCode") -> bool:
        return self.precedence > other.precedence


@dataclass(frozen=True)
class TimeWindow:
    """Closed interval [start, end] in epoch milliseconds when an interview may happen."""
    start: int
    end: int

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidTimeWindowError(
                f"Window end ({self.end}) cannot be earlier than its start ({self.start})"
            )

    def contains_range(self, start: int, end: int) -> bool:
        """Check whether [start, end] lies entirely inside this window."""
        return self.start <= start and end <= self.end

    @classmethod
    def from_pair(cls, pair: Tuple[int, int]) -> "TimeWindow":
        start, end = pair
        return cls(start=start, end=end)


@dataclass(frozen=True)
class ValidationResult:
    """Represents the outcome of validating a list of interview timestamps."""
    errors: Tuple[ErrorCode, ...]

    @classmethod
    def from_errors(cls, errors: Sequence[ErrorCode]) -> "ValidationResult":
        return cls(errors=tuple(errors))

    @property
    def is_valid(self) -> bool:
        return all(error is ErrorCode.NONE for error in self.errors)

    @property
    def first_error(self) -> ErrorCode:
        """First non-NONE code in input order, or NONE when everything passed."""
        return next((e for e in self.errors if e is not ErrorCode.NONE), ErrorCode.NONE)

    @property
    def error_count(self) -> int:
        return sum(1 for e in self.errors if e is not ErrorCode.NONE)

    @property
    def distinct_errors(self) -> Tuple[ErrorCode, ...]:
        """Non-NONE codes in first-seen order."""
        seen = []
        for error in self.errors:
            if error is not ErrorCode.NONE and error not in seen:
                seen.append(error)
        return tuple(seen)

    @property
    def highest_error(self) -> Optional[ErrorCode]:
        if not self.distinct_errors:
            return None
        return max(self.distinct_errors, key=lambda e: e.precedence)

    def has_error(self, code: ErrorCode) -> bool:
        return code in self.errors

    def has_required_error(self) -> bool:
        return self.has_error(ErrorCode.REQUIRED)

    def has_expired_error(self) -> bool:
        return self.has_error(ErrorCode.EXPIRED)

    def has_duplicate_error(self) -> bool:
        return self.has_error(ErrorCode.DUPLICATE)

    def has_out_of_range_error(self) -> bool:
        return self.has_error(ErrorCode.OUT_OF_RANGE)

    def __len__(self) -> int:
        return len(self.errors)
