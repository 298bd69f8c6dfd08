import pytest

from interview_validator.clock import FixedClock
from interview_validator.models import ErrorCode, TimeWindow
from interview_validator.validator import (
    BasicValidator,
    CollaborativeValidator,
    check_basic,
    check_collaborative,
    is_basic_valid,
    is_collaborative_valid,
    validate_basic,
    validate_collaborative,
)

from .conftest import NOW, MINUTE

FUTURE = 1_700_100_000_000
PAST = 1_699_999_000_000
THIRTY_MINUTES = 30 * MINUTE


class CountingClock:
    def __init__(self, now):
        self.now_ms = now
        self.calls = 0

    def now(self):
        self.calls += 1
        return self.now_ms


# Basic validator

def test_empty_list_is_required(clock):
    assert check_basic([], clock) == [ErrorCode.REQUIRED]
    assert check_collaborative([], [TimeWindow(0, FUTURE)], THIRTY_MINUTES, clock) == [ErrorCode.REQUIRED]


def test_past_timestamp_is_expired(clock):
    assert check_basic([PAST], clock) == [ErrorCode.EXPIRED]


def test_now_itself_is_not_expired(clock):
    assert check_basic([NOW, NOW - 1 - MINUTE * 5], clock) == [ErrorCode.NONE, ErrorCode.EXPIRED]


def test_same_minute_future_timestamps_are_duplicates(clock):
    errors = check_basic([FUTURE, FUTURE + 30_000], clock)
    assert errors == [ErrorCode.DUPLICATE, ErrorCode.DUPLICATE]


def test_expired_wins_over_duplicate(clock):
    errors = check_basic([PAST, PAST + 30_000], clock)
    assert errors == [ErrorCode.EXPIRED, ErrorCode.EXPIRED]


def test_duplicate_group_with_mixed_expiry(clock):
    # NOW is 20s into its minute, so NOW - 1 and NOW + 1 share a bucket
    errors = check_basic([NOW - 1, NOW + 1], clock)
    assert errors == [ErrorCode.EXPIRED, ErrorCode.DUPLICATE]


def test_minute_boundary(clock):
    assert check_basic([FUTURE, FUTURE + 59_999], clock) == [ErrorCode.DUPLICATE] * 2
    assert check_basic([FUTURE, FUTURE + 60_000], clock) == [ErrorCode.NONE] * 2


def test_three_way_group_reports_every_member(clock):
    errors = check_basic([FUTURE, FUTURE + 1_000, FUTURE + 2 * MINUTE, FUTURE + 59_000], clock)
    assert errors == [ErrorCode.DUPLICATE, ErrorCode.DUPLICATE, ErrorCode.NONE, ErrorCode.DUPLICATE]


def test_output_follows_input_permutation(clock):
    timestamps = [PAST, FUTURE, FUTURE + 10_000, FUTURE + 5 * MINUTE]
    errors = check_basic(timestamps, clock)

    order = [3, 1, 0, 2]
    shuffled = check_basic([timestamps[i] for i in order], clock)
    assert shuffled == [errors[i] for i in order]
    assert len(errors) == len(timestamps)


def test_input_is_not_mutated(clock):
    timestamps = [FUTURE, FUTURE + 1]
    check_basic(timestamps, clock)
    assert timestamps == [FUTURE, FUTURE + 1]


def test_clock_is_read_once_per_call():
    clock = CountingClock(NOW)
    BasicValidator(clock).validate([FUTURE, PAST, FUTURE + MINUTE])
    assert clock.calls == 1

    CollaborativeValidator(clock).validate([FUTURE, PAST], [TimeWindow(NOW, FUTURE * 2)], MINUTE)
    assert clock.calls == 2


def test_empty_input_does_not_read_clock():
    clock = CountingClock(NOW)
    BasicValidator(clock).validate([])
    assert clock.calls == 0


def test_default_clock_is_system_clock():
    # far future is never expired on the real clock
    assert check_basic([10 ** 15]) == [ErrorCode.NONE]
    assert check_basic([0]) == [ErrorCode.EXPIRED]


# Collaborative validator

def test_interview_inside_window_passes(clock):
    window = TimeWindow(1_700_050_000_000, 1_700_200_000_000)
    assert check_collaborative([FUTURE], [window], 1_800_000, clock) == [ErrorCode.NONE]


def test_interview_running_past_window_end_is_out_of_range(clock):
    window = TimeWindow(1_700_050_000_000, 1_700_101_000_000)
    assert check_collaborative([FUTURE], [window], 1_800_000, clock) == [ErrorCode.OUT_OF_RANGE]


def test_window_bounds_are_inclusive(clock):
    window = TimeWindow(FUTURE, FUTURE + THIRTY_MINUTES)
    assert check_collaborative([FUTURE], [window], THIRTY_MINUTES, clock) == [ErrorCode.NONE]

    tight = TimeWindow(FUTURE, FUTURE + THIRTY_MINUTES - 1)
    assert check_collaborative([FUTURE], [tight], THIRTY_MINUTES, clock) == [ErrorCode.OUT_OF_RANGE]


def test_start_before_window_is_out_of_range(clock):
    window = TimeWindow(FUTURE + 1, FUTURE + 10 * THIRTY_MINUTES)
    assert check_collaborative([FUTURE], [window], THIRTY_MINUTES, clock) == [ErrorCode.OUT_OF_RANGE]


def test_interview_must_fit_one_window(clock):
    # two adjacent windows together cover the interview, neither does alone
    windows = [TimeWindow(FUTURE, FUTURE + 10 * MINUTE), TimeWindow(FUTURE + 10 * MINUTE, FUTURE + 60 * MINUTE)]
    assert check_collaborative([FUTURE], windows, THIRTY_MINUTES, clock) == [ErrorCode.OUT_OF_RANGE]


def test_any_matching_window_is_enough(clock):
    windows = [TimeWindow(0, 1), TimeWindow(FUTURE - MINUTE, FUTURE + 2 * THIRTY_MINUTES)]
    assert check_collaborative([FUTURE], windows, THIRTY_MINUTES, clock) == [ErrorCode.NONE]


def test_no_windows_means_everything_out_of_range(clock):
    errors = check_collaborative([FUTURE, FUTURE + 5 * MINUTE], [], THIRTY_MINUTES, clock)
    assert errors == [ErrorCode.OUT_OF_RANGE, ErrorCode.OUT_OF_RANGE]


def test_expired_and_duplicate_are_not_overwritten_by_range_check(clock):
    errors = check_collaborative([PAST, FUTURE, FUTURE + 1_000, FUTURE + 5 * MINUTE], [], THIRTY_MINUTES, clock)
    assert errors == [ErrorCode.EXPIRED, ErrorCode.DUPLICATE, ErrorCode.DUPLICATE, ErrorCode.OUT_OF_RANGE]


def test_negative_duration_is_treated_as_zero(clock):
    window = TimeWindow(FUTURE, FUTURE)
    assert check_collaborative([FUTURE], [window], -THIRTY_MINUTES, clock) == [ErrorCode.NONE]
    assert check_collaborative([FUTURE], [window], 1, clock) == [ErrorCode.OUT_OF_RANGE]


def test_windows_accept_any_iterable(clock):
    windows = (w for w in [TimeWindow(FUTURE - MINUTE, FUTURE + 2 * THIRTY_MINUTES)])
    assert check_collaborative([FUTURE, FUTURE + MINUTE], windows, THIRTY_MINUTES, clock) == [ErrorCode.NONE] * 2


# Convenience wrappers

@pytest.mark.parametrize("timestamps, expected", [
    ([], False),
    ([FUTURE], True),
    ([PAST], False),
    ([FUTURE, FUTURE + 1], False),
])
def test_is_basic_valid(clock, timestamps, expected):
    assert is_basic_valid(timestamps, clock) is expected


def test_is_collaborative_valid(clock):
    window = TimeWindow(FUTURE, FUTURE + 2 * THIRTY_MINUTES)
    assert is_collaborative_valid([FUTURE], [window], THIRTY_MINUTES, clock) is True
    assert is_collaborative_valid([FUTURE], [window], 3 * THIRTY_MINUTES, clock) is False
    assert is_collaborative_valid([], [window], THIRTY_MINUTES, clock) is False


def test_validate_wrappers_return_results(clock):
    result = validate_basic([FUTURE, PAST], clock)
    assert result.errors == (ErrorCode.NONE, ErrorCode.EXPIRED)
    assert not result.is_valid

    result = validate_collaborative([FUTURE], [TimeWindow(FUTURE, FUTURE + THIRTY_MINUTES)], THIRTY_MINUTES, clock)
    assert result.is_valid


def test_validators_hold_no_state_between_calls():
    validator = BasicValidator(FixedClock(NOW))
    assert validator.validate([FUTURE, FUTURE + 1]) == [ErrorCode.DUPLICATE] * 2
    assert validator.validate([FUTURE]) == [ErrorCode.NONE]
