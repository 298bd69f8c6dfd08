"""Interview Validator - classify candidate interview times before they are sent out."""

from .clock import Clock, FixedClock, SystemClock
from .exceptions import InterviewValidatorError, InvalidTimeWindowError
from .models import ErrorCode, TimeWindow, ValidationResult
from .validator import (
    BasicValidator,
    CollaborativeValidator,
    check_basic,
    check_collaborative,
    is_basic_valid,
    is_collaborative_valid,
    validate_basic,
    validate_collaborative,
)

__version__ = "0.1.0"

__all__ = [
    'BasicValidator',
    'CollaborativeValidator',
    'Clock',
    'ErrorCode',
    'FixedClock',
    'InterviewValidatorError',
    'InvalidTimeWindowError',
    'SystemClock',
    'TimeWindow',
    'ValidationResult',
    'check_basic',
    'check_collaborative',
    'is_basic_valid',
    'is_collaborative_valid',
    'validate_basic',
    'validate_collaborative',
]
