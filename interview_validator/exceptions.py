"""Custom exceptions for the Interview Validator."""


class InterviewValidatorError(Exception):
    """Base exception for all interview validator errors."""
    pass


class ConfigError(InterviewValidatorError):
    """Raised when there's an issue with configuration."""
    pass


class InvalidTimeWindowError(InterviewValidatorError, ValueError):
    """Raised when a time window ends before it starts."""
    pass


class TimestampParseError(InterviewValidatorError, ValueError):
    """Raised when text cannot be turned into an epoch-millisecond timestamp."""
    pass


class CsvFormatError(InterviewValidatorError):
    """Raised when a CSV input file is missing columns or has bad rows."""
    pass
