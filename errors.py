"""Exception types for the date picker."""


class DatePickerError(Exception):
    """Base exception for all date picker errors."""


class InvalidArgumentError(DatePickerError, ValueError):
    """A value outside its documented domain was passed in.

    Raised when a month is outside 0..11 or a year/month is not an int.
    This signals an integration bug; values are never clamped.
    """
