# sleep_coach/utils/data_validation.py

import re
from datetime import datetime
from typing import Iterable, List

# Accepts single-digit hours ("7:30"), normalized to "07:30"
TIME_PATTERN = re.compile(r'^([01]?[0-9]|2[0-3]):([0-5][0-9])$')
DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class SleepCoachError(ValueError):
    """Base class for input errors raised at the engine boundary"""


class InvalidTimeFormatError(SleepCoachError):
    """A time-of-day string is not HH:MM (hours 0-23, minutes 0-59)"""


class InvalidDateFormatError(SleepCoachError):
    """A calendar date is not YYYY-MM-DD"""


class OutOfRangeError(SleepCoachError):
    """A numeric parameter is outside its allowed range"""


def validate_time_string(value, field_name='time'):
    """
    Validate a time-of-day string and return it zero-padded.

    Args:
        value: String in H:MM or HH:MM format
        field_name: Name used in the error message

    Returns:
        str: Normalized HH:MM string

    Raises:
        InvalidTimeFormatError: If the value is not a valid time of day
    """
    if not isinstance(value, str):
        raise InvalidTimeFormatError(f"Invalid {field_name}: expected HH:MM string, got {type(value).__name__}")

    match = TIME_PATTERN.match(value.strip())
    if not match:
        raise InvalidTimeFormatError(f"Invalid {field_name} '{value}'. Expected HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    return f"{hours:02d}:{minutes:02d}"


def validate_date_string(value, field_name='date'):
    """Validate a zero-padded YYYY-MM-DD calendar date"""
    try:
        if not DATE_PATTERN.match(value):
            raise ValueError(value)
        datetime.strptime(value, '%Y-%m-%d')
    except (TypeError, ValueError):
        raise InvalidDateFormatError(f"Invalid {field_name} '{value}'. Use YYYY-MM-DD")
    return value


def validate_range(value, minimum, maximum, field_name='value'):
    """
    Validate that a number lies within [minimum, maximum].

    Raises:
        OutOfRangeError: If the value is not a number or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value != value:
        raise OutOfRangeError(f"Invalid {field_name}: expected a number, got {value!r}")
    if value < minimum or value > maximum:
        raise OutOfRangeError(f"Invalid {field_name} {value} (expected {minimum}-{maximum})")
    return value


def validate_days_of_week(days: Iterable[int]) -> List[int]:
    """Validate a day-of-week selection (0 = Sunday ... 6 = Saturday)"""
    days = list(days)
    if len(days) == 0 or len(days) > 7:
        raise OutOfRangeError('Invalid days of week (expected 1-7 days)')
    for day in days:
        validate_range(day, 0, 6, field_name='day of week')
    if len(set(days)) != len(days):
        raise OutOfRangeError('Invalid days of week (duplicates)')
    return sorted(int(day) for day in days)


def validate_positive(value, field_name='value', minimum=1):
    """Validate an integer count such as the number of options"""
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise OutOfRangeError(f"Invalid {field_name} {value!r} (expected an integer >= {minimum})")
    return value
