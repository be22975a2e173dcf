"""
Clock-time arithmetic on HH:MM strings.

Times between 00:00 and 05:59 are placed on the following day (offset by
1440 minutes) so bedtimes straddling midnight average and spread correctly:
23:30 and 00:30 average to 00:00, not 12:00.
"""

import math

from sleep_coach.utils.constants import DAY_BOUNDARY_HOUR, MINUTES_PER_DAY


def time_to_minutes(time: str) -> int:
    """Convert HH:MM to minutes from midnight, early-morning times counted as next day"""
    hours, minutes = (int(part) for part in time.split(':'))
    total_minutes = hours * 60 + minutes

    if hours < DAY_BOUNDARY_HOUR:
        total_minutes += MINUTES_PER_DAY

    return total_minutes


def clock_minutes(time: str) -> int:
    """Convert HH:MM to minutes from midnight without the day-boundary shift"""
    hours, minutes = (int(part) for part in time.split(':'))
    return hours * 60 + minutes


def minutes_to_time(minutes) -> str:
    """Convert minutes from midnight (any day offset) back to HH:MM"""
    normalized = int(minutes) % MINUTES_PER_DAY
    return f"{normalized // 60:02d}:{normalized % 60:02d}"


def round_half_up(value) -> int:
    """Round to the nearest integer with halves rounded up"""
    return int(math.floor(value + 0.5))
