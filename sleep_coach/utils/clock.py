"""
Injectable time source.

Analysis and reminder code never reads the wall clock directly; it takes a
``Clock`` (a zero-argument callable returning the current datetime) so tests
can pin "now".
"""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local time"""
    return datetime.now()


def day_of_week(moment: datetime) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday (reminder convention)"""
    return (moment.weekday() + 1) % 7
