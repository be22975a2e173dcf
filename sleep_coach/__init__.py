"""
Sleep Coach - sleep-cycle calculator and coaching insight engine.

Users log bedtime/wake time pairs; the engine computes sleep-cycle
alignment, keeps a capped history, and turns that history into
prioritized coaching insights and bedtime reminders.
"""

from sleep_coach.core.analysis import analyze_schedule, minutes_to_time, time_to_minutes
from sleep_coach.core.calculation import (
    calculate_ideal_bedtimes,
    calculate_ideal_wakeup_times,
    calculate_sleep_cycles,
)
from sleep_coach.core.recommendation import generate_insights, get_primary_insight

__version__ = "0.1.0"

__all__ = [
    'time_to_minutes', 'minutes_to_time', 'calculate_sleep_cycles', 'calculate_ideal_bedtimes',
    'calculate_ideal_wakeup_times', 'analyze_schedule', 'generate_insights', 'get_primary_insight',
]
