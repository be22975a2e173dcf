"""
Analysis module for sleep schedule insights.

This module contains the time arithmetic, schedule statistics and pattern
detectors that feed the insight generator.
"""

from sleep_coach.core.analysis.pattern_detection import (
    detect_consistent_streak,
    detect_irregular_pattern,
    detect_patterns,
    detect_trend,
    detect_weekend_pattern,
)
from sleep_coach.core.analysis.schedule_analysis import analyze_schedule
from sleep_coach.core.analysis.time_arithmetic import minutes_to_time, time_to_minutes

__all__ = [
    'analyze_schedule', 'detect_weekend_pattern', 'detect_trend', 'detect_consistent_streak',
    'detect_irregular_pattern', 'detect_patterns', 'time_to_minutes', 'minutes_to_time',
]
