"""
Data models for the Sleep Coach engine.

Input/storage models (sleep entries, settings, reminders) and the derived,
never-persisted analysis outputs (schedule stats, patterns, insights).
"""

from sleep_coach.core.models.data_models import (
    Language,
    Reminder,
    ReminderCreate,
    Settings,
    SleepCalculationInput,
    SleepCalculationResult,
    SleepEntry,
    SleepEntryCreate,
    SleepResults,
)
from sleep_coach.core.models.output_models import (
    CoachInsight,
    InsightCategory,
    InsightPriority,
    PatternResult,
    PatternType,
    ScheduleStats,
)

__all__ = [
    'Language', 'Reminder', 'ReminderCreate', 'Settings', 'SleepCalculationInput',
    'SleepCalculationResult', 'SleepEntry', 'SleepEntryCreate', 'SleepResults',
    'CoachInsight', 'InsightCategory', 'InsightPriority', 'PatternResult',
    'PatternType', 'ScheduleStats',
]
