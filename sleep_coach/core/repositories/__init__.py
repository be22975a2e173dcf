"""
Data access layer: key-value storage and the history, settings and
reminder repositories built on it.
"""

from sleep_coach.core.repositories.history_repository import HistoryRepository
from sleep_coach.core.repositories.reminder_repository import (
    ReminderLimitError,
    ReminderNotFoundError,
    ReminderRepository,
)
from sleep_coach.core.repositories.settings_repository import SettingsRepository
from sleep_coach.core.repositories.storage import InMemoryStore, JsonFileStore, KeyValueStore

__all__ = [
    'HistoryRepository', 'SettingsRepository', 'ReminderRepository', 'ReminderLimitError',
    'ReminderNotFoundError', 'KeyValueStore', 'InMemoryStore', 'JsonFileStore',
]
