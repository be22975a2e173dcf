# sleep_coach/api/dependencies.py
from functools import lru_cache

from fastapi import Depends

from sleep_coach.config.coach_config import CoachConfig, load_coach_config
from sleep_coach.config.config_manager import ConfigManager
from sleep_coach.core.repositories.history_repository import HistoryRepository
from sleep_coach.core.repositories.reminder_repository import ReminderRepository
from sleep_coach.core.repositories.settings_repository import SettingsRepository
from sleep_coach.core.repositories.storage import JsonFileStore, KeyValueStore
from sleep_coach.core.services.coach_service import CoachService
from sleep_coach.core.services.reminder_service import LoggingNotificationSender, ReminderService
from sleep_coach.utils import constants
from sleep_coach.utils.clock import system_clock


@lru_cache()
def get_config_manager() -> ConfigManager:
    return ConfigManager()


@lru_cache()
def get_coach_config() -> CoachConfig:
    return load_coach_config(get_config_manager())


@lru_cache()
def get_store() -> KeyValueStore:
    return JsonFileStore(get_config_manager().get('storage.path', 'data/sleep_coach.json'))


def get_clock():
    return system_clock


def get_notification_sender():
    return LoggingNotificationSender()


def get_settings_repository(store: KeyValueStore = Depends(get_store)) -> SettingsRepository:
    return SettingsRepository(store)


def get_reminder_repository(store: KeyValueStore = Depends(get_store)) -> ReminderRepository:
    max_reminders = get_config_manager().get('reminders.max_per_token', constants.MAX_REMINDERS_PER_TOKEN)
    return ReminderRepository(store, max_reminders=max_reminders)


def get_coach_service(
    store: KeyValueStore = Depends(get_store),
    config: CoachConfig = Depends(get_coach_config),
    clock=Depends(get_clock),
) -> CoachService:
    history_repository = HistoryRepository(store, max_entries=config.max_history_entries)
    return CoachService(history_repository, SettingsRepository(store), config=config, clock=clock)


def get_reminder_service(
    reminder_repository: ReminderRepository = Depends(get_reminder_repository),
    settings_repository: SettingsRepository = Depends(get_settings_repository),
    sender=Depends(get_notification_sender),
    clock=Depends(get_clock),
) -> ReminderService:
    cycles = get_config_manager().get('reminders.default_cycles', constants.DEFAULT_REMINDER_CYCLES)
    return ReminderService(reminder_repository, settings_repository, sender=sender, cycles=cycles, clock=clock)
