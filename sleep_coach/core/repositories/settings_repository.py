# sleep_coach/core/repositories/settings_repository.py
import json
import logging

from pydantic import ValidationError

from sleep_coach.core.models.data_models import Settings
from sleep_coach.core.repositories.storage import KeyValueStore
from sleep_coach.utils.constants import SETTINGS_STORAGE_KEY

logger = logging.getLogger(__name__)


class SettingsRepository:
    """User settings, read at the moment of each calculation"""

    def __init__(self, store: KeyValueStore, key=SETTINGS_STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> Settings:
        """Stored settings merged over the defaults"""
        raw = self.store.get(self.key)
        if not raw:
            return Settings()

        try:
            return Settings.model_validate(json.loads(raw))
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.error(f"Error loading settings, using defaults: {e}")
            return Settings()

    def update(self, **changes) -> Settings:
        """
        Validate and persist a partial settings update.

        Raises:
            pydantic.ValidationError: If a changed value is invalid
        """
        current = self.load().model_dump()
        current.update(changes)
        settings = Settings.model_validate(current)

        self.store.set(self.key, json.dumps(settings.to_storage()))
        logger.info(f"Settings updated: {', '.join(sorted(changes))}")
        return settings
