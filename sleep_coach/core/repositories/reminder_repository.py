# sleep_coach/core/repositories/reminder_repository.py
import json
import logging
import uuid
from typing import List

from pydantic import ValidationError

from sleep_coach.core.models.data_models import Reminder, ReminderCreate
from sleep_coach.core.repositories.storage import KeyValueStore
from sleep_coach.utils.constants import MAX_REMINDERS_PER_TOKEN, REMINDERS_STORAGE_KEY

logger = logging.getLogger(__name__)


class ReminderLimitError(Exception):
    """Raised when adding a reminder would exceed the per-device limit"""


class ReminderNotFoundError(KeyError):
    """Raised when a reminder id is unknown"""


class ReminderRepository:
    """Bedtime reminders configured on this device"""

    def __init__(self, store: KeyValueStore, max_reminders=MAX_REMINDERS_PER_TOKEN, key=REMINDERS_STORAGE_KEY):
        self.store = store
        self.max_reminders = max_reminders
        self.key = key

    def list(self) -> List[Reminder]:
        raw = self.store.get(self.key)
        if not raw:
            return []

        try:
            rows = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse stored reminders: {e}")
            return []

        reminders = []
        for row in rows if isinstance(rows, list) else []:
            try:
                reminders.append(Reminder.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping invalid reminder: {e}")
        return reminders

    def get(self, reminder_id) -> Reminder:
        for reminder in self.list():
            if reminder.id == reminder_id:
                return reminder
        raise ReminderNotFoundError(reminder_id)

    def add(self, reminder: ReminderCreate) -> Reminder:
        reminders = self.list()
        if len(reminders) >= self.max_reminders:
            raise ReminderLimitError(f"Maximum {self.max_reminders} reminders allowed per device")

        new_reminder = Reminder(id=str(uuid.uuid4()), **reminder.model_dump())
        self._save(reminders + [new_reminder])
        logger.info(f"Reminder {new_reminder.id} added for wake-up at {new_reminder.wake_up_time}")
        return new_reminder

    def update(self, reminder_id, **changes) -> Reminder:
        """
        Apply a partial update to a reminder.

        Raises:
            ReminderNotFoundError: If the id is unknown
            pydantic.ValidationError: If a changed value is invalid
        """
        reminders = self.list()
        for i, reminder in enumerate(reminders):
            if reminder.id == reminder_id:
                updated = Reminder.model_validate({**reminder.model_dump(), **changes, 'id': reminder_id})
                reminders[i] = updated
                self._save(reminders)
                logger.info(f"Reminder {reminder_id} updated")
                return updated
        raise ReminderNotFoundError(reminder_id)

    def remove(self, reminder_id):
        reminders = self.list()
        remaining = [reminder for reminder in reminders if reminder.id != reminder_id]
        if len(remaining) == len(reminders):
            raise ReminderNotFoundError(reminder_id)
        self._save(remaining)
        logger.info(f"Reminder {reminder_id} removed")

    def _save(self, reminders):
        self.store.set(self.key, json.dumps([reminder.to_storage() for reminder in reminders]))
