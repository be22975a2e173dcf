# sleep_coach/core/repositories/history_repository.py
import json
import logging
import uuid
from typing import List

from pydantic import ValidationError

from sleep_coach.core.models.data_models import SleepEntry, SleepEntryCreate
from sleep_coach.core.repositories.storage import KeyValueStore
from sleep_coach.utils.constants import HISTORY_STORAGE_KEY, MAX_HISTORY_ENTRIES

logger = logging.getLogger(__name__)


class HistoryRepository:
    """Newest-first sleep history, capped at a maximum number of entries"""

    def __init__(self, store: KeyValueStore, max_entries=MAX_HISTORY_ENTRIES, key=HISTORY_STORAGE_KEY):
        self.store = store
        self.max_entries = max_entries
        self.key = key

    def load(self) -> List[SleepEntry]:
        """Load the stored history (newest first), skipping invalid rows"""
        raw = self.store.get(self.key)
        if not raw:
            return []

        try:
            rows = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing stored sleep history: {e}")
            return []

        if not isinstance(rows, list):
            logger.error("Stored sleep history is not a list, ignoring it")
            return []

        entries = []
        for i, row in enumerate(rows):
            try:
                entries.append(SleepEntry.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping invalid history entry {i}: {e}")

        return entries[:self.max_entries]

    def append(self, entry: SleepEntryCreate) -> SleepEntry:
        """Assign an id, prepend the entry and evict the oldest beyond the cap"""
        new_entry = SleepEntry(id=uuid.uuid4().hex, **entry.model_dump())

        updated = [new_entry] + self.load()
        evicted = len(updated) - self.max_entries
        updated = updated[:self.max_entries]

        self._save(updated)
        logger.info(f"Added sleep entry {new_entry.id} for {new_entry.date}")
        if evicted > 0:
            logger.info(f"Evicted {evicted} oldest history entries")
        return new_entry

    def clear(self):
        """Remove the whole history"""
        self.store.remove(self.key)
        logger.info("Sleep history cleared")

    def _save(self, entries):
        self.store.set(self.key, json.dumps([entry.to_storage() for entry in entries]))
