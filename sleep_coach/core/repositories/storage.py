# sleep_coach/core/repositories/storage.py
import json
import logging
import os
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String key-value storage used by the repositories"""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemoryStore:
    """Key-value store kept in a dictionary"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data = dict(initial or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def remove(self, key):
        self.data.pop(key, None)


class JsonFileStore:
    """Key-value store persisted as a single JSON object on disk"""

    def __init__(self, path='data/sleep_coach.json'):
        self.path = path
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def _read(self):
        """Read the whole store, empty if the file is missing or unreadable"""
        if not os.path.exists(self.path):
            return {}

        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading store {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Unexpected content in store {self.path}, ignoring it")
            return {}
        return data

    def _write(self, data):
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=2)

    def get(self, key):
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key, value):
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug(f"Stored key '{key}' in {self.path}")

    def remove(self, key):
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
            logger.debug(f"Removed key '{key}' from {self.path}")
