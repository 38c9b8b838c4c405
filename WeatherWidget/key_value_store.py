"""Key-value store abstraction - allows swapping file persistence with test backends."""
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional


class KeyValueStoreBase(ABC):
    """String-to-string store that survives between sessions."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read a stored value.

        Args:
            key: Item name

        Returns:
            The stored string, or None if the key was never written
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Args:
            key: Item name
            value: String to store
        """
        pass


class JsonFileStore(KeyValueStoreBase):
    """Store backed by a single JSON object on disk, rewritten on every set."""

    def __init__(self, path: str):
        """
        Initialize file store.

        Args:
            path: JSON file location (created on first write)
        """
        self.path = os.path.abspath(os.path.expanduser(path))
        self._items = self._load()

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            logging.debug(f"No store at {self.path}, starting empty")
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logging.warning(f"Could not read store {self.path}: {e}; starting empty")
            return {}
        if not isinstance(data, dict):
            logging.warning(f"Store {self.path} is not a JSON object; starting empty")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._items, f, indent=2)
        logging.debug(f"Stored {key!r} in {self.path}")


class MemoryStore(KeyValueStoreBase):
    """
    In-memory store for testing.

    Keeps a write counter so tests can check how often the store was hit.
    """

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items = dict(items or {})
        self.writes = 0

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self.writes += 1
