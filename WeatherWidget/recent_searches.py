"""Recent-search history and last-city persistence."""
import json
import logging
from typing import List, Optional

from key_value_store import KeyValueStoreBase

RECENT_KEY = "recentSearches"
LAST_CITY_KEY = "lastCity"
MAX_RECENT = 5


class RecentSearchStore:
    """
    Most-recent-first list of searched cities, capped and de-duplicated.

    Entries compare case-sensitively, exactly as typed. The whole list is
    written back to the store on every mutation.
    """

    def __init__(self, store: KeyValueStoreBase, max_entries: int = MAX_RECENT):
        self.store = store
        self.max_entries = max_entries
        self._entries = self._load()

    def _load(self) -> List[str]:
        raw = self.store.get_item(RECENT_KEY)
        if raw is None:
            return []
        try:
            entries = json.loads(raw)
        except ValueError:
            logging.warning(f"Ignoring malformed {RECENT_KEY}: {raw[:100]!r}")
            return []
        if not isinstance(entries, list):
            logging.warning(f"Ignoring {RECENT_KEY}: expected a list, got {type(entries).__name__}")
            return []
        unique: List[str] = []
        for entry in entries:
            if isinstance(entry, str) and entry not in unique:
                unique.append(entry)
        return unique[:self.max_entries]

    def record(self, city: str) -> None:
        """Move city to the front, drop the oldest beyond the cap, persist."""
        entries = [entry for entry in self._entries if entry != city]
        entries.insert(0, city)
        self._entries = entries[:self.max_entries]
        self.store.set_item(RECENT_KEY, json.dumps(self._entries))
        logging.debug(f"Recent searches: {self._entries}")

    def list(self) -> List[str]:
        return list(self._entries)

    def record_last_city(self, city: str) -> None:
        self.store.set_item(LAST_CITY_KEY, city)

    def last_city(self) -> Optional[str]:
        return self.store.get_item(LAST_CITY_KEY) or None
