"""
Record Storage Interface

Narrow save/load contract used by the session store. Implementations must
make every save all-or-nothing: a failed save leaves the previously saved
record intact.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class RecordStorage(ABC):
    """Durable player-record storage keyed by player id."""

    @abstractmethod
    def save(self, player_id: str, data: Dict[str, Any]) -> None:
        """
        Stores a serialized player record, replacing any previous one.

        Raises:
            PersistenceError: If the record could not be written
        """

    @abstractmethod
    def load(self, player_id: str) -> Optional[Dict[str, Any]]:
        """
        Returns the stored record, or None when the player has none.

        Raises:
            PersistenceError: If the record exists but cannot be read
        """

    @abstractmethod
    def delete(self, player_id: str) -> bool:
        """Removes a stored record. Returns True if one existed."""


class MemoryRecordStorage(RecordStorage):
    """Keeps records in process memory only. Used when no save location is configured."""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}

    def save(self, player_id: str, data: Dict[str, Any]) -> None:
        self._records[player_id] = copy.deepcopy(data)

    def load(self, player_id: str) -> Optional[Dict[str, Any]]:
        data = self._records.get(player_id)
        return copy.deepcopy(data) if data is not None else None

    def delete(self, player_id: str) -> bool:
        return self._records.pop(player_id, None) is not None
