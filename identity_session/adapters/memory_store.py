"""
Memory Store Adapter - In-memory key/value storage (testing only).
"""

import copy
from typing import Any, Dict, Optional

from identity_session.ports.store_port import KeyValueStorePort


class MemoryStoreAdapter(KeyValueStorePort):
    """
    In-memory record storage.

    WARNING: Only for testing. Records are lost on restart.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._records: Dict[str, Dict[str, Any]] = {}

    async def save(self, key: str, record: Optional[Dict[str, Any]]) -> None:
        """Save a record, or clear the key when record is None."""
        if record is None:
            self._records.pop(key, None)
            return
        self._records[key] = copy.deepcopy(record)

    async def read(self, key: str) -> Optional[Dict[str, Any]]:
        """Read a record."""
        record = self._records.get(key)
        return copy.deepcopy(record) if record is not None else None

    def __contains__(self, key: str) -> bool:
        return key in self._records
