"""
Store Port - Key/value blob persistence for cached profile data.

Implementations:
- JsonFileStoreAdapter: One JSON file per key in a local folder
- RedisStoreAdapter: Redis-backed blobs
- MemoryStoreAdapter: In-memory dict (testing only)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class KeyValueStorePort(ABC):
    """Port: Save and read JSON-serializable records by key."""

    @abstractmethod
    async def save(self, key: str, record: Optional[Dict[str, Any]]) -> None:
        """
        Save a record under key.

        Args:
            key: Record key
            record: JSON-serializable dict, or None to clear the key

        Raises:
            StoreError: If the write fails
        """
        pass

    @abstractmethod
    async def read(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Read the record stored under key.

        Returns:
            The record, or None if absent

        Raises:
            StoreError: If the read fails
        """
        pass
