"""
JSON File Store Adapter - One JSON file per key in a local folder.
"""

import asyncio
import json
import os
from typing import Any, Dict, Optional

from identity_session.errors import StoreError
from identity_session.ports.store_port import KeyValueStorePort


class JsonFileStoreAdapter(KeyValueStorePort):
    """
    Local folder storage for cached records.

    Each key maps to <folder>/<key>.json. Writes go through a temporary
    file and an atomic rename so a crash never leaves half a record.
    Not encrypted.
    """

    def __init__(self, folder: str):
        """
        Initialize file store.

        Args:
            folder: Directory holding the records (created on first write)
        """
        self._folder = folder

    def _path(self, key: str) -> str:
        """Map a key to its file path."""
        if not key or os.sep in key or (os.altsep and os.altsep in key) or key.startswith("."):
            raise StoreError(f"Invalid store key: {key!r}")
        return os.path.join(self._folder, f"{key}.json")

    async def save(self, key: str, record: Optional[Dict[str, Any]]) -> None:
        """Write a record, or delete its file when record is None."""
        path = self._path(key)
        await asyncio.to_thread(self._write, path, record)

    async def read(self, key: str) -> Optional[Dict[str, Any]]:
        """Read a record, None if its file does not exist."""
        path = self._path(key)
        return await asyncio.to_thread(self._read, path)

    def _write(self, path: str, record: Optional[Dict[str, Any]]):
        try:
            if record is None:
                if os.path.exists(path):
                    os.remove(path)
                return

            os.makedirs(self._folder, exist_ok=True)
            tmp_path = f"{path}.tmp"
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(record, f)
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"Failed to write {path}: {e}") from e

    def _read(self, path: str) -> Optional[Dict[str, Any]]:
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f"Failed to read {path}: {e}") from e
