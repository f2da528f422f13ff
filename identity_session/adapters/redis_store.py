"""
Redis Store Adapter - Redis-backed key/value storage.
"""

import json
from typing import Any, Dict, Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from identity_session.errors import StoreError
from identity_session.ports.store_port import KeyValueStorePort


class RedisStoreAdapter(KeyValueStorePort):
    """
    Redis-backed record storage.

    Records are stored as JSON strings, optionally with a TTL.
    Lets several processes on one machine share the cached profile.
    """

    def __init__(
        self,
        redis_client=None,
        prefix: str = "identity:profile:",
        ttl: Optional[int] = None,
    ):
        """
        Initialize Redis store adapter.

        Args:
            redis_client: redis.asyncio.Redis instance (localhost if None)
            prefix: Key prefix for records
            ttl: Expiry of saved records in seconds (None keeps them)
        """
        self._redis = redis_client
        self._prefix = prefix
        self._ttl = ttl

    def _get_redis(self):
        """Lazy create the Redis client."""
        if self._redis is None:
            self._redis = aioredis.Redis(
                host="localhost",
                port=6379,
                db=0,
                decode_responses=True,
            )
        return self._redis

    def _key(self, key: str) -> str:
        """Generate Redis key for a record."""
        return f"{self._prefix}{key}"

    async def save(self, key: str, record: Optional[Dict[str, Any]]) -> None:
        """Save a record, or delete it when record is None."""
        redis = self._get_redis()
        try:
            if record is None:
                await redis.delete(self._key(key))
            else:
                await redis.set(self._key(key), json.dumps(record), ex=self._ttl)
        except (RedisError, TypeError, ValueError) as e:
            raise StoreError(f"Failed to save {key}: {e}") from e

    async def read(self, key: str) -> Optional[Dict[str, Any]]:
        """Read a record."""
        redis = self._get_redis()
        try:
            data = await redis.get(self._key(key))
        except RedisError as e:
            raise StoreError(f"Failed to read {key}: {e}") from e

        if not data:
            return None
        try:
            return json.loads(data)
        except ValueError as e:
            raise StoreError(f"Corrupt record {key}: {e}") from e
