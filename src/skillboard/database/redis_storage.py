"""
Real Redis-backed key-value storage for shared environments when REDIS_URL is
set. Implements the same interface as skillboard.database.local_storage
(in-memory stub).
"""

from __future__ import annotations

from typing import Optional

import redis

from skillboard.integrations.contracts.interfaces import KeyValueStorage


class RedisStorage(KeyValueStorage):
    """
    Redis-backed storage. Keys are namespaced so the slot can share a database.
    """

    def __init__(self, url: str, namespace: str = "storage", client: Optional[redis.Redis] = None) -> None:
        self._client = client or redis.from_url(url, decode_responses=True)
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get_item(self, key: str) -> Optional[str]:
        raw = self._client.get(self._key(key))
        if raw is None:
            return None
        if isinstance(raw, bytes):
            return raw.decode("utf-8", errors="replace")
        return raw

    def set_item(self, key: str, value: str) -> None:
        self._client.set(self._key(key), value)

    def remove_item(self, key: str) -> None:
        self._client.delete(self._key(key))

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
