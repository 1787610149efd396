"""
Wiring for the simulated backend.

This is the ONE place where configuration decides which storage backend is
used and how Store, Simulator and Transport are assembled. Application code
asks for a client here instead of constructing transports itself.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from skillboard.database.skill_store import SkillStore
from skillboard.integrations.contracts.interfaces import KeyValueStorage
from skillboard.utils.config_loader import MockApiConfig, load_mock_api_config

from .simulator import ResponseSimulator
from .transport import MockApiTransport

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://skillboard.local"


def build_storage(config: MockApiConfig) -> KeyValueStorage:
    if config.storage_backend == "redis":
        if not config.redis_url:
            raise ValueError("storage_backend 'redis' requires redis_url (REDIS_URL)")
        from skillboard.database.redis_storage import RedisStorage

        return RedisStorage(url=config.redis_url)
    if config.storage_backend == "file":
        from skillboard.database.file_storage import JsonFileStorage

        return JsonFileStorage(config.storage_path)

    from skillboard.database.local_storage import InMemoryStorage

    return InMemoryStorage()


def build_simulator(config: MockApiConfig, storage: Optional[KeyValueStorage] = None) -> ResponseSimulator:
    storage = storage if storage is not None else build_storage(config)
    store = SkillStore(storage, key=config.storage_key)
    logger.info("Mock API using %s storage", type(storage).__name__)
    return ResponseSimulator(store, delay_ms=config.delay_ms)


def create_mock_client(
    config: Optional[MockApiConfig] = None,
    storage: Optional[KeyValueStorage] = None,
    fallback: Optional[httpx.AsyncBaseTransport] = None,
    **client_kwargs: Any,
) -> httpx.AsyncClient:
    """Return an AsyncClient whose API-prefixed requests are answered locally."""
    config = config or load_mock_api_config()
    transport = MockApiTransport(
        build_simulator(config, storage),
        api_prefix=config.api_prefix,
        fallback=fallback,
    )
    client_kwargs.setdefault("base_url", DEFAULT_BASE_URL)
    return httpx.AsyncClient(transport=transport, **client_kwargs)
