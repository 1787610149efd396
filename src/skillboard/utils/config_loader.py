"""
Mock API configuration loader (prefix, latency, storage backend).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "mock_api.yml"

# env var -> config field
_ENV_OVERRIDES = {
    "SKILLBOARD_API_PREFIX": "api_prefix",
    "SKILLBOARD_DELAY_MS": "delay_ms",
    "SKILLBOARD_STORAGE_BACKEND": "storage_backend",
    "SKILLBOARD_STORAGE_PATH": "storage_path",
    "SKILLBOARD_STORAGE_KEY": "storage_key",
    "REDIS_URL": "redis_url",
}


class MockApiConfig(BaseModel):
    api_prefix: str = "/api"
    delay_ms: int = Field(default=200, ge=0, le=60_000)
    storage_key: str = "skillboard::skills"
    storage_backend: Literal["memory", "file", "redis"] = "memory"
    storage_path: str = "data/skillboard_storage.json"
    redis_url: Optional[str] = None


def load_mock_api_config(config_path: Optional[Path] = None) -> MockApiConfig:
    """
    Load and validate the mock API configuration.

    Args:
        config_path: Path to a YAML config file. Defaults to config/mock_api.yml;
            when the default file is missing, built-in defaults are used.

    Returns:
        Validated MockApiConfig with environment overrides applied.

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    data = {}
    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    elif config_path is not None:
        raise FileNotFoundError(f"Mock API config file not found: {config_path}")

    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[field_name] = value
    if os.getenv("REDIS_URL") and not os.getenv("SKILLBOARD_STORAGE_BACKEND"):
        data["storage_backend"] = "redis"

    try:
        cfg = MockApiConfig(**data)
        logger.info("Loaded mock API config (prefix=%s, storage=%s)", cfg.api_prefix, cfg.storage_backend)
        return cfg
    except ValidationError as e:
        logger.error("Mock API config validation failed: %s", e)
        raise
