import pytest
from pydantic import ValidationError

from skillboard.utils.config_loader import MockApiConfig, load_mock_api_config

ENV_VARS = [
    "SKILLBOARD_API_PREFIX",
    "SKILLBOARD_DELAY_MS",
    "SKILLBOARD_STORAGE_BACKEND",
    "SKILLBOARD_STORAGE_PATH",
    "SKILLBOARD_STORAGE_KEY",
    "REDIS_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("skillboard.utils.config_loader.load_dotenv", lambda: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = MockApiConfig()
    assert cfg.api_prefix == "/api"
    assert cfg.delay_ms == 200
    assert cfg.storage_key == "skillboard::skills"
    assert cfg.storage_backend == "memory"


def test_loads_yaml_file(tmp_path):
    path = tmp_path / "mock_api.yml"
    path.write_text("api_prefix: /v2\ndelay_ms: 50\nstorage_backend: file\n", encoding="utf-8")

    cfg = load_mock_api_config(path)

    assert cfg.api_prefix == "/v2"
    assert cfg.delay_ms == 50
    assert cfg.storage_backend == "file"


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_mock_api_config(tmp_path / "missing.yml")


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "mock_api.yml"
    path.write_text("delay_ms: 50\n", encoding="utf-8")
    monkeypatch.setenv("SKILLBOARD_DELAY_MS", "0")
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

    cfg = load_mock_api_config(path)

    assert cfg.delay_ms == 0
    assert cfg.redis_url == "redis://localhost:6379/0"
    assert cfg.storage_backend == "redis"


def test_invalid_values_are_rejected(tmp_path):
    path = tmp_path / "mock_api.yml"
    path.write_text("delay_ms: -5\nstorage_backend: sqlite\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_mock_api_config(path)
