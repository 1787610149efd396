"""Pytest fixtures for the skillboard mock API tests."""

import itertools

import pytest

from skillboard.database.local_storage import InMemoryStorage
from skillboard.database.skill_store import SkillStore
from skillboard.mock_api.simulator import ResponseSimulator
from skillboard.utils.config_loader import MockApiConfig


@pytest.fixture
def storage():
    """In-memory key-value storage standing in for browser local storage."""
    return InMemoryStorage()


@pytest.fixture
def store(storage):
    return SkillStore(storage)


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"skill-{next(counter)}"


@pytest.fixture
def simulator(store, id_factory):
    """Simulator with no artificial latency and predictable ids."""
    return ResponseSimulator(store, delay_ms=0, id_factory=id_factory)


@pytest.fixture
def config():
    return MockApiConfig(delay_ms=0)
