"""
Skill persistence on top of a key-value storage slot.

The whole collection lives under one key as a JSON array and is rewritten on
every mutation. Reads never raise: missing or corrupt data reads as an empty
collection.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Sequence

from pydantic import ValidationError

from skillboard.integrations.contracts.interfaces import KeyValueStorage
from skillboard.integrations.contracts.skills import Skill

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "skillboard::skills"


class SkillStore:
    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> List[Skill]:
        """Return the persisted collection, or [] when absent or malformed."""
        raw = self.storage.get_item(self.key)
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Corrupt skill data under %s, resetting to empty: %s", self.key, e)
            return []
        if not isinstance(parsed, list):
            logger.warning("Skill data under %s is not a list, resetting to empty", self.key)
            return []
        return [skill for skill in (self._parse_entry(entry) for entry in parsed) if skill is not None]

    def save(self, skills: Sequence[Skill]) -> None:
        payload = json.dumps([skill.model_dump() for skill in skills])
        self.storage.set_item(self.key, payload)

    def clear(self) -> None:
        self.storage.remove_item(self.key)

    def _parse_entry(self, entry: Any):
        if not isinstance(entry, dict):
            logger.warning("Skipping non-object skill entry: %r", entry)
            return None
        try:
            return Skill(**entry)
        except (TypeError, ValidationError) as e:
            logger.warning("Skipping invalid skill entry %r: %s", entry, e)
            return None
