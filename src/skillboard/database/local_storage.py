"""
Lightweight in-memory key-value storage for local development and tests.

Stands in for the browser's local storage: string keys to string values,
no expiry. Lives for the lifetime of the process.
"""

from __future__ import annotations

from typing import Dict, Optional

from skillboard.integrations.contracts.interfaces import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
