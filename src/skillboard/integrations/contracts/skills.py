"""
Skill and badge contracts.

Defines the record shapes exchanged between the simulated backend and its
callers, e.g.:
- a stored skill ({id, name, level})
- a derived badge ({id, name, description})

These contracts must be used by both:
- mock_api/* (the locally simulated backend)
- clients/skills_api.py (the application-side HTTP client)

Why:
- Keeps responses consistent whether they come from the simulator or a real server
- Centralizes the level coercion rule so storage, engine and routes agree
"""

from __future__ import annotations

import math
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, field_validator

Level = Union[int, float]

NOT_FOUND_BODY: Dict[str, str] = {"message": "Not Found"}


def coerce_level(value: Any) -> Level:
    """Coerce a raw level to a number; missing or invalid values become 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
        try:
            value = float(value)
        except ValueError:
            return 0
    if not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        if value.is_integer():
            return int(value)
    return value


def coerce_name(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class Skill(BaseModel):
    """A tracked competency record. Unknown stored fields are carried along."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    level: Level = 0

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return coerce_name(value)

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> Level:
        return coerce_level(value)


class Badge(BaseModel):
    """Achievement derived from the current skill collection. Never persisted."""

    id: str
    name: str
    description: str


__all__ = [
    "Badge",
    "Level",
    "NOT_FOUND_BODY",
    "Skill",
    "coerce_level",
    "coerce_name",
]
