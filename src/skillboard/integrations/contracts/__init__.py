"""
Contracts shared by the simulated backend and the HTTP client.
"""

from .interfaces import (
    KeyValueStorage,
    Operation,
    OperationKind,
    RequestDescriptor,
    SimulatedResponse,
)
from .skills import NOT_FOUND_BODY, Badge, Level, Skill, coerce_level, coerce_name

__all__ = [
    "Badge",
    "KeyValueStorage",
    "Level",
    "NOT_FOUND_BODY",
    "Operation",
    "OperationKind",
    "RequestDescriptor",
    "SimulatedResponse",
    "Skill",
    "coerce_level",
    "coerce_name",
]
