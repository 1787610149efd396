"""
Integrations layer.
This package contains the code that sits on the HTTP boundary:
- contracts shared by the simulated backend and real servers
- the application-side HTTP client for the skills API

Key rule:
- Application code MUST NOT build skills API requests by hand.
- It should call SkillsApiClient, which works unchanged against the local
  simulator (mock_api) or a real server.

Switching implementations:
- Selecting simulated vs real transport happens in ONE place (mock_api/factory.py).
"""

from .contracts import (
    NOT_FOUND_BODY,
    Badge,
    KeyValueStorage,
    Operation,
    OperationKind,
    RequestDescriptor,
    SimulatedResponse,
    Skill,
)

__all__ = [
    "Badge",
    "KeyValueStorage",
    "NOT_FOUND_BODY",
    "Operation",
    "OperationKind",
    "RequestDescriptor",
    "SimulatedResponse",
    "Skill",
]
