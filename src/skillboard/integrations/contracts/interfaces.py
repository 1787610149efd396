from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class OperationKind(str, Enum):
    LIST_SKILLS = "LIST_SKILLS"
    CREATE_SKILL = "CREATE_SKILL"
    UPDATE_SKILL = "UPDATE_SKILL"
    DELETE_SKILL = "DELETE_SKILL"
    LIST_BADGES = "LIST_BADGES"
    NOT_FOUND = "NOT_FOUND"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class RequestDescriptor:
    method: str
    path: str                            # full URL path, no query string
    body: Any = None                     # raw body: bytes, str, mapping, pairs or None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value
        return ""

    def to_dict(self) -> Dict[str, Any]:
        body = self.body
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8", errors="replace")
        return {
            "method": self.method.lower(),
            "url": self.path,
            "data": body,
            "headers": dict(self.headers),
        }


@dataclass
class Operation:
    kind: OperationKind
    request: RequestDescriptor
    skill_id: Optional[str] = None
    body: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SimulatedResponse:
    """Mirrors a standard HTTP client response object."""
    data: Any
    status: int
    status_text: str
    config: RequestDescriptor
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def build(cls, config: RequestDescriptor, data: Any, status: int = 200) -> "SimulatedResponse":
        headers = {} if data is None else {"content-type": "application/json"}
        return cls(
            data=data,
            status=status,
            status_text=HTTPStatus(status).phrase,
            config=config,
            headers=headers,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.data,
            "status": self.status,
            "statusText": self.status_text,
            "headers": dict(self.headers),
            "config": self.config.to_dict(),
        }


# ---------------------------------------------------------------------------
# Abstract storage interface
# ---------------------------------------------------------------------------

class KeyValueStorage(ABC):
    """Every persistent key-value backend must implement this interface."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the raw string stored under key, or None."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Overwrite the slot in a single write."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove the slot if present."""

    def ping(self) -> bool:
        return True
