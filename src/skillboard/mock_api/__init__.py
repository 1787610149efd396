"""
Simulated skills backend.

These modules answer skills API requests locally without any network call.
They are used when:
- there is no real backend to talk to
- we want to exercise the client end-to-end in tests

Important:
- Responses follow the same contracts (integrations/contracts/*) a real
  server would return, so client code runs unmodified.
"""

from .factory import build_simulator, build_storage, create_mock_client
from .request_interpreter import interpret_request, read_body
from .simulator import ResponseSimulator
from .transport import MockApiTransport

__all__ = [
    "MockApiTransport",
    "ResponseSimulator",
    "build_simulator",
    "build_storage",
    "create_mock_client",
    "interpret_request",
    "read_body",
]
