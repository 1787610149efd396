"""
Interception layer for httpx clients.

MockApiTransport sits where the network transport normally would. Requests
under the API prefix are answered by the ResponseSimulator; everything else is
forwarded untouched to a real transport.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import httpx

from skillboard.integrations.contracts.interfaces import RequestDescriptor, SimulatedResponse

from .request_interpreter import interpret_request, normalize_prefix
from .simulator import ResponseSimulator

logger = logging.getLogger(__name__)


def describe_request(request: httpx.Request) -> RequestDescriptor:
    """Build a RequestDescriptor from an httpx request whose body has been read."""
    return RequestDescriptor(
        method=request.method,
        path=request.url.path,
        body=request.content or None,
        headers=dict(request.headers),
    )


def to_httpx_response(simulated: SimulatedResponse, request: httpx.Request) -> httpx.Response:
    content = b"" if simulated.data is None else json.dumps(simulated.data).encode("utf-8")
    return httpx.Response(
        status_code=simulated.status,
        headers=simulated.headers,
        content=content,
        request=request,
        extensions={"reason_phrase": simulated.status_text.encode("ascii")},
    )


class MockApiTransport(httpx.AsyncBaseTransport):
    def __init__(
        self,
        simulator: ResponseSimulator,
        api_prefix: str = "/api",
        fallback: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.simulator = simulator
        self.api_prefix = normalize_prefix(api_prefix)
        self._fallback = fallback or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        operation = interpret_request(describe_request(request), self.api_prefix)
        if operation is None:
            logger.debug("Passing %s %s through to real transport", request.method, request.url)
            return await self._fallback.handle_async_request(request)

        simulated = await self.simulator.handle(operation)
        logger.debug("Simulated %s %s -> %s", request.method, request.url.path, simulated.status)
        return to_httpx_response(simulated, request)

    async def aclose(self) -> None:
        await self._fallback.aclose()
