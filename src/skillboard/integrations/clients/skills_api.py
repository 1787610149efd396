"""
Skills API HTTP Client.

This module provides the calls the application makes to the skills backend.
Includes:
- Config management (env vars)
- Error handling & logging
- Response normalization into Skill / Badge contracts

The same client runs against a real server or, via mock_api.create_mock_client,
against the local simulator.
"""

import os
import httpx
import logging
from typing import Any, Dict, List, Optional
from skillboard.integrations.contracts.skills import Badge, Skill
from skillboard.mock_api.request_interpreter import normalize_prefix

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class SkillsApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_prefix: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 15,
    ):
        # Config management: load from env if not provided
        self.base_url = base_url or os.getenv("SKILLBOARD_API_URL", "")
        if api_prefix is None:
            api_prefix = os.getenv("SKILLBOARD_API_PREFIX", "/api")
        # "" for a root prefix, so paths never start with "//"
        self.api_prefix = normalize_prefix(api_prefix)
        self._client = client
        self._timeout = timeout
        if not self.base_url and client is None:
            logger.warning("Skills API URL is not set.")

    async def list_skills(self) -> List[Skill]:
        data = await self._request("GET", "/skills")
        return [Skill(**item) for item in data]

    async def create_skill(self, name: str, level: float = 0) -> Skill:
        data = await self._request("POST", "/skills", json={"name": name, "level": level})
        return Skill(**data)

    async def update_skill(self, skill_id: str, name: Optional[str] = _UNSET, level: Optional[float] = _UNSET) -> Skill:
        """Send only the fields that were given; the rest stay untouched server-side."""
        patch: Dict[str, Any] = {}
        if name is not _UNSET:
            patch["name"] = name
        if level is not _UNSET:
            patch["level"] = level
        data = await self._request("PATCH", f"/skills/{skill_id}", json=patch)
        return Skill(**data)

    async def delete_skill(self, skill_id: str) -> None:
        await self._request("DELETE", f"/skills/{skill_id}")

    async def list_badges(self) -> List[Badge]:
        data = await self._request("GET", "/badges")
        return [Badge(**item) for item in data]

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.api_prefix}{path}"
        try:
            logger.info(f"{method} {url}")
            if self._client is not None:
                response = await self._client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient(base_url=self.base_url, timeout=self._timeout) as client:
                    response = await client.request(method, url, **kwargs)
            response.raise_for_status()
            logger.info(f"Received skills API response: status={response.status_code}")
            if response.status_code == 204 or not response.content:
                return None
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from skills API: {e.response.status_code} {e.response.text}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to skills API: {e}")
            raise
