import json

import httpx
import pytest

from skillboard.integrations.clients.skills_api import SkillsApiClient
from skillboard.integrations.contracts.skills import Skill
from skillboard.mock_api.factory import create_mock_client


@pytest.mark.asyncio
async def test_client_round_trip_over_simulated_backend(config, storage):
    async with create_mock_client(config, storage=storage) as http:
        api = SkillsApiClient(client=http)

        go = await api.create_skill("Go", 5)
        assert isinstance(go, Skill)
        assert go.name == "Go" and go.level == 5 and go.id

        updated = await api.update_skill(go.id, level=4)
        assert updated == Skill(id=go.id, name="Go", level=4)

        for i in range(7):
            await api.create_skill(f"skill {i}", 4)
        badges = await api.list_badges()
        assert {b.id for b in badges} >= {"b5", "b6", "b7"}

        await api.delete_skill(go.id)
        assert go.id not in [s.id for s in await api.list_skills()]


@pytest.mark.asyncio
async def test_update_sends_only_given_fields():
    sent = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request.content)
        return httpx.Response(200, json={"id": "x", "name": "Go", "level": 4})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://real") as http:
        api = SkillsApiClient(client=http)
        await api.update_skill("x", level=4)

    assert [json.loads(body) for body in sent] == [{"level": 4}]


@pytest.mark.asyncio
async def test_missing_skill_raises_http_status_error(config, storage):
    async with create_mock_client(config, storage=storage) as http:
        api = SkillsApiClient(client=http)
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await api.delete_skill("nope")

    assert exc_info.value.response.status_code == 404


@pytest.mark.asyncio
async def test_request_errors_are_reraised():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://real") as http:
        api = SkillsApiClient(client=http)
        with pytest.raises(httpx.RequestError):
            await api.list_skills()


@pytest.mark.asyncio
@pytest.mark.parametrize("prefix", ["/", ""])
async def test_root_prefix_builds_single_slash_paths(config, storage, prefix):
    config = config.model_copy(update={"api_prefix": prefix})

    async with create_mock_client(config, storage=storage) as http:
        api = SkillsApiClient(api_prefix=prefix, client=http)
        go = await api.create_skill("Go", 5)
        listed = await api.list_skills()

    assert api.api_prefix == ""
    assert go.name == "Go" and go.level == 5
    assert [s.id for s in listed] == [go.id]
