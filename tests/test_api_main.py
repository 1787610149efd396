import pytest
from fastapi.testclient import TestClient

from skillboard.api.main import create_app


@pytest.fixture
def client(config, storage):
    app = create_app(config, storage=storage)
    with TestClient(app) as c:
        yield c


def test_health_reports_storage(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "storage": True}


def test_skill_lifecycle_over_http(client):
    created = client.post("/api/skills", json={"name": "Go", "level": 5})
    assert created.status_code == 201
    skill = created.json()
    assert skill["name"] == "Go" and skill["level"] == 5 and skill["id"]

    patched = client.patch(f"/api/skills/{skill['id']}", json={"name": "Golang"})
    assert patched.json() == {"id": skill["id"], "name": "Golang", "level": 5}

    assert client.get("/api/skills").json() == [patched.json()]

    deleted = client.delete(f"/api/skills/{skill['id']}")
    assert deleted.status_code == 204
    assert deleted.content == b""
    assert client.delete(f"/api/skills/{skill['id']}").status_code == 404


def test_badges_and_unknown_routes(client):
    for i in range(3):
        client.post("/api/skills", json={"name": f"s{i}", "level": 5})

    badges = client.get("/api/badges").json()
    assert [b["id"] for b in badges] == ["b1", "b2", "b3"]

    missing = client.get("/api/does-not-exist")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Not Found"}
