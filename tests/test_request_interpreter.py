import httpx
import pytest

from skillboard.integrations.contracts.interfaces import OperationKind, RequestDescriptor
from skillboard.mock_api.request_interpreter import interpret_request, read_body


def _req(method, path, body=None, headers=None):
    return RequestDescriptor(method=method, path=path, body=body, headers=headers or {})


@pytest.mark.parametrize(
    "method,path,kind,skill_id",
    [
        ("GET", "/api/skills", OperationKind.LIST_SKILLS, None),
        ("post", "/api/skills", OperationKind.CREATE_SKILL, None),
        ("PATCH", "/api/skills/abc-1", OperationKind.UPDATE_SKILL, "abc-1"),
        ("DELETE", "/api/skills/abc-1", OperationKind.DELETE_SKILL, "abc-1"),
        ("GET", "/api/badges", OperationKind.LIST_BADGES, None),
        ("PUT", "/api/skills/abc-1", OperationKind.NOT_FOUND, None),
        ("GET", "/api/skills/abc-1", OperationKind.NOT_FOUND, None),
        ("POST", "/api/badges", OperationKind.NOT_FOUND, None),
        ("GET", "/api/unknown", OperationKind.NOT_FOUND, None),
    ],
)
def test_route_table(method, path, kind, skill_id):
    op = interpret_request(_req(method, path))
    assert op.kind == kind
    assert op.skill_id == skill_id


@pytest.mark.parametrize("path", ["/skills", "/apiskills", "/api", "/other/api/skills"])
def test_paths_outside_prefix_pass_through(path):
    assert interpret_request(_req("GET", path)) is None


def test_custom_prefix():
    assert interpret_request(_req("GET", "/api/skills"), api_prefix="/v2/") is None
    op = interpret_request(_req("GET", "/v2/skills"), api_prefix="/v2/")
    assert op.kind == OperationKind.LIST_SKILLS


def test_create_decodes_json_body():
    op = interpret_request(
        _req("POST", "/api/skills", b'{"name": "Go", "level": 5}', {"Content-Type": "application/json"})
    )
    assert op.body == {"name": "Go", "level": 5}


def test_read_body_shapes():
    assert read_body(None) == {}
    assert read_body('{"name": "Go"}') == {"name": "Go"}
    assert read_body("not json") == {}
    assert read_body("[1, 2]") == {}
    assert read_body({"level": 3}) == {"level": 3}
    assert read_body([("name", "Go"), ("level", "2"), ("level", "4")]) == {"name": "Go", "level": "4"}
    assert read_body(42) == {}


def test_read_body_urlencoded_form():
    body = read_body(b"name=Go+lang&level=4", "application/x-www-form-urlencoded; charset=utf-8")
    assert body == {"name": "Go lang", "level": "4"}


def test_read_body_multipart_form():
    request = httpx.Request(
        "POST",
        "http://test/api/skills",
        data={"name": "Go", "level": "3"},
        files={"attachment": ("notes.txt", b"hello", "text/plain")},
    )
    body = read_body(request.read(), request.headers["content-type"])
    assert body["name"] == "Go"
    assert body["level"] == "3"
    assert body["attachment"] == "hello"


def test_update_with_broken_body_yields_empty_patch():
    op = interpret_request(_req("PATCH", "/api/skills/x", b"{oops", {"content-type": "application/json"}))
    assert op.kind == OperationKind.UPDATE_SKILL
    assert op.body == {}
