"""
Turns an outgoing request into a normalized mock API operation.

Only paths under the API prefix are recognized; for anything else
``interpret_request`` returns None and the caller lets real transport proceed.
"""

from __future__ import annotations

import json
import re
from email import policy
from email.parser import BytesParser
from functools import lru_cache
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl

from skillboard.integrations.contracts.interfaces import Operation, OperationKind, RequestDescriptor

FORM_URLENCODED = "application/x-www-form-urlencoded"
MULTIPART_FORM = "multipart/form-data"


def _as_text(body: Union[bytes, bytearray, str]) -> str:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    return body


def _as_bytes(body: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(body, str):
        return body.encode("utf-8")
    return bytes(body)


def _flatten_pairs(pairs: Iterable[Tuple[Any, Any]]) -> Dict[str, Any]:
    # Repeated keys: last value wins
    out: Dict[str, Any] = {}
    for key, value in pairs:
        out[str(key)] = value
    return out


def _parse_json(text: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(text)
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _parse_multipart(body: bytes, content_type: str) -> Dict[str, Any]:
    header = f"Content-Type: {content_type}\r\nMIME-Version: 1.0\r\n\r\n".encode("utf-8")
    message = BytesParser(policy=policy.HTTP).parsebytes(header + body)
    if not message.is_multipart():
        return {}
    pairs = []
    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        if not name:
            continue
        payload = part.get_payload(decode=True) or b""
        charset = part.get_content_charset() or "utf-8"
        pairs.append((name, payload.decode(charset, errors="replace")))
    return _flatten_pairs(pairs)


def read_body(body: Any, content_type: str = "") -> Dict[str, Any]:
    """Decode a request body into a flat record, defaulting to {} on failure."""
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return dict(body)
    if isinstance(body, (bytes, bytearray, str)):
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type == FORM_URLENCODED:
            return _flatten_pairs(parse_qsl(_as_text(body), keep_blank_values=True))
        if media_type == MULTIPART_FORM:
            return _parse_multipart(_as_bytes(body), content_type)
        return _parse_json(_as_text(body))
    if isinstance(body, (list, tuple)):
        try:
            return _flatten_pairs(body)
        except (TypeError, ValueError):
            return {}
    return {}


@lru_cache(maxsize=16)
def _routes(api_prefix: str):
    prefix = re.escape(api_prefix)
    return (
        re.compile(rf"^{prefix}/skills$"),
        re.compile(rf"^{prefix}/skills/(.+)$"),
        re.compile(rf"^{prefix}/badges$"),
    )


def normalize_prefix(api_prefix: str) -> str:
    prefix = "/" + api_prefix.strip("/")
    return "" if prefix == "/" else prefix


def interpret_request(request: RequestDescriptor, api_prefix: str = "/api") -> Optional[Operation]:
    """Map a request to an Operation, or None when it is outside the API prefix."""
    prefix = normalize_prefix(api_prefix)
    path = request.path
    if not path.startswith(prefix + "/"):
        return None

    method = (request.method or "get").lower()
    collection_route, item_route, badges_route = _routes(prefix)

    if collection_route.match(path):
        if method == "get":
            return Operation(OperationKind.LIST_SKILLS, request)
        if method == "post":
            return Operation(OperationKind.CREATE_SKILL, request, body=read_body(request.body, request.content_type))

    item_match = item_route.match(path)
    if item_match:
        skill_id = item_match.group(1)
        if method == "patch":
            return Operation(
                OperationKind.UPDATE_SKILL,
                request,
                skill_id=skill_id,
                body=read_body(request.body, request.content_type),
            )
        if method == "delete":
            return Operation(OperationKind.DELETE_SKILL, request, skill_id=skill_id)

    if badges_route.match(path) and method == "get":
        return Operation(OperationKind.LIST_BADGES, request)

    return Operation(OperationKind.NOT_FOUND, request)
