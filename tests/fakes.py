"""Controllable fake transport for dropboxfs tests."""

from __future__ import annotations

import io
import json
import threading
from collections import deque
from http import HTTPStatus
from typing import Any, Callable, Optional, Union

import requests
from requests.structures import CaseInsensitiveDict

Reply = Union["FakeReply", BaseException, Callable[[requests.PreparedRequest], Any]]


class FakeReply:
    def __init__(
        self,
        status: int = 200,
        body: bytes = b"",
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.status = status
        self.body = body
        self.headers = headers or {}


def json_reply(payload: Any, status: int = 200) -> FakeReply:
    return FakeReply(
        status=status,
        body=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


def text_reply(text: str, status: int) -> FakeReply:
    return FakeReply(
        status=status,
        body=text.encode("utf-8"),
        headers={"Content-Type": "text/plain; charset=utf-8"},
    )


def make_response(prepared: requests.PreparedRequest, reply: FakeReply) -> requests.Response:
    resp = requests.Response()
    resp.status_code = reply.status
    resp.headers = CaseInsensitiveDict(reply.headers)
    resp.headers.setdefault("Content-Length", str(len(reply.body)))
    resp.raw = io.BytesIO(reply.body)
    try:
        resp.reason = HTTPStatus(reply.status).phrase
    except ValueError:
        resp.reason = ""
    resp.url = prepared.url
    resp.request = prepared
    return resp


def consume_body(body: Any) -> bytes:
    """Read a request body the way a transport would."""
    if body is None:
        return b""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    if hasattr(body, "read"):
        return body.read()
    return b"".join(body)


class FakeSession:
    """
    Records prepared requests and answers them from a queue of replies.

    A reply may be a FakeReply, an exception to raise, or a callable taking
    the prepared request and returning either of those. Request bodies are
    consumed before a FakeReply is answered, like a real upload.
    """

    def __init__(self, *replies: Reply) -> None:
        self._lock = threading.Lock()
        self._replies: deque[Reply] = deque(replies)
        self.requests: list[requests.PreparedRequest] = []
        self.bodies: list[bytes] = []
        self.responses: list[requests.Response] = []
        self.send_kwargs: list[dict[str, Any]] = []

    def add(self, reply: Reply) -> None:
        with self._lock:
            self._replies.append(reply)

    def send(self, prepared: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        with self._lock:
            reply = self._replies.popleft()
            self.requests.append(prepared)
            self.send_kwargs.append(kwargs)

        if callable(reply) and not isinstance(reply, BaseException):
            reply = reply(prepared)
        if isinstance(reply, BaseException):
            raise reply

        body = consume_body(prepared.body)
        resp = make_response(prepared, reply)
        with self._lock:
            self.bodies.append(body)
            self.responses.append(resp)
        return resp


def file_entry(name: str, *, size: int = 0, folder: str = "") -> dict[str, Any]:
    path = f"{folder}/{name}"
    return {
        ".tag": "file",
        "name": name,
        "path_lower": path.lower(),
        "path_display": path,
        "id": f"id:{name}",
        "rev": "015f",
        "size": size,
        "client_modified": "2025-01-01T00:00:00Z",
        "server_modified": "2025-01-02T03:04:05Z",
        "content_hash": "abc",
    }


def folder_entry(name: str, *, folder: str = "") -> dict[str, Any]:
    path = f"{folder}/{name}"
    return {
        ".tag": "folder",
        "name": name,
        "path_lower": path.lower(),
        "path_display": path,
        "id": f"id:{name}",
    }


def list_page(entries: list[dict[str, Any]], cursor: str, has_more: bool) -> FakeReply:
    return json_reply({"entries": entries, "cursor": cursor, "has_more": has_more})


NOT_FOUND_PAYLOAD: dict[str, Any] = {
    "error_summary": "path/not_found/..",
    "error": {".tag": "path", "path": {".tag": "not_found"}},
}
