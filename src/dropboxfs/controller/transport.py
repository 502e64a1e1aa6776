"""Low-level HTTP send and service error decoding (internal use only)."""

from __future__ import annotations

import io
import json
import logging
from http import HTTPStatus
from typing import Any

import requests

from dropboxfs.config import Config
from dropboxfs.errors import HttpErrorInfo, map_http_error

logger = logging.getLogger(__name__)


class ResponseBody(io.RawIOBase):
    """
    Lazy byte source over a streamed response.

    Nothing is read until the caller reads. Closing releases the connection,
    which aborts an unfinished download.
    """

    def __init__(self, response: requests.Response) -> None:
        super().__init__()
        self._response = response
        self.length = content_length(response)
        raw = response.raw
        if hasattr(raw, "decode_content"):
            raw.decode_content = True

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        view = memoryview(buffer).cast("B")
        data = self._response.raw.read(len(view)) or b""
        n = len(data)
        view[:n] = data
        return n

    def close(self) -> None:
        if not self.closed:
            try:
                self._response.close()
            finally:
                super().close()


def content_length(response: requests.Response) -> int:
    value = response.headers.get("Content-Length")
    if value is None:
        return -1
    try:
        return int(value)
    except ValueError:
        return -1


def send(config: Config, prepared: requests.PreparedRequest) -> ResponseBody:
    """
    Perform `prepared` and hand back its body unread.

    Raises:
        ApiError (or a subclass): when the status is >= 400.
    """
    response = dispatch(config, prepared)
    if response.status_code < 400:
        return ResponseBody(response)

    try:
        info = decode_error(response)
    finally:
        response.close()

    logger.debug(
        "%s %s failed: %s %s",
        prepared.method,
        prepared.url,
        info.status_code,
        info.summary,
    )
    raise map_http_error(info)


def dispatch(config: Config, prepared: requests.PreparedRequest) -> requests.Response:
    """Send without looking at the status."""
    logger.debug("%s %s", prepared.method, prepared.url)
    return config.session.send(prepared, stream=True, timeout=config.timeout)


def decode_error(response: requests.Response) -> HttpErrorInfo:
    """
    Read an error response fully and decode it.

    text/plain bodies become the summary; anything else must be JSON.
    """
    status_code = response.status_code
    status = status_text(status_code) or (response.reason or "")
    body = response.content or b""

    kind = response.headers.get("Content-Type", "")
    if "text/plain" in kind:
        return HttpErrorInfo(
            status_code=status_code,
            status=status,
            summary=body.decode("utf-8", errors="replace"),
        )

    payload = json.loads(body.decode("utf-8"))
    if not isinstance(payload, dict):
        payload = {"error": payload}
    summary = payload.get("error_summary")
    return HttpErrorInfo(
        status_code=status_code,
        status=status,
        summary=summary if isinstance(summary, str) else "",
        error=payload.get("error"),
        payload=payload,
    )


def status_text(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""
