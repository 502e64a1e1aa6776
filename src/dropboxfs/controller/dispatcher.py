"""Request dispatcher for control and content endpoints (internal use only)."""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

import requests
from requests.structures import CaseInsensitiveDict

from dropboxfs.config import Config

from .endpoints import API_ARG_HEADER, JSON_CONTENT_TYPE, OCTET_STREAM_CONTENT_TYPE
from .transport import ResponseBody, dispatch, send

HeaderFilter = Callable[[Any], None]


class Dispatcher:
    """
    Builds and sends POST requests in the two calling styles of the API.

    Notes:
        - Control calls carry the request record as a JSON body.
        - Content calls carry it in the Dropbox-API-Arg header and move file
          bytes in the body.
        - Every request is authorized with the configured bearer token.
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    def call(self, path: str, record: Any) -> ResponseBody:
        """Control call. The caller decodes and closes the returned body."""
        headers = self._headers()
        headers["Content-Type"] = JSON_CONTENT_TYPE
        prepared = self._prepare(
            f"{self._config.api_url}{path}",
            headers,
            data=encode_record(record).encode("utf-8"),
        )
        return send(self._config, prepared)

    def content(self, path: str, record: Any, body: Any = None) -> ResponseBody:
        """
        Content call.

        Args:
            body: Upload payload (bytes, file-like, or iterable of bytes).
                None for downloads.

        Returns:
            The response body; its `length` is the advertised content length.
        """
        headers = self._headers()
        headers[API_ARG_HEADER] = encode_record(record)
        if body is not None:
            headers["Content-Type"] = OCTET_STREAM_CONTENT_TYPE
        prepared = self._prepare(f"{self._config.content_url}{path}", headers, data=body)
        return send(self._config, prepared)

    def stream(
        self,
        path: str,
        record: Any,
        header_filter: Optional[HeaderFilter] = None,
    ) -> requests.Response:
        """
        Content call returning the raw response, status unchecked.

        `header_filter` receives the request headers before dispatch (e.g. to
        add Range or If-None-Match).
        """
        headers = CaseInsensitiveDict(self._headers())
        headers[API_ARG_HEADER] = encode_record(record)
        if header_filter is not None:
            header_filter(headers)
        prepared = self._prepare(f"{self._config.content_url}{path}", headers)
        return dispatch(self._config, prepared)

    # ----------------------------
    # Internals
    # ----------------------------
    def _headers(self) -> dict[str, Any]:
        headers: dict[str, Any] = {}
        self._config.authorize(headers)
        return headers

    def _prepare(
        self,
        url: str,
        headers: Any,
        *,
        data: Any = None,
    ) -> requests.PreparedRequest:
        return requests.Request("POST", url, headers=dict(headers), data=data).prepare()


def encode_record(record: Any) -> str:
    """
    Encode a request record as single-line JSON.

    Records with `to_dict()` are converted first. Non-ASCII characters are
    escaped so the result is safe in an HTTP header.
    """
    if hasattr(record, "to_dict"):
        record = record.to_dict()
    return json.dumps(record, separators=(",", ":"), ensure_ascii=True)
