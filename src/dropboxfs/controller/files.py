"""Typed wrappers over the files routes (internal use only)."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Optional

import requests

from dropboxfs.models import (
    DownloadInput,
    DownloadResult,
    GetMetadataInput,
    ListFolderContinueInput,
    ListFolderInput,
    ListFolderResult,
    Metadata,
    UploadInput,
    WriteMode,
)
from dropboxfs.util.paths import normalize_list_path

from . import endpoints
from .dispatcher import Dispatcher, HeaderFilter
from .transport import ResponseBody


class Files:
    """
    Files endpoints.

    Notes:
        - Only list_folder normalizes its path ("/" -> "").
        - upload is single-shot; it is meant for payloads under the service's
          single-request limit (about 150 MB).
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def get_metadata(self, path: str, *, include_media_info: bool = False) -> Metadata:
        body = self._dispatcher.call(
            endpoints.GET_METADATA,
            GetMetadataInput(path=path, include_media_info=include_media_info),
        )
        return Metadata.from_dict(_decode(body))

    def list_folder(
        self,
        path: str,
        *,
        recursive: bool = False,
        include_media_info: bool = False,
        include_deleted: bool = False,
    ) -> ListFolderResult:
        body = self._dispatcher.call(
            endpoints.LIST_FOLDER,
            ListFolderInput(
                path=normalize_list_path(path),
                recursive=recursive,
                include_media_info=include_media_info,
                include_deleted=include_deleted,
            ),
        )
        return ListFolderResult.from_dict(_decode(body))

    def list_folder_continue(self, cursor: str) -> ListFolderResult:
        body = self._dispatcher.call(
            endpoints.LIST_FOLDER_CONTINUE,
            ListFolderContinueInput(cursor=cursor),
        )
        return ListFolderResult.from_dict(_decode(body))

    def download(self, path: str) -> DownloadResult:
        """Start a download. The caller owns and must close `result.body`."""
        body = self._dispatcher.content(endpoints.DOWNLOAD, DownloadInput(path=path))
        return DownloadResult(body=body, length=body.length)

    def upload(
        self,
        path: str,
        body: Any,
        *,
        mode: WriteMode = WriteMode.ADD,
        autorename: bool = False,
        mute: bool = False,
        client_modified: Optional[datetime] = None,
    ) -> Metadata:
        """
        Upload `body` to `path` in a single request.

        `body` may be bytes, a file-like object or an iterable of bytes; it is
        consumed by the transport while the request is in flight.
        """
        args = UploadInput(
            path=path,
            mode=mode,
            autorename=autorename,
            mute=mute,
            client_modified=client_modified,
        )
        resp = self._dispatcher.content(endpoints.UPLOAD, args, body)
        return Metadata.from_dict(_decode(resp))

    def stream(
        self,
        path: str,
        header_filter: Optional[HeaderFilter] = None,
    ) -> requests.Response:
        """Download returning the raw HTTP response (headers + body)."""
        return self._dispatcher.stream(
            endpoints.DOWNLOAD,
            DownloadInput(path=path),
            header_filter,
        )


def _decode(body: ResponseBody) -> dict[str, Any]:
    with body:
        data = json.load(body)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object in the response body")
    return data
