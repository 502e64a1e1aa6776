"""Request records and results for the files endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from dropboxfs.util.time import to_service_time


class WriteMode(str, Enum):
    """What to do when the upload target already exists."""

    ADD = "add"
    OVERWRITE = "overwrite"


@dataclass(slots=True, frozen=True)
class GetMetadataInput:
    path: str
    include_media_info: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "include_media_info": self.include_media_info}


@dataclass(slots=True, frozen=True)
class ListFolderInput:
    path: str
    recursive: bool = False
    include_media_info: bool = False
    include_deleted: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "recursive": self.recursive,
            "include_media_info": self.include_media_info,
            "include_deleted": self.include_deleted,
        }


@dataclass(slots=True, frozen=True)
class ListFolderContinueInput:
    cursor: str

    def to_dict(self) -> dict[str, Any]:
        return {"cursor": self.cursor}


@dataclass(slots=True, frozen=True)
class DownloadInput:
    path: str

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path}


@dataclass(slots=True, frozen=True)
class UploadInput:
    """
    Upload arguments (sent in the Dropbox-API-Arg header).

    `client_modified` is omitted from the wire record when None.
    """

    path: str
    mode: WriteMode = WriteMode.ADD
    autorename: bool = False
    mute: bool = False
    client_modified: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "path": self.path,
            "mode": WriteMode(self.mode).value,
            "autorename": self.autorename,
            "mute": self.mute,
        }
        if self.client_modified is not None:
            record["client_modified"] = to_service_time(self.client_modified)
        return record


@dataclass(slots=True, frozen=True)
class DownloadResult:
    """Download body and its advertised length (-1 when unknown). The caller closes `body`."""

    body: Any
    length: int
