"""Data model for Dropbox metadata records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from dropboxfs.util.time import parse_optional_timestamp

TAG_FILE: str = "file"
TAG_FOLDER: str = "folder"
TAG_DELETED: str = "deleted"


@dataclass(slots=True, frozen=True)
class Dimensions:
    """Dimensions of a photo or video."""

    width: int = 0
    height: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Dimensions":
        return cls(width=int(data.get("width", 0)), height=int(data.get("height", 0)))


@dataclass(slots=True, frozen=True)
class GPSCoordinates:
    """GPS coordinates of a photo or video."""

    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GPSCoordinates":
        return cls(
            latitude=float(data.get("latitude", 0.0)),
            longitude=float(data.get("longitude", 0.0)),
        )


@dataclass(slots=True, frozen=True)
class MediaMetadata:
    """
    Photo or video metadata.

    `tag` is "photo" or "video"; `duration` (milliseconds) is only set for video.
    """

    tag: str
    dimensions: Optional[Dimensions] = None
    location: Optional[GPSCoordinates] = None
    time_taken: Optional[datetime] = None
    duration: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MediaMetadata":
        dims = data.get("dimensions")
        loc = data.get("location")
        duration = data.get("duration")
        return cls(
            tag=str(data.get(".tag", "")),
            dimensions=Dimensions.from_dict(dims) if isinstance(dims, dict) else None,
            location=GPSCoordinates.from_dict(loc) if isinstance(loc, dict) else None,
            time_taken=parse_optional_timestamp(data.get("time_taken")),
            duration=duration if isinstance(duration, int) else None,
        )


@dataclass(slots=True, frozen=True)
class MediaInfo:
    """Additional information for a photo or video file."""

    pending: bool = False
    metadata: Optional[MediaMetadata] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MediaInfo":
        # On the wire this is a union: {".tag": "pending"} or {".tag": "metadata", "metadata": {...}}.
        meta = data.get("metadata")
        return cls(
            pending=data.get(".tag") == "pending" or bool(data.get("pending", False)),
            metadata=MediaMetadata.from_dict(meta) if isinstance(meta, dict) else None,
        )


@dataclass(slots=True, frozen=True)
class FileSharingInfo:
    """Sharing information for a file inside a shared folder."""

    read_only: bool = False
    parent_shared_folder_id: str = ""
    modified_by: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileSharingInfo":
        modified_by = data.get("modified_by")
        return cls(
            read_only=bool(data.get("read_only", False)),
            parent_shared_folder_id=str(data.get("parent_shared_folder_id", "")),
            modified_by=modified_by if isinstance(modified_by, str) else None,
        )


@dataclass(slots=True, frozen=True)
class Metadata:
    """
    One file, folder or deleted entry as returned by the service.

    Notes:
        - `tag` mirrors the wire field `.tag`.
        - Folder and deleted entries carry no size, revision or timestamps.
        - Timestamps are tz-aware UTC datetimes.
    """

    tag: str
    name: str = ""
    path_lower: str = ""
    path_display: str = ""
    id: str = ""
    rev: str = ""
    size: int = 0
    client_modified: Optional[datetime] = None
    server_modified: Optional[datetime] = None
    content_hash: Optional[str] = None
    media_info: Optional[MediaInfo] = None
    sharing_info: Optional[FileSharingInfo] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Metadata":
        if not isinstance(data, dict):
            raise TypeError("metadata record must be a JSON object")

        size = data.get("size")
        media = data.get("media_info")
        sharing = data.get("sharing_info")
        content_hash = data.get("content_hash")

        return cls(
            tag=str(data.get(".tag", "")),
            name=_str(data.get("name")),
            path_lower=_str(data.get("path_lower")),
            path_display=_str(data.get("path_display")),
            id=_str(data.get("id")),
            rev=_str(data.get("rev")),
            size=size if isinstance(size, int) else 0,
            client_modified=parse_optional_timestamp(data.get("client_modified")),
            server_modified=parse_optional_timestamp(data.get("server_modified")),
            content_hash=content_hash if isinstance(content_hash, str) else None,
            media_info=MediaInfo.from_dict(media) if isinstance(media, dict) else None,
            sharing_info=FileSharingInfo.from_dict(sharing)
            if isinstance(sharing, dict)
            else None,
        )

    @property
    def is_file(self) -> bool:
        return self.tag == TAG_FILE

    @property
    def is_folder(self) -> bool:
        return self.tag == TAG_FOLDER

    @property
    def is_deleted(self) -> bool:
        return self.tag == TAG_DELETED


@dataclass(slots=True, frozen=True)
class ListFolderResult:
    """One page of a folder listing. `cursor` is opaque and passed back verbatim."""

    cursor: str
    has_more: bool
    entries: list[Metadata] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListFolderResult":
        entries = data.get("entries") or []
        return cls(
            cursor=_str(data.get("cursor")),
            has_more=bool(data.get("has_more", False)),
            entries=[Metadata.from_dict(e) for e in entries],
        )


def _str(value: object) -> str:
    return value if isinstance(value, str) else ""
