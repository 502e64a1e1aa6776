"""Public model exports for dropboxfs."""

from __future__ import annotations

from .file_info import FileInfo
from .inputs import (
    DownloadInput,
    DownloadResult,
    GetMetadataInput,
    ListFolderContinueInput,
    ListFolderInput,
    UploadInput,
    WriteMode,
)
from .metadata import (
    TAG_DELETED,
    TAG_FILE,
    TAG_FOLDER,
    Dimensions,
    FileSharingInfo,
    GPSCoordinates,
    ListFolderResult,
    MediaInfo,
    MediaMetadata,
    Metadata,
)

__all__ = [
    "FileInfo",
    "Metadata",
    "MediaInfo",
    "MediaMetadata",
    "Dimensions",
    "GPSCoordinates",
    "FileSharingInfo",
    "ListFolderResult",
    "TAG_FILE",
    "TAG_FOLDER",
    "TAG_DELETED",
    "WriteMode",
    "GetMetadataInput",
    "ListFolderInput",
    "ListFolderContinueInput",
    "DownloadInput",
    "UploadInput",
    "DownloadResult",
]
