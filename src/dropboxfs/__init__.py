"""dropboxfs public API."""

from __future__ import annotations

import logging

from dropboxfs.client import Client
from dropboxfs.config import API_URL, CONTENT_URL, Config
from dropboxfs.errors import (
    AccessError,
    ApiError,
    AuthError,
    BadInputError,
    DropboxFSError,
    EndpointError,
    HttpErrorInfo,
    InvalidStateError,
    RateLimitError,
    map_http_error,
)
from dropboxfs.models import (
    FileInfo,
    FileSharingInfo,
    ListFolderResult,
    MediaInfo,
    Metadata,
    WriteMode,
)
from dropboxfs.stream import File, Pipe

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # High-level
    "Client",
    "File",
    "Pipe",
    # Config
    "Config",
    "API_URL",
    "CONTENT_URL",
    # Models
    "FileInfo",
    "Metadata",
    "MediaInfo",
    "FileSharingInfo",
    "ListFolderResult",
    "WriteMode",
    # Errors
    "DropboxFSError",
    "InvalidStateError",
    "ApiError",
    "BadInputError",
    "AuthError",
    "AccessError",
    "EndpointError",
    "RateLimitError",
    "HttpErrorInfo",
    "map_http_error",
]
