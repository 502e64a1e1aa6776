"""Public error exports for dropboxfs."""

from __future__ import annotations

from .exceptions import (
    AccessError,
    ApiError,
    AuthError,
    BadInputError,
    DropboxFSError,
    EndpointError,
    HttpErrorInfo,
    InvalidStateError,
    RateLimitError,
    invalid_close_error,
    map_http_error,
    not_found_error,
    path_error,
)

__all__ = [
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
    "path_error",
    "not_found_error",
    "invalid_close_error",
]
