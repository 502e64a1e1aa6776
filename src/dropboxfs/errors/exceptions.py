"""Exception hierarchy and HTTP error mapping for dropboxfs."""

from __future__ import annotations

import errno as _errno
import os
from dataclasses import dataclass
from typing import Any, Optional


class DropboxFSError(Exception):
    """
    Base exception for dropboxfs.

    Attributes:
        details: Optional structured information (e.g., decoded error payload).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidStateError(DropboxFSError):
    """Raised when a file handle is used in an invalid state (e.g., read after write)."""


class ApiError(DropboxFSError):
    """
    Raised when the service answers with HTTP status >= 400.

    Attributes:
        status: Standard HTTP status text (e.g. "Conflict").
        status_code: Numeric HTTP status.
        summary: Plain-text body, or `error_summary` of a JSON body.
        error: The `error` member of a JSON body, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        status: str = "",
        status_code: int = 0,
        summary: str = "",
        error: Any = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, details=details, cause=cause)
        self.status = status
        self.status_code = status_code
        self.summary = summary
        self.error = error

    def is_path_not_found(self) -> bool:
        """Return True if the service reported `path/not_found`."""
        if self.summary.startswith("path/not_found/"):
            return True
        err = self.error
        if isinstance(err, dict) and err.get(".tag") == "path":
            lookup = err.get("path")
            return isinstance(lookup, dict) and lookup.get(".tag") == "not_found"
        return False


class BadInputError(ApiError):
    """Raised when the request was malformed (HTTP 400)."""


class AuthError(ApiError):
    """Raised when the access token is invalid or expired (HTTP 401)."""


class AccessError(ApiError):
    """Raised when the token lacks access to the resource (HTTP 403)."""


class EndpointError(ApiError):
    """Raised for endpoint-specific failures such as path lookups (HTTP 409)."""


class RateLimitError(ApiError):
    """Raised when rate-limited (HTTP 429)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Decoded HTTP error response, ready for mapping to dropboxfs exceptions."""

    status_code: int
    status: str = ""
    summary: str = ""
    error: Any = None
    payload: dict[str, Any] | None = None


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> ApiError:
    """
    Map a decoded HTTP error to a dropboxfs exception.

    Policy:
        - 400 -> BadInputError
        - 401 -> AuthError
        - 403 -> AccessError
        - 409 -> EndpointError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    message = info.summary or f"HTTP {info.status_code}"
    kwargs: dict[str, Any] = {
        "status": info.status,
        "status_code": info.status_code,
        "summary": info.summary,
        "error": info.error,
        "details": info.payload,
        "cause": cause,
    }

    if info.status_code == 400:
        return BadInputError(message, **kwargs)
    if info.status_code == 401:
        return AuthError(message, **kwargs)
    if info.status_code == 403:
        return AccessError(message, **kwargs)
    if info.status_code == 409:
        return EndpointError(message, **kwargs)
    if info.status_code == 429:
        return RateLimitError(message, **kwargs)

    return ApiError(message, **kwargs)


def path_error(op: str, path: str, errnum: int) -> OSError:
    """
    Build a standard system error bound to an operation and a path.

    OSError picks the matching subclass from the errno, so ENOENT yields a
    FileNotFoundError. The operation name is kept on `.op`.
    """
    err = OSError(errnum, os.strerror(errnum), path)
    err.op = op  # type: ignore[attr-defined]
    return err


def not_found_error(path: str) -> OSError:
    """`open` failed because `path` does not exist."""
    return path_error("open", path, _errno.ENOENT)


def invalid_close_error(path: str) -> OSError:
    """`close` was called on a handle that is already closed."""
    return path_error("close", path, _errno.EINVAL)
