"""Client configuration for dropboxfs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import requests
from google.oauth2.credentials import Credentials

API_URL: str = "https://api.dropboxapi.com/2"
CONTENT_URL: str = "https://content.dropboxapi.com/2"


@dataclass(frozen=True)
class Config:
    """
    Immutable client configuration.

    Fields:
        access_token: Bearer token (acquiring/refreshing it is the caller's job).
        api_url: Base URL for JSON control endpoints.
        content_url: Base URL for content (upload/download) endpoints.
        session: HTTP transport. Anything with a `requests.Session`-compatible
            `send(prepared, **kwargs)`; it must be safe for concurrent use.
        timeout: Passed through to `session.send`. None means no timeout.
    """

    access_token: str
    api_url: str = API_URL
    content_url: str = CONTENT_URL
    session: Any = field(default_factory=requests.Session, repr=False)
    timeout: Optional[Any] = None
    credentials: Credentials = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.access_token, str) or not self.access_token.strip():
            raise ValueError("Config.access_token must be a non-empty string")

        for key in ("api_url", "content_url"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Config.{key} must be a non-empty string")
            object.__setattr__(self, key, value.rstrip("/"))

        if not callable(getattr(self.session, "send", None)):
            raise TypeError("Config.session must provide send(prepared, **kwargs)")

        object.__setattr__(self, "credentials", Credentials(token=self.access_token))

    def authorize(self, headers: dict[str, Any]) -> None:
        """Add the bearer Authorization header to `headers`."""
        self.credentials.apply(headers)
