"""Public config exports for dropboxfs."""

from __future__ import annotations

from .config import API_URL, CONTENT_URL, Config

__all__ = ["Config", "API_URL", "CONTENT_URL"]
