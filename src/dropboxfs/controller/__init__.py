"""Internal controller exports for dropboxfs."""

from __future__ import annotations

from .dispatcher import Dispatcher
from .files import Files
from .transport import ResponseBody

__all__ = ["Dispatcher", "Files", "ResponseBody"]
