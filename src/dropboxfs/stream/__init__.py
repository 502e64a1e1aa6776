"""Public stream exports for dropboxfs."""

from __future__ import annotations

from .file import File
from .pipe import Pipe, PipeReader, PipeWriter

__all__ = ["File", "Pipe", "PipeReader", "PipeWriter"]
