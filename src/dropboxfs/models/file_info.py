"""Read-only file-info view over a metadata record."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .metadata import TAG_FOLDER, Metadata


@dataclass(slots=True, frozen=True)
class FileInfo:
    """
    File-system shaped projection of a Metadata record.

    Notes:
        - Only the "folder" tag is a directory; "file" and "deleted" are not.
        - `mode` carries the directory bit and nothing else.
        - `sys` is always None.
    """

    metadata: Metadata

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def size(self) -> int:
        return int(self.metadata.size)

    @property
    def is_dir(self) -> bool:
        return self.metadata.tag == TAG_FOLDER

    @property
    def mod_time(self) -> Optional[datetime]:
        return self.metadata.server_modified

    @property
    def mode(self) -> int:
        return stat.S_IFDIR if self.is_dir else 0

    @property
    def sys(self) -> None:
        return None
