"""Client: file-system shaped access to a Dropbox account."""

from __future__ import annotations

from typing import Any, Callable, Optional

import requests

from dropboxfs.config import Config
from dropboxfs.controller import Dispatcher, Files
from dropboxfs.controller.dispatcher import HeaderFilter
from dropboxfs.models import FileInfo
from dropboxfs.stream import File


class Client:
    """High-level client: stat, listing, and streaming file handles."""

    def __init__(
        self,
        access_token: str,
        *,
        session: Optional[Any] = None,
        timeout: Optional[Any] = None,
    ) -> None:
        kwargs: dict[str, Any] = {"timeout": timeout}
        if session is not None:
            kwargs["session"] = session
        self._init(Config(access_token, **kwargs))

    @classmethod
    def from_config(cls, config: Config) -> "Client":
        """Create client from a pre-built Config (useful for tests)."""
        obj = cls.__new__(cls)
        obj._init(config)
        return obj

    def _init(self, config: Config) -> None:
        self.config = config
        self.files = Files(Dispatcher(config))

    # ----------------------------
    # Metadata
    # ----------------------------
    def stat(self, name: str) -> FileInfo:
        """Return file or folder info for `name`."""
        return FileInfo(self.files.get_metadata(name))

    # ----------------------------
    # Listing
    # ----------------------------
    def list_n(self, name: str, n: int) -> list[FileInfo]:
        """
        Return up to `n` entries of folder `name`, or all when `n` <= 0.

        Pages are concatenated in the order the service returns them.

        Raises:
            EOFError: if `n` > 0 and the folder is empty.
        """
        limit = n if n > 0 else -1
        entries: list[FileInfo] = []
        cursor = ""

        while True:
            if not cursor:
                page = self.files.list_folder(name)
            else:
                page = self.files.list_folder_continue(cursor)
            cursor = page.cursor

            entries.extend(FileInfo(meta) for meta in page.entries)

            if limit >= 0 and len(entries) >= limit:
                entries = entries[:limit]
                break
            if not page.has_more:
                break

        if limit >= 0 and not entries:
            raise EOFError(f"no entries in {name!r}")
        return entries

    def list_all(self, name: str) -> list[FileInfo]:
        """Return all entries of folder `name`."""
        return self.list_n(name, 0)

    def list_filter(
        self,
        name: str,
        predicate: Callable[[FileInfo], bool],
    ) -> list[FileInfo]:
        """Return the entries of folder `name` for which `predicate` holds."""
        return [info for info in self.list_all(name) if predicate(info)]

    def list_folders(self, name: str) -> list[FileInfo]:
        return self.list_filter(name, lambda info: info.is_dir)

    def list_files(self, name: str) -> list[FileInfo]:
        return self.list_filter(name, lambda info: not info.is_dir)

    # ----------------------------
    # Content
    # ----------------------------
    def open(self, name: str) -> File:
        """Return an idle handle for `name`; it becomes a reader or writer on first use."""
        return File(name, self.files)

    def read(self, name: str) -> bytes:
        """Return the whole contents of `name`."""
        f = self.open(name)
        try:
            return f.read()
        finally:
            f.close()

    def get_stream(
        self,
        name: str,
        header_filter: Optional[HeaderFilter] = None,
    ) -> requests.Response:
        """Return the raw download response for `name` (e.g. for Range requests)."""
        return self.files.stream(name, header_filter)
