"""Streaming file handle over the download and upload endpoints."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Optional

from dropboxfs.errors import (
    ApiError,
    DropboxFSError,
    InvalidStateError,
    invalid_close_error,
    not_found_error,
)
from dropboxfs.models import Metadata, WriteMode

from .pipe import Pipe

if TYPE_CHECKING:
    from dropboxfs.controller import Files

logger = logging.getLogger(__name__)


class File:
    """
    Readable or writable handle for one remote path.

    Lifecycle:
        - idle after open; nothing is sent.
        - first read: the download starts and later reads pull from its body.
        - first write: an uploader starts in the background, streaming
          everything written through an internal pipe as the upload body.
        - close: finishes the upload (waiting for it and raising its error)
          or releases the download.
        - abort: like close, but fails the upload instead of committing it.
          Leaving a `with` block by an exception aborts.

    A handle is a reader or a writer, never both. One caller at a time.
    """

    def __init__(self, name: str, files: "Files", *, pipe: Optional[Pipe] = None) -> None:
        self.name = name
        self._files = files
        self._closed = False
        self._writing = False
        self._reader: Any = None
        self._pipe = pipe or Pipe()
        self._upload: Optional[Future[Metadata]] = None
        self.metadata: Optional[Metadata] = None

    def __enter__(self) -> "File":
        return self

    def __exit__(self, exc_type: object, exc: Optional[BaseException], tb: object) -> None:
        if self._closed:
            return
        if exc is not None:
            self.abort(exc)
        else:
            self.close()

    def __repr__(self) -> str:
        return f"File(name={self.name!r}, closed={self._closed}, writing={self._writing})"

    @property
    def closed(self) -> bool:
        return self._closed

    def readable(self) -> bool:
        return not self._writing

    def writable(self) -> bool:
        return self._reader is None

    # ----------------------------
    # Read
    # ----------------------------
    def read(self, size: Optional[int] = -1) -> bytes:
        self._check_open()
        if self._writing:
            raise InvalidStateError("File is open for writing", details={"path": self.name})
        if self._reader is None:
            self._download()
        return self._reader.read(-1 if size is None else size)

    def _download(self) -> None:
        try:
            out = self._files.download(self.name)
        except ApiError as exc:
            if exc.is_path_not_found():
                raise not_found_error(self.name) from None
            raise
        self._reader = out.body

    # ----------------------------
    # Write
    # ----------------------------
    def write(self, data: bytes | bytearray | memoryview) -> int:
        self._check_open()
        if self._reader is not None:
            raise InvalidStateError("File is open for reading", details={"path": self.name})
        if not self._writing:
            self._writing = True
            self._start_upload()
        return self._pipe.writer.write(data)

    def _start_upload(self) -> None:
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="dropboxfs-upload")
        try:
            self._upload = executor.submit(self._run_upload)
        finally:
            executor.shutdown(wait=False)

    def _run_upload(self) -> Metadata:
        reader = self._pipe.reader
        logger.debug("upload started: %s", self.name)
        try:
            meta = self._files.upload(
                self.name,
                reader,
                mode=WriteMode.OVERWRITE,
                mute=True,
            )
        except BaseException as exc:
            logger.debug("upload failed: %s: %s", self.name, exc)
            reader.close(exc)
            raise
        reader.close()
        logger.debug("upload finished: %s", self.name)
        return meta

    # ----------------------------
    # Close
    # ----------------------------
    def close(self) -> None:
        """
        Close the handle.

        Raises:
            OSError(EINVAL): if the handle is already closed.
            Any error the upload finished with.
        """
        if self._closed:
            raise invalid_close_error(self.name)
        self._closed = True

        if self._writing:
            self._pipe.writer.close()
            if self._upload is not None:
                self.metadata = self._upload.result()
        if self._reader is not None:
            self._reader.close()

    def abort(self, error: Optional[BaseException] = None) -> None:
        """
        Close the handle without committing an in-flight upload.

        The upload body ends with `error` instead of EOF, so the request fails
        and the remote file is left as it was. The uploader's outcome is
        discarded.

        Raises:
            OSError(EINVAL): if the handle is already closed.
        """
        if self._closed:
            raise invalid_close_error(self.name)
        self._closed = True

        if self._writing:
            if error is None:
                error = DropboxFSError("upload aborted", details={"path": self.name})
            self._pipe.writer.close(error)
            if self._upload is not None:
                outcome = self._upload.exception()
                logger.debug("upload aborted: %s: %s", self.name, outcome)
        if self._reader is not None:
            self._reader.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed file.")
