from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING

from ._exceptions import (
    VFSAccessDeniedError,
    VFSArgumentNullError,
    VFSDirectoryNotFoundError,
    VFSError,
    VFSFileExistsError,
    VFSFileNotFoundError,
)
from ._file import MemoryBuffer
from ._flags import FileAccess, FileAttributes, FileMode, FileOptions, TimeAdjustments
from ._record import FileRecord

if TYPE_CHECKING:
    from ._path import PathResolver
    from ._table import VirtualFileTable

logger = logging.getLogger(__name__)


def open_time_adjustments(mode: FileMode, access: FileAccess) -> TimeAdjustments:
    """Timestamps stamped when an existing file is opened with *mode*/*access*."""
    if mode in (FileMode.APPEND, FileMode.CREATE_NEW):
        if FileAccess.READ in access:
            return TimeAdjustments.LAST_ACCESS_TIME
        return TimeAdjustments.NONE
    if mode in (FileMode.CREATE, FileMode.TRUNCATE):
        if FileAccess.WRITE in access:
            return TimeAdjustments.LAST_ACCESS_TIME | TimeAdjustments.LAST_WRITE_TIME
        return TimeAdjustments.LAST_ACCESS_TIME
    return TimeAdjustments.NONE


class FileHandle:
    """Buffered stream over one record of a :class:`VirtualFileTable`.

    The handle works on a private copy of the content. Edits reach the
    table only on :meth:`flush` or :meth:`close`, which overwrite the
    record currently stored under the handle's path with the whole buffer.

    ``path`` must be canonical; use :func:`open_handle` to resolve first.
    """

    def __init__(
        self,
        table: VirtualFileTable,
        resolver: PathResolver,
        path: str,
        mode: FileMode = FileMode.OPEN,
        access: FileAccess = FileAccess.READ_WRITE,
        options: FileOptions = FileOptions.NONE,
    ) -> None:
        # Stays closed until construction succeeds so __del__ has nothing to do.
        self._is_closed: bool = True
        if table is None:
            raise VFSArgumentNullError("table")
        if path is None:
            raise VFSArgumentNullError("path")
        self._table = table
        self._path = path
        self._mode = FileMode(mode)
        self._access = FileAccess(access)
        self._options = FileOptions(options)
        self._buffer = MemoryBuffer()
        self._cursor: int = 0
        self._dirty: bool = False

        with table.lock:
            if table.exists(path):
                if self._mode is FileMode.CREATE_NEW:
                    raise VFSFileExistsError(path)
                record = table.get(path)
                if record.is_directory:
                    raise VFSAccessDeniedError(path, "Cannot open a directory")
                record.check_access(path, self._access)
                table.adjust_times(record, open_time_adjustments(self._mode, self._access))
                keep_contents = bool(record.content) and self._mode not in (
                    FileMode.TRUNCATE,
                    FileMode.CREATE,
                )
                if keep_contents:
                    self._buffer = MemoryBuffer(record.content)
                    if self._mode is FileMode.APPEND:
                        self._cursor = self._buffer.get_size()
            else:
                parent = resolver.get_directory_name(path)
                if parent is not None and not table.is_directory(parent):
                    raise VFSDirectoryNotFoundError(path)
                if self._mode in (FileMode.OPEN, FileMode.TRUNCATE):
                    raise VFSFileNotFoundError(path)
                record = FileRecord()
                table.adjust_times(
                    record, TimeAdjustments.CREATION_TIME | TimeAdjustments.LAST_ACCESS_TIME
                )
                table.add(path, record)
        self._record = record
        self._is_closed = False

    # -- properties --

    @property
    def path(self) -> str:
        return self._path

    name = path

    @property
    def mode(self) -> FileMode:
        return self._mode

    @property
    def access(self) -> FileAccess:
        return self._access

    @property
    def options(self) -> FileOptions:
        return self._options

    @property
    def closed(self) -> bool:
        return self._is_closed

    @property
    def length(self) -> int:
        self._assert_open()
        return self._buffer.get_size()

    # -- checks --

    def _assert_open(self) -> None:
        if self._is_closed:
            raise ValueError("I/O operation on closed file.")

    def _assert_readable(self) -> None:
        if FileAccess.READ not in self._access:
            raise VFSAccessDeniedError(self._path, "Handle was not opened for reading")

    def _assert_writable(self) -> None:
        if FileAccess.WRITE not in self._access:
            raise VFSAccessDeniedError(self._path, "Handle was not opened for writing")
        self._record.check_access(self._path, self._access)

    # -- hooks --

    def _on_read(self) -> None:
        self._table.adjust_times(self._record, TimeAdjustments.LAST_ACCESS_TIME)

    def _on_write(self) -> None:
        self._table.adjust_times(
            self._record,
            TimeAdjustments.LAST_ACCESS_TIME | TimeAdjustments.LAST_WRITE_TIME,
        )
        self._dirty = True

    def _on_close(self) -> None:
        table = self._table
        with table.lock:
            if FileOptions.DELETE_ON_CLOSE in self._options and table.exists(self._path):
                table.remove(self._path)
                logger.debug("deleted on close: %s", self._path)
            if FileOptions.ENCRYPTED in self._options and table.exists(self._path):
                record = table.get(self._path)
                record.attributes |= FileAttributes.ENCRYPTED

    # -- I/O --

    def _read_raw(self, size: int) -> bytes:
        current_size = self._buffer.get_size()
        if self._cursor >= current_size:
            return b""
        if size < 0:
            size = current_size - self._cursor
        else:
            size = min(size, current_size - self._cursor)
        data = self._buffer.read_at(self._cursor, size)
        self._cursor += size
        return data

    def read(self, size: int = -1) -> bytes:
        self._assert_open()
        self._assert_readable()
        self._on_read()
        return self._read_raw(size)

    def readinto(self, buffer: bytearray | memoryview) -> int:
        data = self.read(len(buffer))
        n = len(data)
        buffer[:n] = data
        return n

    def write(self, data: bytes) -> int:
        self._assert_open()
        self._assert_writable()
        self._on_write()
        n = self._buffer.write_at(self._cursor, bytes(data))
        self._cursor += n
        return n

    def seek(self, offset: int, whence: int = 0) -> int:
        self._assert_open()
        if whence == 0:
            new_pos = offset
        elif whence == 1:
            new_pos = self._cursor + offset
        elif whence == 2:
            new_pos = self._buffer.get_size() + offset
        else:
            raise ValueError(f"Invalid whence value: {whence}. Must be 0, 1, or 2.")
        if new_pos < 0:
            raise ValueError(f"Resulting cursor position {new_pos} is negative.")
        self._cursor = new_pos
        return self._cursor

    def tell(self) -> int:
        self._assert_open()
        return self._cursor

    def truncate(self, size: int | None = None) -> int:
        self._assert_open()
        self._assert_writable()
        target = self._cursor if size is None else size
        if target < 0:
            raise ValueError("truncate size must be >= 0")
        self._on_write()
        self._buffer.truncate(target)
        if self._cursor > target:
            self._cursor = target
        return target

    def _flush(self) -> None:
        table = self._table
        with table.lock:
            if not table.exists(self._path):
                return
            record = table.get(self._path)
            if self._dirty and record.is_read_only:
                raise VFSAccessDeniedError(self._path)
            data = self._buffer.getvalue()
            record.content = data
        logger.debug("flushed %d bytes to %s", len(data), self._path)

    def flush(self) -> None:
        self._assert_open()
        self._flush()

    def readable(self) -> bool:
        self._assert_open()
        return FileAccess.READ in self._access

    def writable(self) -> bool:
        self._assert_open()
        return FileAccess.WRITE in self._access

    def seekable(self) -> bool:
        self._assert_open()
        return True

    def close(self) -> None:
        if self._is_closed:
            return
        self._is_closed = True
        try:
            self._flush()
        finally:
            self._on_close()

    def __enter__(self) -> FileHandle:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __del__(self) -> None:
        if not self._is_closed:
            warnings.warn(
                "VFS FileHandle was not closed properly. "
                "Always use 'with vfs.open(...) as f:' to ensure cleanup.",
                ResourceWarning,
                stacklevel=1,
            )
            try:
                self.close()
            except VFSError:
                logger.debug("close from __del__ failed for %s", self._path, exc_info=True)

    def __repr__(self) -> str:
        state = "closed" if self._is_closed else "open"
        return f"<FileHandle {self._path!r} mode={self._mode.name} {state}>"


def open_handle(
    table: VirtualFileTable,
    resolver: PathResolver,
    path: str,
    mode: FileMode = FileMode.OPEN,
    access: FileAccess = FileAccess.READ_WRITE,
    options: FileOptions = FileOptions.NONE,
    current_directory: str | None = None,
) -> FileHandle:
    """Canonicalize *path* and open a :class:`FileHandle` on it.

    *current_directory* defaults to the style root, ``C:\\`` or ``/``.
    """
    if current_directory is None:
        current_directory = resolver.default_root
    canonical = resolver.resolve(path, current_directory)
    return FileHandle(table, resolver, canonical, mode, access, options)
