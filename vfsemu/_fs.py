from __future__ import annotations

import logging
import secrets
from collections.abc import Mapping

from ._config import VFSConfig
from ._exceptions import (
    VFSAccessDeniedError,
    VFSArgumentNullError,
    VFSDirectoryNotFoundError,
    VFSFileExistsError,
)
from ._flags import FileAccess, FileAttributes, FileMode, FileOptions, TimeAdjustments
from ._guard import DeletionGuard
from ._handle import FileHandle, open_handle
from ._path import PathResolver
from ._record import FileRecord
from ._table import VirtualFileTable
from ._text import TextHandle
from ._typing import VFSStatResult

logger = logging.getLogger(__name__)

# Python-style binary mode strings accepted by ``open()``.
_MODE_STRINGS: dict[str, tuple[FileMode, FileAccess]] = {
    "rb": (FileMode.OPEN, FileAccess.READ),
    "r+b": (FileMode.OPEN, FileAccess.READ_WRITE),
    "wb": (FileMode.CREATE, FileAccess.WRITE),
    "w+b": (FileMode.CREATE, FileAccess.READ_WRITE),
    "ab": (FileMode.APPEND, FileAccess.WRITE),
    "xb": (FileMode.CREATE_NEW, FileAccess.WRITE),
}


class VirtualFileSystem:
    """An in-memory file system built from a resolver, a table and a guard.

    Parameters
    ----------
    files:
        Initial content: path -> bytes, or path -> None for a directory.
        Parent directories are created as needed.
    config:
        Path style, current and temp directories, case sensitivity and
        clock. Defaults to ``VFSConfig()`` (POSIX style rooted at ``/``).
    """

    def __init__(
        self,
        files: Mapping[str, bytes | None] | None = None,
        config: VFSConfig | None = None,
    ) -> None:
        self._config = config if config is not None else VFSConfig()
        self._resolver = PathResolver.for_style(self._config.path_style)
        self._table = VirtualFileTable(
            sep=self._resolver.sep,
            case_sensitive=bool(self._config.case_sensitive),
            clock=self._config.clock,
        )
        self._guard = DeletionGuard(self._table, self._resolver)
        cwd = self._config.current_directory
        self._current_directory = self._resolver.resolve(cwd, cwd)
        self.create_directory(self._current_directory)
        self.create_directory(self._config.temp_directory)
        if files:
            for path, data in files.items():
                if data is None:
                    self.create_directory(path)
                else:
                    self.add_file(path, data)

    def __repr__(self) -> str:
        return (
            f"VirtualFileSystem(style={self._config.path_style!r}, "
            f"cwd={self._current_directory!r}, entries={len(self._table)})"
        )

    # -- collaborators --

    @property
    def config(self) -> VFSConfig:
        return self._config

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    @property
    def table(self) -> VirtualFileTable:
        return self._table

    @property
    def current_directory(self) -> str:
        return self._current_directory

    @current_directory.setter
    def current_directory(self, path: str) -> None:
        canonical = self.resolve(path)
        if not self._table.is_directory(canonical):
            raise VFSDirectoryNotFoundError(canonical)
        self._current_directory = canonical

    def resolve(self, path: str) -> str:
        return self._resolver.resolve(path, self._current_directory)

    # -- handles --

    def open(
        self,
        path: str,
        mode: FileMode | str = FileMode.OPEN,
        access: FileAccess | None = None,
        options: FileOptions = FileOptions.NONE,
    ) -> FileHandle:
        """Open a handle on *path*.

        *mode* is a :class:`FileMode` or one of the binary mode strings
        ``rb``, ``r+b``, ``wb``, ``w+b``, ``ab``, ``xb``. When *access* is
        omitted it follows the mode string, or is WRITE for APPEND and
        READ_WRITE otherwise.
        """
        if isinstance(mode, str):
            if mode not in _MODE_STRINGS:
                raise ValueError(
                    f"Invalid mode '{mode}'. Supported modes: {sorted(_MODE_STRINGS)}"
                )
            mode, default_access = _MODE_STRINGS[mode]
        elif mode is FileMode.APPEND:
            default_access = FileAccess.WRITE
        else:
            default_access = FileAccess.READ_WRITE
        if access is None:
            access = default_access
        return open_handle(
            self._table,
            self._resolver,
            path,
            mode,
            access,
            options,
            current_directory=self._current_directory,
        )

    # -- directories and files --

    def _ensure_directory(self, canonical: str) -> None:
        table = self._table
        if table.exists(canonical):
            if not table.is_directory(canonical):
                raise VFSFileExistsError(canonical)
            return
        record = FileRecord.directory()
        table.adjust_times(record, TimeAdjustments.ALL)
        table.add(canonical, record)
        logger.debug("created directory %s", canonical)

    def create_directory(self, path: str) -> str:
        """Create *path* and any missing ancestors; returns the canonical path."""
        canonical = self.resolve(path)
        with self._table.lock:
            for ancestor in self._resolver.ancestors(canonical):
                self._ensure_directory(ancestor)
            self._ensure_directory(canonical)
        return canonical

    def add_directory(self, path: str) -> str:
        return self.create_directory(path)

    def add_file(
        self,
        path: str,
        data: bytes = b"",
        attributes: FileAttributes = FileAttributes.ARCHIVE,
    ) -> str:
        """Store *data* at *path*, creating parent directories.

        Replaces an existing file without opening a handle; returns the
        canonical path.
        """
        canonical = self.resolve(path)
        with self._table.lock:
            for ancestor in self._resolver.ancestors(canonical):
                self._ensure_directory(ancestor)
            if self._table.is_directory(canonical):
                raise VFSAccessDeniedError(canonical, "Is a directory")
            record = FileRecord(data, attributes)
            self._table.adjust_times(record, TimeAdjustments.ALL)
            self._table.add(canonical, record, overwrite=True)
        return canonical

    def exists(self, path: str) -> bool:
        if path is None:
            return False
        try:
            canonical = self.resolve(path)
        except ValueError:
            return False
        return self._table.exists(canonical)

    def is_file(self, path: str) -> bool:
        if path is None:
            return False
        try:
            canonical = self.resolve(path)
        except ValueError:
            return False
        return self._table.is_file(canonical)

    def is_dir(self, path: str) -> bool:
        if path is None:
            return False
        try:
            canonical = self.resolve(path)
        except ValueError:
            return False
        return self._table.is_directory(canonical)

    # -- whole-file helpers --

    def read_bytes(self, path: str) -> bytes:
        with self.open(path, FileMode.OPEN, FileAccess.READ) as f:
            return f.read()

    def write_bytes(self, path: str, data: bytes) -> None:
        with self.open(path, FileMode.CREATE, FileAccess.WRITE) as f:
            f.write(data)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        with TextHandle(self.open(path, FileMode.OPEN, FileAccess.READ), encoding) as th:
            return th.read()

    def write_text(self, path: str, text: str, encoding: str = "utf-8") -> None:
        with TextHandle(self.open(path, FileMode.CREATE, FileAccess.WRITE), encoding) as th:
            th.write(text)

    def append_text(self, path: str, text: str, encoding: str = "utf-8") -> None:
        with TextHandle(self.open(path, FileMode.APPEND, FileAccess.WRITE), encoding) as th:
            th.write(text)

    # -- attributes and metadata --

    def get_attributes(self, path: str) -> FileAttributes:
        return self._table.get(self.resolve(path)).attributes

    def set_attributes(self, path: str, attributes: FileAttributes) -> None:
        if attributes is None:
            raise VFSArgumentNullError("attributes")
        canonical = self.resolve(path)
        with self._table.lock:
            record = self._table.get(canonical)
            attributes = FileAttributes(attributes)
            if record.is_directory:
                attributes |= FileAttributes.DIRECTORY
            else:
                attributes = FileAttributes(int(attributes) & ~int(FileAttributes.DIRECTORY))
            record.attributes = attributes

    def stat(self, path: str) -> VFSStatResult:
        canonical = self.resolve(path)
        with self._table.lock:
            record = self._table.get(canonical)
            return VFSStatResult(
                size=record.size,
                created_at=record.created_at,
                accessed_at=record.accessed_at,
                modified_at=record.modified_at,
                attributes=int(record.attributes),
                is_dir=record.is_directory,
            )

    # -- deletion --

    def delete_file(self, path: str) -> None:
        self._guard.delete_file(self.resolve(path))

    def delete_directory(self, path: str, recursive: bool = False) -> None:
        self._guard.delete_directory(self.resolve(path), recursive)

    # -- temp files --

    def get_temp_path(self) -> str:
        return self.resolve(self._config.temp_directory)

    def get_temp_file_name(self) -> str:
        """Create an empty file with a random name in the temp directory."""
        name = f"tmp{secrets.token_hex(4).upper()}.tmp"
        path = self._resolver.combine(self.get_temp_path(), name)
        return self.add_file(path)
