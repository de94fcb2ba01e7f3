"""Deletion with read-only protection.

Every deletion runs in two passes under the table lock: a pre-check pass
that only reads, then a removal pass. The removal pass starts only after
the whole pre-check has succeeded, so a refused deletion leaves the table
exactly as it was.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._exceptions import (
    VFSAccessDeniedError,
    VFSDirectoryNotEmptyError,
    VFSDirectoryNotFoundError,
    VFSFileNotFoundError,
)

if TYPE_CHECKING:
    from ._path import PathResolver
    from ._record import FileRecord
    from ._table import VirtualFileTable

logger = logging.getLogger(__name__)


class DeletionGuard:
    def __init__(self, table: VirtualFileTable, resolver: PathResolver) -> None:
        self._table = table
        self._resolver = resolver

    def delete_file(self, path: str) -> None:
        """Remove the file at canonical *path*.

        Raises:
            VFSDirectoryNotFoundError: the parent directory does not exist.
            VFSFileNotFoundError: there is no entry at *path*.
            VFSAccessDeniedError: *path* is a directory or is read-only.
        """
        table = self._table
        with table.lock:
            parent = self._resolver.get_directory_name(path)
            if parent is not None and not table.is_directory(parent):
                raise VFSDirectoryNotFoundError(path)
            record = table.get(path)
            if record.is_directory:
                raise VFSAccessDeniedError(path, "Is a directory")
            if record.is_read_only:
                logger.debug("refused to delete read-only file %s", path)
                raise VFSAccessDeniedError(path)
            table.remove(path)

    def delete_directory(self, path: str, recursive: bool = False) -> None:
        """Remove the directory at canonical *path*.

        A read-only directory is never removed, whether or not it has
        children. With *recursive*, every descendant is checked before
        anything is removed.

        Raises:
            VFSDirectoryNotFoundError: *path* is missing or not a directory.
            ValueError: *path* is a root directory.
            VFSAccessDeniedError: the directory, or with *recursive* any
                descendant, is read-only.
            VFSDirectoryNotEmptyError: *recursive* is False and the
                directory has children.
        """
        if self._resolver.is_root(path):
            raise ValueError("Cannot remove the root directory.")
        table = self._table
        with table.lock:
            if not table.is_directory(path):
                raise VFSDirectoryNotFoundError(path)
            doomed = self._check_directory(path, recursive)
            self._remove_all(doomed)
        logger.debug("deleted directory %s (%d entries)", path, len(doomed))

    def _check_directory(self, path: str, recursive: bool) -> list[str]:
        table = self._table
        record = table.get(path)
        if record.is_read_only:
            logger.debug("refused to delete read-only directory %s", path)
            raise VFSAccessDeniedError(path)
        descendants = table.descendants(path)
        if descendants and not recursive:
            raise VFSDirectoryNotEmptyError(path)
        for child_path, child in descendants:
            if _is_protected(child):
                logger.debug(
                    "refused to delete %s: %s is read-only", path, child_path
                )
                raise VFSAccessDeniedError(child_path)
        # deepest entries first, the directory itself last
        doomed = sorted(
            (child_path for child_path, _ in descendants),
            key=len,
            reverse=True,
        )
        doomed.append(path)
        return doomed

    def _remove_all(self, paths: list[str]) -> None:
        for doomed in paths:
            self._table.remove(doomed)


def _is_protected(record: FileRecord) -> bool:
    # Read-only files and read-only directories alike.
    return record.is_read_only


def delete_file(table: VirtualFileTable, resolver: PathResolver, path: str) -> None:
    DeletionGuard(table, resolver).delete_file(path)


def delete_directory_recursive(
    table: VirtualFileTable,
    resolver: PathResolver,
    path: str,
    recursive: bool = True,
) -> None:
    DeletionGuard(table, resolver).delete_directory(path, recursive)
