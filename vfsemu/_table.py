from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterator

from ._exceptions import VFSFileExistsError, VFSFileNotFoundError
from ._flags import TimeAdjustments
from ._record import FileRecord

logger = logging.getLogger(__name__)


class VirtualFileTable:
    """Mapping from canonical path to :class:`FileRecord`.

    Paths handed to the table must already be canonical; the table only
    folds the trailing separator (and case, when ``case_sensitive`` is
    False) to build its lookup key. Every operation runs under ``lock``,
    a re-entrant lock callers may also hold to make several operations
    atomic.
    """

    def __init__(
        self,
        sep: str = "/",
        case_sensitive: bool = True,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.sep = sep
        self.case_sensitive = case_sensitive
        self._clock = clock
        self.lock = threading.RLock()
        # key -> (path as added, record)
        self._entries: dict[str, tuple[str, FileRecord]] = {}

    def _key(self, path: str) -> str:
        key = path.rstrip(self.sep) if len(path) > 1 else path
        return key if self.case_sensitive else key.lower()

    def now(self) -> float:
        return self._clock() if self._clock is not None else time.time()

    # -- lookup --

    def exists(self, path: str) -> bool:
        with self.lock:
            return self._key(path) in self._entries

    __contains__ = exists

    def get(self, path: str) -> FileRecord:
        with self.lock:
            entry = self._entries.get(self._key(path))
            if entry is None:
                raise VFSFileNotFoundError(path)
            return entry[1]

    def is_directory(self, path: str) -> bool:
        with self.lock:
            entry = self._entries.get(self._key(path))
            return entry is not None and entry[1].is_directory

    def is_file(self, path: str) -> bool:
        with self.lock:
            entry = self._entries.get(self._key(path))
            return entry is not None and not entry[1].is_directory

    # -- mutation --

    def add(self, path: str, record: FileRecord, overwrite: bool = False) -> None:
        key = self._key(path)
        with self.lock:
            if not overwrite and key in self._entries:
                raise VFSFileExistsError(path)
            self._entries[key] = (path, record)
        logger.debug("added %s (%r)", path, record)

    def remove(self, path: str) -> FileRecord:
        with self.lock:
            entry = self._entries.pop(self._key(path), None)
        if entry is None:
            raise VFSFileNotFoundError(path)
        logger.debug("removed %s", path)
        return entry[1]

    def adjust_times(self, record: FileRecord, mask: TimeAdjustments) -> None:
        if not mask:
            return
        with self.lock:
            now = self.now()
            if TimeAdjustments.CREATION_TIME in mask:
                record.created_at = now
            if TimeAdjustments.LAST_ACCESS_TIME in mask:
                record.accessed_at = now
            if TimeAdjustments.LAST_WRITE_TIME in mask:
                record.modified_at = now

    # -- subtree queries --

    def _subtree(self, path: str) -> list[tuple[str, tuple[str, FileRecord]]]:
        key = self._key(path)
        prefix = key if key.endswith(self.sep) else key + self.sep
        with self.lock:
            return [
                (entry_key, entry)
                for entry_key, entry in self._entries.items()
                if entry_key != key and entry_key.startswith(prefix)
            ]

    def descendants(self, path: str) -> list[tuple[str, FileRecord]]:
        """Every entry strictly below *path*, in no particular order."""
        return [entry for _, entry in self._subtree(path)]

    def children(self, path: str) -> list[tuple[str, FileRecord]]:
        """Entries directly below *path*."""
        key = self._key(path)
        prefix_len = len(key if key.endswith(self.sep) else key + self.sep)
        return [
            entry
            for entry_key, entry in self._subtree(path)
            if self.sep not in entry_key[prefix_len:]
        ]

    def paths(self) -> list[str]:
        with self.lock:
            return [entry[0] for entry in self._entries.values()]

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    def __len__(self) -> int:
        with self.lock:
            return len(self._entries)
