from __future__ import annotations

from ._exceptions import VFSAccessDeniedError
from ._flags import FileAccess, FileAttributes


class FileRecord:
    """One entry of the virtual file table: content, attributes and times.

    Timestamps start at 0.0 and are stamped by
    :meth:`VirtualFileTable.adjust_times`; a record does not read the clock
    itself.
    """

    __slots__ = (
        "content",
        "attributes",
        "created_at",
        "accessed_at",
        "modified_at",
    )

    def __init__(
        self,
        content: bytes = b"",
        attributes: FileAttributes = FileAttributes.ARCHIVE,
    ) -> None:
        self.content: bytes = bytes(content)
        self.attributes: FileAttributes = FileAttributes(attributes)
        self.created_at: float = 0.0
        self.accessed_at: float = 0.0
        self.modified_at: float = 0.0

    @classmethod
    def directory(cls) -> FileRecord:
        return cls(b"", FileAttributes.DIRECTORY)

    @property
    def is_directory(self) -> bool:
        return FileAttributes.DIRECTORY in self.attributes

    @property
    def is_read_only(self) -> bool:
        return FileAttributes.READ_ONLY in self.attributes

    @property
    def size(self) -> int:
        return len(self.content)

    def check_access(self, path: str, access: FileAccess) -> None:
        if FileAccess.WRITE in access and self.is_read_only:
            raise VFSAccessDeniedError(path)

    def __repr__(self) -> str:
        return (
            f"FileRecord(size={len(self.content)}, "
            f"attributes={self.attributes!r})"
        )
