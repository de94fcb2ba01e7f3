from ._config import VFSConfig
from ._exceptions import (
    VFSAccessDeniedError,
    VFSArgumentNullError,
    VFSDirectoryNotEmptyError,
    VFSDirectoryNotFoundError,
    VFSError,
    VFSFileExistsError,
    VFSFileNotFoundError,
    VFSInvalidPathFormError,
    VFSInvalidUncPathError,
)
from ._flags import FileAccess, FileAttributes, FileMode, FileOptions, TimeAdjustments
from ._fs import VirtualFileSystem
from ._guard import DeletionGuard, delete_directory_recursive, delete_file
from ._handle import FileHandle, open_handle
from ._path import PathResolver
from ._record import FileRecord
from ._table import VirtualFileTable
from ._text import TextHandle
from ._typing import VFSStatResult

__all__ = [
    "VirtualFileSystem",
    "VFSConfig",
    "PathResolver",
    "VirtualFileTable",
    "FileRecord",
    "FileHandle",
    "open_handle",
    "DeletionGuard",
    "delete_file",
    "delete_directory_recursive",
    "TextHandle",
    "VFSStatResult",
    "FileAccess",
    "FileAttributes",
    "FileMode",
    "FileOptions",
    "TimeAdjustments",
    "VFSError",
    "VFSArgumentNullError",
    "VFSInvalidPathFormError",
    "VFSInvalidUncPathError",
    "VFSFileNotFoundError",
    "VFSDirectoryNotFoundError",
    "VFSFileExistsError",
    "VFSAccessDeniedError",
    "VFSDirectoryNotEmptyError",
]
__version__ = "0.1.0"
