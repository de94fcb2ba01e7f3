from enum import Enum, IntFlag


class FileAttributes(IntFlag):
    """Attribute bits of a file record. Values follow the Win32 constants."""

    READ_ONLY = 0x1
    HIDDEN = 0x2
    DIRECTORY = 0x10
    ARCHIVE = 0x20
    NORMAL = 0x80
    ENCRYPTED = 0x4000


class FileMode(Enum):
    CREATE_NEW = 1
    CREATE = 2
    OPEN = 3
    OPEN_OR_CREATE = 4
    TRUNCATE = 5
    APPEND = 6


class FileAccess(IntFlag):
    READ = 1
    WRITE = 2
    READ_WRITE = READ | WRITE


class FileOptions(IntFlag):
    NONE = 0
    DELETE_ON_CLOSE = 0x4000000
    ENCRYPTED = 0x4000


class TimeAdjustments(IntFlag):
    """Selects which timestamps ``VirtualFileTable.adjust_times`` stamps."""

    NONE = 0
    CREATION_TIME = 1
    LAST_ACCESS_TIME = 2
    LAST_WRITE_TIME = 4
    ALL = CREATION_TIME | LAST_ACCESS_TIME | LAST_WRITE_TIME
