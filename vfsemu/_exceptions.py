import errno


class VFSError(Exception):
    """Base class of every error raised by the emulated file system."""


class VFSArgumentNullError(VFSError, TypeError):
    """Raised when a required argument is ``None``. Subclass of TypeError."""
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Value cannot be None: '{name}'")


class VFSInvalidPathFormError(VFSError, ValueError):
    """Raised when a path is empty or otherwise not of a legal form."""
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"The path is not of a legal form: '{path}'")


class VFSInvalidUncPathError(VFSError, ValueError):
    """Raised when a UNC path lacks the server or the share segment."""
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"The UNC path should be of the form \\\\server\\share: '{path}'"
        )


class VFSFileNotFoundError(VFSError, FileNotFoundError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(errno.ENOENT, f"No such file: '{path}'")


class VFSDirectoryNotFoundError(VFSError, FileNotFoundError):
    """Raised when part of a path (a parent directory) does not exist."""
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            errno.ENOENT, f"Could not find a part of the path: '{path}'"
        )


class VFSFileExistsError(VFSError, FileExistsError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(errno.EEXIST, f"File exists: '{path}'")


class VFSAccessDeniedError(VFSError, PermissionError):
    """Raised for read-only violations and access-mode conflicts."""
    def __init__(self, path: str, reason: str = "Access to the path is denied") -> None:
        self.path = path
        self.reason = reason
        super().__init__(errno.EACCES, f"{reason}: '{path}'")


class VFSDirectoryNotEmptyError(VFSError, OSError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(errno.ENOTEMPTY, f"Directory not empty: '{path}'")
