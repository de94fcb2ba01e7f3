"""Configuration for a :class:`VirtualFileSystem` instance.

Everything that a real file system would take from the process environment
(separator style, current directory, temp directory, clock) is an explicit
field here, so each instance stays hermetic.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

PathStyle = Literal["posix", "windows"]

_DEFAULT_CURRENT_DIRECTORY = {"posix": "/", "windows": "C:\\"}
_DEFAULT_TEMP_DIRECTORY = {"posix": "/tmp/", "windows": "C:\\temp\\"}


@dataclass
class VFSConfig:
    """Settings of an emulated file system.

    Attributes:
        path_style: "posix" (``/`` separator, case-sensitive) or "windows"
            (``\\`` separator, drive letters, case-insensitive).
        current_directory: Directory relative paths resolve against.
            None selects the style's root.
        temp_directory: Directory returned by ``get_temp_path()``.
            None selects ``/tmp/`` or ``C:\\temp\\``.
        case_sensitive: Whether table lookups compare paths case-sensitively.
            None follows the path style.
        clock: Callable returning the current time as float seconds.
            None uses ``time.time``.
    """

    path_style: PathStyle = "posix"
    current_directory: str | None = None
    temp_directory: str | None = None
    case_sensitive: bool | None = None
    clock: Callable[[], float] | None = None

    def __post_init__(self) -> None:
        if self.path_style not in ("posix", "windows"):
            raise ValueError(
                f"Invalid path_style value: {self.path_style!r}. "
                "Expected 'posix' or 'windows'."
            )
        if self.current_directory is None:
            self.current_directory = _DEFAULT_CURRENT_DIRECTORY[self.path_style]
        if self.temp_directory is None:
            self.temp_directory = _DEFAULT_TEMP_DIRECTORY[self.path_style]
        if self.case_sensitive is None:
            self.case_sensitive = self.path_style == "posix"
        if not self.current_directory:
            raise ValueError("current_directory must not be empty")
        if not self.temp_directory:
            raise ValueError("temp_directory must not be empty")
