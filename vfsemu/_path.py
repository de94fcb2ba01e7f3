from __future__ import annotations

import string

from ._exceptions import (
    VFSArgumentNullError,
    VFSInvalidPathFormError,
    VFSInvalidUncPathError,
)

_DRIVE_LETTERS = frozenset(string.ascii_letters)

# Number of leading segments ".." may never pop, per root kind.
_UNC_FLOOR = 2
_POSIX_FLOOR = 0
_DRIVE_FLOOR = 1


class PathResolver:
    """Pure string-to-string path canonicalization.

    Three root kinds are recognized after the current directory has been
    applied:

    * UNC (``\\\\server\\share``): server and share are never popped.
    * POSIX-rooted (``/a/b``): nothing before the first segment to protect.
    * Drive-rooted (``C:\\a``): the drive segment is never popped.

    The resolver holds no state besides its separator conventions; the
    current directory is passed to every :meth:`resolve` call.
    """

    def __init__(
        self, sep: str = "/", altsep: str | None = "\\", drive_letters: bool = False
    ) -> None:
        if len(sep) != 1:
            raise ValueError(f"sep must be a single character, got {sep!r}")
        if altsep == sep:
            altsep = None
        self.sep = sep
        self.altsep = altsep
        self.drive_letters = drive_letters

    @classmethod
    def for_style(cls, style: str) -> PathResolver:
        if style == "windows":
            return cls(sep="\\", altsep="/", drive_letters=True)
        if style == "posix":
            return cls(sep="/", altsep="\\", drive_letters=False)
        raise ValueError(f"Unknown path style: {style!r}")

    @property
    def default_root(self) -> str:
        """Root used when no current directory is given: ``C:\\`` or ``/``."""
        return "C:" + self.sep if self.drive_letters else self.sep

    def __repr__(self) -> str:
        return (
            f"PathResolver(sep={self.sep!r}, altsep={self.altsep!r}, "
            f"drive_letters={self.drive_letters!r})"
        )

    # -- root classification --

    def normalize_separators(self, path: str) -> str:
        if self.altsep:
            return path.replace(self.altsep, self.sep)
        return path

    def _drive(self, path: str) -> str:
        if (
            self.drive_letters
            and len(path) >= 2
            and path[1] == ":"
            and path[0] in _DRIVE_LETTERS
        ):
            return path[:2]
        return ""

    def is_unc(self, path: str) -> bool:
        return self.normalize_separators(path).startswith(self.sep * 2)

    def path_root(self, path: str) -> str:
        """Return the root portion of *path*.

        One of ``\\\\server\\share``, ``C:\\``, ``C:``, a single separator,
        or ``""`` for a relative path.
        """
        if path is None:
            raise VFSArgumentNullError("path")
        sep = self.sep
        p = self.normalize_separators(path)
        if p.startswith(sep * 2):
            server_end = p.find(sep, 2)
            if server_end == -1:
                return p
            share_end = p.find(sep, server_end + 1)
            if share_end == -1:
                return p
            return p[:share_end]
        drive = self._drive(p)
        if drive:
            return p[:3] if p[2:3] == sep else drive
        if p.startswith(sep):
            return sep
        return ""

    def is_rooted(self, path: str) -> bool:
        return bool(self.path_root(path))

    def _canonical_root(self, root: str) -> str:
        if root.startswith(self.sep * 2):
            return root
        if self._drive(root):
            return root[:2] + self.sep
        return root

    # -- canonicalization --

    def _make_absolute(self, path: str, current_directory: str) -> str:
        sep = self.sep
        root = self.path_root(path)
        cwd = self.normalize_separators(current_directory)
        if not root:
            return cwd.rstrip(sep) + sep + path
        if path.startswith(sep * 2):
            return path
        if root == sep:
            return self.path_root(cwd).rstrip(sep) + path
        if root == self._drive(path):
            # Drive-relative ("C:foo"): relative to the current directory
            # when it is on the same drive, to the drive root otherwise.
            rest = path[2:]
            if self._drive(cwd).lower() == root.lower():
                return cwd.rstrip(sep) + sep + rest
            return root + sep + rest
        return path

    def resolve(self, path: str, current_directory: str) -> str:
        """Return the canonical form of *path*.

        Relative paths are resolved against *current_directory*, which must
        itself be rooted.

        Raises:
            VFSArgumentNullError: *path* or *current_directory* is None.
            VFSInvalidPathFormError: *path* is empty, or the current
                directory is not rooted.
            VFSInvalidUncPathError: a UNC path resolves to fewer than two
                segments (server and share).
        """
        if path is None:
            raise VFSArgumentNullError("path")
        if current_directory is None:
            raise VFSArgumentNullError("current_directory")
        if not path:
            raise VFSInvalidPathFormError(path)
        if not self.is_rooted(current_directory):
            raise VFSInvalidPathFormError(current_directory)

        sep = self.sep
        normalized = self.normalize_separators(path)
        has_trailing_sep = len(normalized) > 1 and normalized.endswith(sep)
        effective = self._make_absolute(normalized, current_directory)

        if effective.startswith(sep * 2):
            floor, prefix = _UNC_FLOOR, sep * 2
        elif effective.startswith(sep):
            floor, prefix = _POSIX_FLOOR, sep
        else:
            floor, prefix = _DRIVE_FLOOR, ""

        stack: list[str] = []
        for segment in effective.split(sep):
            if not segment or segment == ".":
                continue
            if segment == "..":
                if len(stack) > floor:
                    stack.pop()
                continue
            stack.append(segment)

        if floor == _UNC_FLOOR and len(stack) < _UNC_FLOOR:
            raise VFSInvalidUncPathError(path)

        full = sep.join(stack)
        if floor == _DRIVE_FLOOR and len(stack) == 1:
            # bare drive is always rendered as its root, "C:\"
            full += sep
        elif has_trailing_sep and stack:
            full += sep
        return prefix + full

    # -- canonical path helpers --

    def get_directory_name(self, path: str) -> str | None:
        """Return the parent of a canonical *path*, or None for a root."""
        sep = self.sep
        p = self.normalize_separators(path)
        root = self.path_root(p)
        body = p[len(root):].strip(sep)
        if not root:
            head = body.rpartition(sep)[0]
            return head or None
        if not body:
            return None
        head = body.rpartition(sep)[0]
        base = self._canonical_root(root)
        if not head:
            return base
        return base.rstrip(sep) + sep + head

    def is_root(self, path: str) -> bool:
        return self.is_rooted(path) and self.get_directory_name(path) is None

    def ancestors(self, path: str) -> list[str]:
        """Return every ancestor directory of *path*, root first."""
        result: list[str] = []
        parent = self.get_directory_name(path)
        while parent is not None:
            result.append(parent)
            parent = self.get_directory_name(parent)
        result.reverse()
        return result

    def get_file_name(self, path: str) -> str:
        return self.normalize_separators(path).rpartition(self.sep)[2]

    def combine(self, *parts: str) -> str:
        sep = self.sep
        result = ""
        for part in parts:
            if part is None:
                raise VFSArgumentNullError("parts")
            part = self.normalize_separators(part)
            if not part:
                continue
            if self.is_rooted(part) or not result:
                result = part
            elif result.endswith(sep):
                result += part
            else:
                result += sep + part
        return result
