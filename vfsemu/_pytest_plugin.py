"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["vfsemu._pytest_plugin"]

This makes the ``vfs`` and ``windows_vfs`` fixtures available::

    def test_something(vfs):
        vfs.write_bytes("/a.bin", b"hello")
        assert vfs.read_bytes("/a.bin") == b"hello"
"""

import pytest

from ._config import VFSConfig
from ._fs import VirtualFileSystem


class FakeClock:
    """Manually advanced clock for deterministic timestamps."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 1.0) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def vfs_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def vfs(vfs_clock: FakeClock) -> VirtualFileSystem:
    """A POSIX-style :class:`VirtualFileSystem` rooted at ``/``.

    Provides an independent instance per test (function scope), driven by
    the ``vfs_clock`` fixture.
    """
    return VirtualFileSystem(config=VFSConfig(path_style="posix", clock=vfs_clock))


@pytest.fixture
def windows_vfs(vfs_clock: FakeClock) -> VirtualFileSystem:
    """A Windows-style :class:`VirtualFileSystem` whose current directory is ``C:\\``."""
    return VirtualFileSystem(config=VFSConfig(path_style="windows", clock=vfs_clock))
