import pytest

from vfsemu import FileAccess, FileAttributes, FileMode, VirtualFileSystem
from vfsemu._exceptions import (
    VFSAccessDeniedError,
    VFSDirectoryNotFoundError,
    VFSFileExistsError,
    VFSFileNotFoundError,
)


def test_create_new_on_existing_raises_and_keeps_record(vfs):
    vfs.add_file("/f.bin", b"original")
    record = vfs.table.get("/f.bin")
    with pytest.raises(VFSFileExistsError):
        vfs.open("/f.bin", FileMode.CREATE_NEW)
    assert vfs.table.get("/f.bin") is record
    assert record.content == b"original"


def test_create_new_creates_file(vfs):
    with vfs.open("/f.bin", FileMode.CREATE_NEW) as f:
        f.write(b"x")
    assert vfs.read_bytes("/f.bin") == b"x"


def test_new_record_is_added_at_open(vfs):
    handle = vfs.open("/f.bin", FileMode.OPEN_OR_CREATE)
    assert vfs.is_file("/f.bin")
    assert vfs.table.get("/f.bin").content == b""
    handle.close()


@pytest.mark.parametrize("mode", [FileMode.OPEN, FileMode.TRUNCATE])
def test_open_and_truncate_missing_raise(vfs, mode):
    with pytest.raises(VFSFileNotFoundError):
        vfs.open("/nope.bin", mode)
    assert not vfs.exists("/nope.bin")


@pytest.mark.parametrize(
    "mode",
    [FileMode.CREATE, FileMode.CREATE_NEW, FileMode.OPEN_OR_CREATE, FileMode.APPEND],
)
def test_missing_parent_raises(vfs, mode):
    with pytest.raises(VFSDirectoryNotFoundError):
        vfs.open("/nodir/f.bin", mode)
    assert not vfs.exists("/nodir/f.bin")


def test_missing_parent_checked_before_missing_file(vfs):
    with pytest.raises(VFSDirectoryNotFoundError):
        vfs.open("/nodir/f.bin", FileMode.OPEN)


def test_parent_that_is_a_file_raises(vfs):
    vfs.add_file("/f.bin", b"")
    with pytest.raises(VFSDirectoryNotFoundError):
        vfs.open("/f.bin/child", FileMode.CREATE)


def test_read_only_file_refuses_write_access(vfs):
    vfs.add_file("/ro.bin", b"data", FileAttributes.READ_ONLY)
    for access in (FileAccess.WRITE, FileAccess.READ_WRITE):
        with pytest.raises(VFSAccessDeniedError):
            vfs.open("/ro.bin", FileMode.OPEN, access)
    with pytest.raises(PermissionError):
        vfs.open("/ro.bin", FileMode.CREATE, FileAccess.WRITE)
    assert vfs.read_bytes("/ro.bin") == b"data"


def test_read_only_file_opens_for_read(vfs):
    vfs.add_file("/ro.bin", b"data", FileAttributes.READ_ONLY)
    with vfs.open("/ro.bin", FileMode.OPEN, FileAccess.READ) as f:
        assert f.read() == b"data"


def test_opening_directory_raises(vfs):
    vfs.create_directory("/d")
    with pytest.raises(VFSAccessDeniedError):
        vfs.open("/d", FileMode.OPEN)


def test_relative_path_uses_current_directory(vfs):
    vfs.create_directory("/work")
    vfs.current_directory = "/work"
    with vfs.open("data.bin", FileMode.CREATE) as f:
        assert f.path == "/work/data.bin"
        f.write(b"rel")
    assert vfs.read_bytes("/work/data.bin") == b"rel"


# -------------------------------------------------------------------
#  mode strings
# -------------------------------------------------------------------


def test_wb_then_rb(vfs):
    with vfs.open("/f.bin", "wb") as f:
        f.write(b"hello")
    with vfs.open("/f.bin", "rb") as f:
        assert f.read() == b"hello"


def test_ab_appends(vfs):
    with vfs.open("/f.bin", "wb") as f:
        f.write(b"hello")
    with vfs.open("/f.bin", "ab") as f:
        f.write(b" world")
    assert vfs.read_bytes("/f.bin") == b"hello world"


def test_xb_on_existing_raises(vfs):
    vfs.add_file("/f.bin", b"")
    with pytest.raises(FileExistsError):
        vfs.open("/f.bin", "xb")


def test_w_plus_b_reads_back(vfs):
    with vfs.open("/f.bin", "w+b") as f:
        f.write(b"abc")
        f.seek(0)
        assert f.read() == b"abc"


def test_invalid_mode_string_raises(vfs):
    with pytest.raises(ValueError, match="Invalid mode"):
        vfs.open("/f.bin", "r")


def test_append_defaults_to_write_access(vfs):
    with vfs.open("/f.bin", FileMode.APPEND) as f:
        assert f.access == FileAccess.WRITE


# -------------------------------------------------------------------
#  windows style
# -------------------------------------------------------------------


def test_windows_paths_are_case_insensitive(windows_vfs):
    windows_vfs.create_directory("C:\\Data")
    with windows_vfs.open("c:/data/File.TXT", FileMode.CREATE) as f:
        f.write(b"x")
    assert windows_vfs.read_bytes("C:\\DATA\\file.txt") == b"x"


def test_windows_unc_share_must_exist(windows_vfs):
    with pytest.raises(VFSDirectoryNotFoundError):
        windows_vfs.open("\\\\server\\share\\f.bin", FileMode.CREATE)
    windows_vfs.create_directory("\\\\server\\share")
    with windows_vfs.open("\\\\server\\share\\f.bin", FileMode.CREATE) as f:
        f.write(b"unc")
    assert windows_vfs.read_bytes("//server/share/dir/../f.bin") == b"unc"


def test_other_drive_needs_its_root(windows_vfs):
    with pytest.raises(VFSDirectoryNotFoundError):
        windows_vfs.open("D:\\f.bin", FileMode.CREATE)


def test_posix_config_is_case_sensitive():
    vfs = VirtualFileSystem()
    vfs.write_bytes("/A.bin", b"upper")
    assert not vfs.exists("/a.bin")
