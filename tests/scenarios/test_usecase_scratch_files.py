"""Scratch-file use case: temp files that clean up after themselves."""
from vfsemu import FileMode, FileOptions, VFSConfig, VirtualFileSystem


def export_report(vfs, rows):
    """Code under test: stage rows in a scratch file, then publish them."""
    scratch = vfs.get_temp_file_name()
    with vfs.open(scratch, FileMode.OPEN, options=FileOptions.DELETE_ON_CLOSE) as f:
        for row in rows:
            f.write(row.encode() + b"\n")
        f.seek(0)
        staged = f.read()
    vfs.write_bytes("/out/report.csv", staged)
    return scratch


def test_scratch_file_is_gone_after_export():
    vfs = VirtualFileSystem(files={"/out": None})
    scratch = export_report(vfs, ["a,1", "b,2"])
    assert not vfs.exists(scratch)
    assert vfs.read_bytes("/out/report.csv") == b"a,1\nb,2\n"


def test_temp_directory_is_hermetic():
    first = VirtualFileSystem(config=VFSConfig(temp_directory="/scratch/one"))
    second = VirtualFileSystem(config=VFSConfig(temp_directory="/scratch/two"))
    name = first.get_temp_file_name()
    assert name.startswith("/scratch/one/")
    assert not second.exists(name)
    assert second.get_temp_path() == "/scratch/two"
