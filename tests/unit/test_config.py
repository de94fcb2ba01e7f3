import pytest

from vfsemu import VFSConfig


def test_posix_defaults():
    config = VFSConfig()
    assert config.path_style == "posix"
    assert config.current_directory == "/"
    assert config.temp_directory == "/tmp/"
    assert config.case_sensitive is True
    assert config.clock is None


def test_windows_defaults():
    config = VFSConfig(path_style="windows")
    assert config.current_directory == "C:\\"
    assert config.temp_directory == "C:\\temp\\"
    assert config.case_sensitive is False


def test_explicit_values_are_kept():
    config = VFSConfig(
        path_style="windows",
        current_directory="D:\\work",
        temp_directory="D:\\scratch\\",
        case_sensitive=True,
    )
    assert config.current_directory == "D:\\work"
    assert config.temp_directory == "D:\\scratch\\"
    assert config.case_sensitive is True


def test_invalid_style_raises():
    with pytest.raises(ValueError, match="path_style"):
        VFSConfig(path_style="vms")


def test_empty_current_directory_raises():
    with pytest.raises(ValueError):
        VFSConfig(current_directory="")
