"""Tests for reading and writing the hosts file."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from hostie.errors import HostsFileError, HostsFileNotFound, HostsIOError, HostsPermissionDenied
from hostie.hosts_manager import HostsFileManager

_LOGGER = logging.getLogger("hostie.test")


def _manager(path: Path) -> HostsFileManager:
    return HostsFileManager(str(path), _LOGGER)


class TestRead:
    """Verify reads and their failure classification."""

    def test_reads_whole_file(self, tmp_path: Path) -> None:
        path = tmp_path / "hosts"
        path.write_text("127.0.0.1 localhost\n", encoding="utf-8")
        assert _manager(path).read_text() == "127.0.0.1 localhost\n"

    def test_crlf_is_read_as_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "hosts"
        path.write_bytes(b"127.0.0.1 localhost\r\n")
        assert _manager(path).read_text() == "127.0.0.1 localhost\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(HostsFileNotFound) as exc_info:
            _manager(tmp_path / "missing").read_text()
        assert exc_info.value.path == str(tmp_path / "missing")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_permission_denied(self, tmp_path: Path) -> None:
        path = tmp_path / "hosts"
        path.write_text("", encoding="utf-8")
        with patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(HostsPermissionDenied) as exc_info:
                _manager(path).read_text()
        assert "Permission denied" in str(exc_info.value)

    def test_directory_is_other_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(HostsFileError):
            _manager(tmp_path).read_text()

    def test_undecodable_content(self, tmp_path: Path) -> None:
        path = tmp_path / "hosts"
        path.write_bytes(b"127.0.0.1 \xff\xfe\n")
        with pytest.raises(HostsIOError):
            _manager(path).read_text()


class TestWrite:
    """Verify whole-file writes."""

    def test_replaces_content(self, tmp_path: Path) -> None:
        path = tmp_path / "hosts"
        path.write_text("old content that is longer\n", encoding="utf-8")
        _manager(path).write_text("new\n")
        assert path.read_text(encoding="utf-8") == "new\n"

    def test_empty_content_truncates(self, tmp_path: Path) -> None:
        path = tmp_path / "hosts"
        path.write_text("10.0.0.1 a\n", encoding="utf-8")
        _manager(path).write_text("")
        assert path.read_text(encoding="utf-8") == ""

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(HostsFileNotFound):
            _manager(tmp_path / "nope" / "hosts").write_text("x\n")

    def test_unencodable_content_keeps_original(self, tmp_path: Path) -> None:
        """Content that cannot be encoded must not truncate the existing file."""
        path = tmp_path / "hosts"
        path.write_text("127.0.0.1 localhost\n10.0.0.1 keep.local\n", encoding="utf-8")
        with pytest.raises(HostsIOError):
            _manager(path).write_text("127.0.0.1 localhost\n10.0.0.2 bad\udcffname\n")
        assert path.read_text(encoding="utf-8") == "127.0.0.1 localhost\n10.0.0.1 keep.local\n"

    def test_permission_denied(self, tmp_path: Path) -> None:
        path = tmp_path / "hosts"
        path.write_text("10.0.0.1 a\n", encoding="utf-8")
        with patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(HostsPermissionDenied):
                _manager(path).write_text("x\n")
        assert path.read_text(encoding="utf-8") == "10.0.0.1 a\n"
