"""Unit tests for utility helper functions."""

import datetime
from pathlib import Path

import pytest

from release_tools.utils.helpers import always_confirm, detect_newline, format_long_date, read_lines, working_directory, write_lines


def test_working_directory_restores_previous(tmp_path: Path) -> None:
    """Test that the previous directory is restored after the block."""
    previous = Path.cwd()
    with working_directory(tmp_path) as path:
        assert Path.cwd() == tmp_path.resolve()
        assert path == tmp_path
    assert Path.cwd() == previous


def test_working_directory_restores_previous_on_error(tmp_path: Path) -> None:
    """Test that the previous directory is restored even when the block raises."""
    previous = Path.cwd()
    with pytest.raises(RuntimeError):
        with working_directory(tmp_path):
            raise RuntimeError("boom")
    assert Path.cwd() == previous


def test_working_directory_missing(tmp_path: Path) -> None:
    """Test that a missing directory raises before anything changes."""
    previous = Path.cwd()
    with pytest.raises(FileNotFoundError):
        with working_directory(tmp_path / "missing"):
            pass
    assert Path.cwd() == previous


@pytest.mark.parametrize(
    "date,expected",
    [
        (datetime.date(2026, 10, 19), "Monday, October 19, 2026"),
        (datetime.date(2026, 1, 1), "Thursday, January 1, 2026"),
        (datetime.date(2024, 2, 29), "Thursday, February 29, 2024"),
    ],
)
def test_format_long_date(date: datetime.date, expected: str) -> None:
    """Test that days are not zero padded and weekday and month are spelled out."""
    assert format_long_date(date) == expected


def test_write_lines_uses_lf_without_bom(tmp_path: Path) -> None:
    """Test that written files are UTF-8 without a byte-order mark and end with a single newline."""
    path = tmp_path / "CHANGELOG.md"
    write_lines(path, ["# Title", "", "- ✨ emoji"])
    assert path.read_bytes() == "# Title\n\n- ✨ emoji\n".encode("utf-8")


def test_read_lines_drops_bom_and_terminators(tmp_path: Path) -> None:
    """Test that a byte-order mark and CRLF terminators do not leak into the lines."""
    path = tmp_path / "CHANGELOG.md"
    path.write_bytes("\ufeff# Title\r\n\r\n## v1.0.0\r\n".encode("utf-8"))
    assert read_lines(path) == ["# Title", "", "## v1.0.0"]


def test_read_then_write_drops_bom(tmp_path: Path) -> None:
    """Test that rewriting a file removes a byte-order mark added by another tool."""
    path = tmp_path / "package.json"
    path.write_bytes(b"\xef\xbb\xbf{\n}\n")
    write_lines(path, read_lines(path))
    assert path.read_bytes() == b"{\n}\n"


def test_always_confirm() -> None:
    """Test that the non-interactive confirmation accepts."""
    assert always_confirm("Commit?") is True


@pytest.mark.parametrize(
    "content,expected",
    [
        (b"{\n}\n", "\n"),
        (b"{\r\n}\r\n", "\r\n"),
        (b"\xef\xbb\xbf<Project>\r\n</Project>\r\n", "\r\n"),
        (b"", "\n"),
    ],
    ids=["lf", "crlf", "crlf with bom", "empty"],
)
def test_detect_newline(tmp_path: Path, content: bytes, expected: str) -> None:
    """Test that the line terminator is taken from the first line."""
    path = tmp_path / "file.txt"
    path.write_bytes(content)
    assert detect_newline(path) == expected


def test_read_then_write_keeps_crlf(tmp_path: Path) -> None:
    """Test that a CRLF file is written back with CRLF terminators only."""
    path = tmp_path / "PowerShellEditorServices.psd1"
    path.write_bytes(b"@{\r\nModuleVersion = '2.2.0'\r\n}\r\n")
    write_lines(path, read_lines(path), newline=detect_newline(path))
    assert path.read_bytes() == b"@{\r\nModuleVersion = '2.2.0'\r\n}\r\n"
