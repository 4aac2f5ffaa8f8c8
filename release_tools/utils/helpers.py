"""General utility functions and helper classes."""

import datetime
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Change into a directory for the duration of the block, always restoring the previous one."""
    previous = Path.cwd()
    logger.debug("Changing working directory", path=str(path), previous=str(previous))
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


def read_lines(path: Path) -> list[str]:
    """Read a UTF-8 text file as a list of lines without line terminators."""
    # utf-8-sig tolerates a BOM written by other tools; it is dropped on the next write.
    return path.read_text(encoding="utf-8-sig").splitlines()


def detect_newline(path: Path) -> str:
    """Get the line terminator a text file uses, judged by its first line."""
    with path.open(encoding="utf-8-sig", newline="") as file:
        first_line = file.readline()
    return "\r\n" if first_line.endswith("\r\n") else "\n"


def write_lines(path: Path, lines: list[str], newline: str = "\n") -> None:
    """Write lines to a UTF-8 text file without a byte-order mark, replacing its contents."""
    path.write_text("\n".join(lines) + "\n", encoding="utf-8", newline=newline)


def format_long_date(date: datetime.date) -> str:
    """Format a date the long way, e.g. 'Monday, October 19, 2026'."""
    return f"{date:%A}, {date:%B} {date.day}, {date.year}"


def always_confirm(message: str) -> bool:
    """Confirmation callback that accepts without asking."""
    logger.debug("Proceeding without confirmation", message=message)
    return True
