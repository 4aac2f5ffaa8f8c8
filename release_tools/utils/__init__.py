"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_RELEASE_BRANCH,
    ISSUE_REFERENCE_PATTERN,
    LABEL_EMOJI,
    NO_THANKS,
    RELEASE_VERSION_PATTERN,
    VERSION_HEADER_PATTERN,
)
from .helpers import always_confirm, detect_newline, format_long_date, read_lines, working_directory, write_lines

__all__ = [
    "DEFAULT_RELEASE_BRANCH",
    "ISSUE_REFERENCE_PATTERN",
    "LABEL_EMOJI",
    "NO_THANKS",
    "RELEASE_VERSION_PATTERN",
    "VERSION_HEADER_PATTERN",
    "always_confirm",
    "detect_newline",
    "format_long_date",
    "read_lines",
    "working_directory",
    "write_lines",
]
