"""Changelog parsing and generation."""

from .classifier import find_repository_in_text, format_bullet
from .models import ChangelogUpdateResult, PullRequestRecord
from .sections import get_first_section
from .version import SemanticVersion, get_version, parse_version_header

__all__ = [
    "ChangelogUpdateResult",
    "PullRequestRecord",
    "SemanticVersion",
    "find_repository_in_text",
    "format_bullet",
    "get_first_section",
    "get_version",
    "parse_version_header",
]
