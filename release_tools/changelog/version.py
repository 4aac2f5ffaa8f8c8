"""Derives the current version of a repository from its changelog."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Self

import structlog
from packaging import version as packaging_version

from release_tools.changelog.sections import get_first_section
from release_tools.exceptions import ParseError, ValidationError
from release_tools.repositories import RepositoryIdentity, get_changelog_path
from release_tools.utils.constants import RELEASE_VERSION_PATTERN, VERSION_HEADER_PATTERN, VERSION_PATTERN
from release_tools.utils.helpers import read_lines

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SemanticVersion:
    """A version of the form x.y.z with an optional preview label."""

    major: int
    minor: int
    patch: int
    prerelease: str | None = None

    @classmethod
    def _from_match(cls, match: re.Match[str]) -> Self:
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=match.group("prerelease"),
        )

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a bare or v-prefixed version string such as 'v1.2.3-preview.1'."""
        match = VERSION_PATTERN.match(text.strip())
        if match is None:
            raise ValidationError(f"'{text}' is not a version of the form vX.Y.Z[-preview[.N]]")
        return cls._from_match(match)

    @property
    def core(self) -> str:
        """The x.y.z part of the version."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def is_prerelease(self) -> bool:
        """Whether the version carries a pre-release label."""
        return self.prerelease is not None

    @property
    def tag(self) -> str:
        """Git tag of the version, e.g. 'v1.2.3'."""
        return f"v{self}"

    def is_newer_than(self, other: "SemanticVersion") -> bool:
        """Compare by release precedence, where a preview sorts before its release."""
        return packaging_version.parse(str(self)) > packaging_version.parse(str(other))

    def __str__(self) -> str:
        if self.prerelease:
            return f"{self.core}-{self.prerelease}"
        return self.core


def validate_release_version(version: str) -> SemanticVersion:
    """Validate a caller-supplied release version, which must carry the tag prefix (e.g. 'v1.2.3-preview.1')."""
    if not RELEASE_VERSION_PATTERN.match(version):
        raise ValidationError(f"Version '{version}' must match vX.Y.Z, vX.Y.Z-preview or vX.Y.Z-preview.N")
    return SemanticVersion.parse(version)


def parse_version_header(line: str) -> SemanticVersion:
    """Parse a changelog section header such as '## v1.2.3-preview' into a version."""
    match = VERSION_HEADER_PATTERN.match(line.rstrip())
    if match is None:
        raise ParseError(f"Changelog header '{line}' does not match '## vX.Y.Z[-preview[.N]]'", line=line)
    return SemanticVersion._from_match(match)


def get_version_from_lines(lines: list[str]) -> SemanticVersion:
    """Parse the version of the most recent section of a changelog."""
    section = get_first_section(lines)
    if not section:
        raise ParseError("Changelog has no section header to read a version from")
    return parse_version_header(section[0])


def get_version(repository: RepositoryIdentity, repositories_root: Path) -> SemanticVersion:
    """Get the current version of a repository from the first section of its changelog."""
    changelog_path = get_changelog_path(repository, repositories_root)
    logger.debug("Reading version from changelog", repository=repository.value, path=str(changelog_path))
    current = get_version_from_lines(read_lines(changelog_path))
    logger.info("Found current version", repository=repository.value, version=str(current))
    return current
