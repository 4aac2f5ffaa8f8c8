"""Known repositories whose releases are managed by these tools."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from release_tools.exceptions import ValidationError


class RepositoryRole(str, Enum):
    """How a repository's changelog relates to the other managed repositories."""

    AGGREGATOR = "aggregator"
    COMPONENT = "component"


class RepositoryIdentity(str, Enum):
    """Enum for the repositories these tools know how to release."""

    VSCODE_POWERSHELL = "vscode-powershell"
    POWERSHELL_EDITOR_SERVICES = "PowerShellEditorServices"

    @property
    def info(self) -> "RepositoryInfo":
        """Static information about this repository."""
        return REPOSITORIES[self]


@dataclass(frozen=True)
class RepositoryInfo:
    """Static information about a managed repository."""

    owner: str
    name: str
    role: RepositoryRole
    changelog_path: str = "CHANGELOG.md"

    @property
    def full_name(self) -> str:
        """Repository in 'owner/repo' format."""
        return f"{self.owner}/{self.name}"

    @property
    def html_url(self) -> str:
        """Public URL of the repository."""
        return f"https://github.com/{self.full_name}"


REPOSITORIES: dict[RepositoryIdentity, RepositoryInfo] = {
    RepositoryIdentity.VSCODE_POWERSHELL: RepositoryInfo(
        owner="PowerShell",
        name="vscode-powershell",
        role=RepositoryRole.AGGREGATOR,
    ),
    RepositoryIdentity.POWERSHELL_EDITOR_SERVICES: RepositoryInfo(
        owner="PowerShell",
        name="PowerShellEditorServices",
        role=RepositoryRole.COMPONENT,
    ),
}


def get_repository_identity(name: str) -> RepositoryIdentity:
    """Validate a caller-supplied repository name against the known repositories."""
    for identity in RepositoryIdentity:
        if identity.value == name:
            return identity
    known = ", ".join(identity.value for identity in RepositoryIdentity)
    raise ValidationError(f"Unknown repository '{name}' - expected one of: {known}")


def get_component_repositories() -> list[RepositoryIdentity]:
    """Repositories whose finalized notes are folded into an aggregator's changelog."""
    return [identity for identity in RepositoryIdentity if identity.info.role == RepositoryRole.COMPONENT]


def get_repository_path(identity: RepositoryIdentity, repositories_root: Path) -> Path:
    """Local checkout of a repository, expected as a directory named after it under the repositories root."""
    return repositories_root / identity.info.name


def get_changelog_path(identity: RepositoryIdentity, repositories_root: Path) -> Path:
    """Changelog file of a repository's local checkout."""
    return get_repository_path(identity, repositories_root) / identity.info.changelog_path
