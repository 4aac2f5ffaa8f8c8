"""Unit tests for the known repositories."""

from pathlib import Path

import pytest

from release_tools.exceptions import ValidationError
from release_tools.repositories import (
    RepositoryIdentity,
    RepositoryRole,
    get_changelog_path,
    get_component_repositories,
    get_repository_identity,
    get_repository_path,
)


@pytest.mark.parametrize("name", ["vscode-powershell", "PowerShellEditorServices"])
def test_get_repository_identity(name: str) -> None:
    """Test that known names resolve to their identity."""
    assert get_repository_identity(name).info.name == name


@pytest.mark.parametrize("name", ["", "powershelleditorservices", "PowerShell/vscode-powershell", "PSScriptAnalyzer"])
def test_get_repository_identity_rejects_unknown(name: str) -> None:
    """Test that names are matched exactly."""
    with pytest.raises(ValidationError, match="Unknown repository"):
        get_repository_identity(name)


def test_roles() -> None:
    """Test that the extension aggregates the editor services notes."""
    assert RepositoryIdentity.VSCODE_POWERSHELL.info.role == RepositoryRole.AGGREGATOR
    assert get_component_repositories() == [RepositoryIdentity.POWERSHELL_EDITOR_SERVICES]


def test_repository_info() -> None:
    """Test the derived names and URLs."""
    info = RepositoryIdentity.POWERSHELL_EDITOR_SERVICES.info
    assert info.full_name == "PowerShell/PowerShellEditorServices"
    assert info.html_url == "https://github.com/PowerShell/PowerShellEditorServices"


def test_paths() -> None:
    """Test that checkouts are expected as siblings under the repositories root."""
    root = Path("/src")
    assert get_repository_path(RepositoryIdentity.VSCODE_POWERSHELL, root) == Path("/src/vscode-powershell")
    assert get_changelog_path(RepositoryIdentity.POWERSHELL_EDITOR_SERVICES, root) == Path("/src/PowerShellEditorServices/CHANGELOG.md")
