"""Unit tests for drafting GitHub releases."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from release_tools.exceptions import ParseError, RemoteAPIError
from release_tools.github.abc import GitHubClientBase
from release_tools.release.drafter import new_draft_release
from release_tools.repositories import RepositoryIdentity

EDITOR_SERVICES = RepositoryIdentity.POWERSHELL_EDITOR_SERVICES


def make_release(tag_name: str, prerelease: bool = False) -> MagicMock:
    """Build a stand-in for a githubkit release model."""
    release = MagicMock()
    release.id = 42
    release.tag_name = tag_name
    release.name = tag_name
    release.html_url = f"https://github.com/PowerShell/PowerShellEditorServices/releases/tag/{tag_name}"
    release.upload_url = "https://uploads.github.com/repos/PowerShell/PowerShellEditorServices/releases/42/assets{?name,label}"
    release.draft = True
    release.prerelease = prerelease
    return release


@pytest.fixture
def adapter() -> AsyncMock:
    """A GitHub adapter that creates a v2.3.0 draft release."""
    mock = AsyncMock(spec=GitHubClientBase)
    mock.create_draft_release.return_value = make_release("v2.3.0")
    return mock


@pytest.mark.asyncio
async def test_new_draft_release(repositories_root: Path, adapter: AsyncMock) -> None:
    """Test that the draft uses the current version and its changelog section."""
    handle = await new_draft_release(EDITOR_SERVICES, adapter, repositories_root)

    kwargs = adapter.create_draft_release.await_args.kwargs
    assert kwargs["tag_name"] == "v2.3.0"
    assert kwargs["name"] == "v2.3.0"
    assert kwargs["target_commitish"] == "release"
    assert kwargs["prerelease"] is False
    assert kwargs["body"].startswith("## v2.3.0\n### Thursday, October 1, 2026\n\n- 🐛 [PowerShellEditorServices #1500]")
    assert "## v2.2.0" not in kwargs["body"]
    assert handle.id == 42
    assert handle.draft is True
    assert handle.assets == []
    adapter.upload_release_asset.assert_not_awaited()


@pytest.mark.asyncio
async def test_new_draft_release_preview(repositories_root: Path, adapter: AsyncMock) -> None:
    """Test that a preview version becomes a pre-release on the configured branch."""
    changelog = repositories_root / "PowerShellEditorServices" / "CHANGELOG.md"
    changelog.write_text(changelog.read_text(encoding="utf-8").replace("## v2.3.0\n", "## v2.4.0-preview.2\n"), encoding="utf-8")
    adapter.create_draft_release.return_value = make_release("v2.4.0-preview.2", prerelease=True)

    handle = await new_draft_release(EDITOR_SERVICES, adapter, repositories_root, release_branch="release/v2.4.0")

    kwargs = adapter.create_draft_release.await_args.kwargs
    assert kwargs["tag_name"] == "v2.4.0-preview.2"
    assert kwargs["target_commitish"] == "release/v2.4.0"
    assert kwargs["prerelease"] is True
    assert handle.prerelease is True


@pytest.mark.asyncio
async def test_new_draft_release_uploads_assets(repositories_root: Path, adapter: AsyncMock, tmp_path: Path) -> None:
    """Test that each asset is uploaded to the new release in order."""
    first = tmp_path / "PowerShellEditorServices.zip"
    second = tmp_path / "checksums.txt"
    first.write_bytes(b"PK\x03\x04")
    second.write_text("abc  PowerShellEditorServices.zip\n", encoding="utf-8")

    handle = await new_draft_release(EDITOR_SERVICES, adapter, repositories_root, assets=[first, second])

    release = adapter.create_draft_release.return_value
    assert [c.args for c in adapter.upload_release_asset.await_args_list] == [(release, first), (release, second)]
    assert handle.assets == ["PowerShellEditorServices.zip", "checksums.txt"]


@pytest.mark.asyncio
async def test_new_draft_release_missing_asset(repositories_root: Path, adapter: AsyncMock, tmp_path: Path) -> None:
    """Test that a missing asset is reported before the release is created."""
    with pytest.raises(FileNotFoundError, match="missing.zip"):
        await new_draft_release(EDITOR_SERVICES, adapter, repositories_root, assets=[tmp_path / "missing.zip"])

    adapter.create_draft_release.assert_not_awaited()


@pytest.mark.asyncio
async def test_new_draft_release_malformed_changelog(repositories_root: Path, adapter: AsyncMock) -> None:
    """Test that no release is created when the version cannot be read."""
    changelog = repositories_root / "PowerShellEditorServices" / "CHANGELOG.md"
    changelog.write_text("# Release History\n\n## Next\n", encoding="utf-8")

    with pytest.raises(ParseError):
        await new_draft_release(EDITOR_SERVICES, adapter, repositories_root)

    adapter.create_draft_release.assert_not_awaited()


@pytest.mark.asyncio
async def test_new_draft_release_propagates_remote_errors(repositories_root: Path, adapter: AsyncMock, tmp_path: Path) -> None:
    """Test that a failed upload surfaces after the draft has been created."""
    asset = tmp_path / "module.zip"
    asset.write_bytes(b"zip")
    adapter.upload_release_asset.side_effect = RemoteAPIError("upload failed", status_code=422)

    with pytest.raises(RemoteAPIError):
        await new_draft_release(EDITOR_SERVICES, adapter, repositories_root, assets=[asset])

    adapter.create_draft_release.assert_awaited_once()
