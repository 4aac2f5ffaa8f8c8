"""Creates a draft GitHub release from the most recent changelog section."""

from pathlib import Path

import structlog

from release_tools.changelog.sections import get_first_section
from release_tools.changelog.version import get_version
from release_tools.github.abc import GitHubClientBase
from release_tools.release.models import ReleaseHandle
from release_tools.repositories import RepositoryIdentity, get_changelog_path
from release_tools.utils.constants import DEFAULT_RELEASE_BRANCH
from release_tools.utils.helpers import read_lines

logger = structlog.get_logger(__name__)


async def new_draft_release(
    repository: RepositoryIdentity,
    adapter: GitHubClientBase,
    repositories_root: Path,
    assets: list[Path] | None = None,
    release_branch: str = DEFAULT_RELEASE_BRANCH,
) -> ReleaseHandle:
    """Create a draft release for the current version and upload its assets.

    The release is tagged and named v<version>, targets the release branch,
    uses the changelog's most recent section as its body, and is marked as a
    pre-release when the version has a preview label.
    """
    version = get_version(repository, repositories_root)
    body = "\n".join(get_first_section(read_lines(get_changelog_path(repository, repositories_root))))
    for asset in assets or []:
        if not asset.is_file():
            raise FileNotFoundError(f"Release asset not found: {asset}")

    release = await adapter.create_draft_release(
        tag_name=version.tag,
        target_commitish=release_branch,
        name=version.tag,
        body=body,
        prerelease=version.is_prerelease,
    )
    handle = ReleaseHandle.from_github(release)

    for asset in assets or []:
        await adapter.upload_release_asset(release, asset)
        handle.assets.append(asset.name)

    logger.info("Drafted release", repository=repository.value, tag_name=handle.tag_name, html_url=handle.html_url, assets=handle.assets)
    return handle
