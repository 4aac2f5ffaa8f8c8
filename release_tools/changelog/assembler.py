"""Assembles a new changelog section from the pull requests merged since the last release."""

import datetime
from collections.abc import Callable
from pathlib import Path

import structlog

from release_tools.changelog.classifier import format_bullet, is_bot
from release_tools.changelog.models import ChangelogUpdateResult, PullRequestRecord
from release_tools.changelog.sections import get_first_section, get_section_bullets
from release_tools.changelog.version import get_version, validate_release_version
from release_tools.github.abc import GitHubClientBase
from release_tools.repositories import (
    RepositoryIdentity,
    RepositoryRole,
    get_changelog_path,
    get_component_repositories,
    get_repository_path,
)
from release_tools.utils.constants import (
    CHANGELOG_COMMIT_MESSAGE,
    CHANGELOG_PREAMBLE_LINE_COUNT,
    DEFAULT_RELEASE_BRANCH,
    IGNORE_LABEL,
    IGNORE_TITLE_PREFIX,
    RELEASE_COMMIT_TITLE_PATTERN,
)
from release_tools.utils.helpers import always_confirm, detect_newline, format_long_date, read_lines, write_lines
from release_tools.vcs.git import GitRepository

logger = structlog.get_logger(__name__)


def is_release_worthy(pull_request: PullRequestRecord) -> bool:
    """Check if a merged pull request belongs in the changelog."""
    if is_bot(pull_request.author):
        return False
    if IGNORE_LABEL in pull_request.labels:
        return False
    if pull_request.title.startswith(IGNORE_TITLE_PREFIX):
        return False
    # Changelog and version bump pull requests from earlier runs of these tools
    if RELEASE_COMMIT_TITLE_PATTERN.match(pull_request.title):
        return False
    return True


def select_pull_requests(pull_requests: list[PullRequestRecord], commits: set[str]) -> list[PullRequestRecord]:
    """Keep the release-worthy pull requests merged as one of the given commits, in their original order."""
    selected = [pr for pr in pull_requests if pr.merge_commit_sha in commits and is_release_worthy(pr)]
    logger.info("Selected pull requests for changelog", total=len(pull_requests), selected=len(selected))
    return selected


def build_subsection(repository: RepositoryIdentity, bullets: list[str], heading_suffix: str = "") -> list[str]:
    """Build a titled block of bullets for one repository."""
    info = repository.info
    heading = f"#### [{info.name}]({info.html_url})"
    if heading_suffix:
        heading += f" {heading_suffix}"
    return [heading, "", *bullets]


def build_section_body(repository: RepositoryIdentity, bullets: list[str], repositories_root: Path) -> list[str]:
    """Build the body of a new changelog section.

    A component repository's body is just its own bullets. An aggregator's
    body has a subsection with its own bullets followed by one subsection per
    component, holding that component's most recent finalized notes verbatim.
    """
    if repository.info.role == RepositoryRole.COMPONENT:
        return list(bullets)

    body = build_subsection(repository, bullets)
    for component in get_component_repositories():
        component_version = get_version(component, repositories_root)
        component_section = get_first_section(read_lines(get_changelog_path(component, repositories_root)))
        body += ["", *build_subsection(component, get_section_bullets(component_section), component_version.tag)]
    return body


def prepend_section(lines: list[str], version: str, date: datetime.date, body: list[str]) -> list[str]:
    """Insert a new dated section above the most recent one, below the changelog's title."""
    preamble = lines[:CHANGELOG_PREAMBLE_LINE_COUNT]
    remainder = lines[CHANGELOG_PREAMBLE_LINE_COUNT:]
    return [*preamble, f"## {version}", f"### {format_long_date(date)}", "", *body, "", *remainder]


async def update_changelog(
    repository: RepositoryIdentity,
    version: str,
    adapter: GitHubClientBase,
    repositories_root: Path,
    release_branch: str = DEFAULT_RELEASE_BRANCH,
    confirm: Callable[[str], bool] = always_confirm,
    git: GitRepository | None = None,
    today: datetime.date | None = None,
) -> ChangelogUpdateResult:
    """Add a section for a new version to a repository's changelog.

    Args:
        repository: Repository whose changelog is updated
        version: New version, with its tag prefix (e.g. v1.2.4)
        adapter: GitHub adapter for the repository
        repositories_root: Directory holding the local checkouts of all known repositories
        release_branch: Branch the changelog commit is made on
        confirm: Asked before branching and committing; declining leaves the updated file uncommitted
        git: Git checkout of the repository (defaults to the one under repositories_root)
        today: Date shown under the new section header (defaults to today)

    Returns:
        Result holding the new section and whether it was committed
    """
    requested_version = validate_release_version(version)
    current_version = get_version(repository, repositories_root)
    if not requested_version.is_newer_than(current_version):
        logger.warning("Requested version is not newer than the current version", requested=version, current=current_version.tag)

    git = git or GitRepository(get_repository_path(repository, repositories_root))
    commits = set(git.list_commits_since(current_version.tag))

    pull_requests = await adapter.list_pull_requests(state="all")
    bullets = [format_bullet(pr, repository) for pr in select_pull_requests(pull_requests, commits)]
    if not bullets:
        logger.warning("No pull requests found since the last release", repository=repository.value, since=current_version.tag)

    body = build_section_body(repository, bullets, repositories_root)
    changelog_path = get_changelog_path(repository, repositories_root)
    lines = prepend_section(read_lines(changelog_path), version, today or datetime.date.today(), body)
    write_lines(changelog_path, lines, newline=detect_newline(changelog_path))
    logger.info("Updated changelog", repository=repository.value, version=version, path=str(changelog_path), bullets=len(bullets))

    result = ChangelogUpdateResult(
        repository=repository.value,
        previous_version=current_version.tag,
        version=version,
        bullets=bullets,
        section=get_first_section(lines),
    )

    commit_message = CHANGELOG_COMMIT_MESSAGE.format(version=version)
    if not confirm(f"Commit '{commit_message}' to branch '{release_branch}' of {repository.value}?"):
        logger.info("Skipping branch and commit", repository=repository.value)
        return result

    git.ensure_branch(release_branch)
    git.stage_file(changelog_path)
    git.commit(commit_message)
    result.committed = True
    return result
